"""
HelloService - Greeting rules for the hello slice.
"""

DEFAULT_GREETING = "Hello, World!"


class HelloService:
    def get_hello_message(self) -> str:
        return DEFAULT_GREETING

    def say_hello(self, name: str) -> str:
        return f"Hello, {name}!"
