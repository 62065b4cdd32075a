"""Hello queries."""

from scaffold_api.application.queries.hello.get_hello import GetHelloHandler
from scaffold_api.application.queries.hello.say_hello import SayHelloHandler

__all__ = ["GetHelloHandler", "SayHelloHandler"]
