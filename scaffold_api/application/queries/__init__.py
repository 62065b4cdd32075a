"""
Queries - Read operations (CQRS pattern).

- hello/ → GetHelloHandler, SayHelloHandler
- app/   → GetAppInfoHandler, GetHealthHandler, GetAppSettingsHandler
"""
