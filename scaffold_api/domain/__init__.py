"""
DOMAIN LAYER

This layer contains:
- Entities: Business objects with identity (User)
- Events: Domain event contract for future dispatch
- Ports: Interfaces that infrastructure implements
- Services: Pure domain logic (no I/O)
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no FastAPI, Strawberry, Prisma, Pydantic)
2. NO I/O operations
3. Only depends on Python stdlib
"""
