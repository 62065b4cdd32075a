"""scaffold-api: FastAPI + Strawberry GraphQL service scaffold backed by Prisma."""

__version__ = "1.0.0"
__app_name__ = "scaffold-api"
