"""
API Routers - FastAPI endpoint definitions.
"""

from scaffold_api.presentation.api.hello import router as hello_router
from scaffold_api.presentation.api.app_info import router as app_info_router

__all__ = [
    "hello_router",
    "app_info_router",
]
