# routers/__init__.py
"""
API routers.

- /api/newtranslation, /api/translations - translation records
- /api/definitions/{word}                - word meanings
"""

from fastapi import APIRouter

from .translations import router as translations_router
from .definitions import router as definitions_router

# Aggregate all routers
router = APIRouter()
router.include_router(translations_router, tags=["translations"])
router.include_router(definitions_router, tags=["definitions"])

__all__ = ["router"]
