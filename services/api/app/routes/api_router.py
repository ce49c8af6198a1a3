"""Central API router composition.

This module is responsible for mounting individual route modules on the main app
router and providing a single import point for `FastAPI.include_router(...)`.
"""

from fastapi import APIRouter

from .projects import router as projects_router
from .team import router as team_router

router = APIRouter(prefix="/api")

router.include_router(projects_router)
router.include_router(team_router)
