# /projectinfo/api/routes.py
# This module defines the main API router for the Project Info application, which includes all the
# individual endpoint routers.
from fastapi import APIRouter
from ..api.projectinfo import router as projectinfo_router

router = APIRouter()
router.include_router(projectinfo_router)
