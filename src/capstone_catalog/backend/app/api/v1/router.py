# capstone_catalog/backend/app/api/v1/router.py
from fastapi import APIRouter

from capstone_catalog.backend.app.api.v1.projects import feed as project_feed
from capstone_catalog.backend.app.api.v1.projects import router as project_router

api_router = APIRouter()
api_router.include_router(project_feed.router)
api_router.include_router(project_router.router)
