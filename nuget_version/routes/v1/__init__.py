from fastapi import APIRouter
from nuget_version.routes.v1.versions.router import router as versions_router

router = APIRouter(prefix="/api/v1")
router.include_router(versions_router)
