from fastapi import APIRouter

from wine_pathmap.routers.paths import router as paths_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(paths_router)
