from fastapi import APIRouter

from app.api.home_routes import router as home_router
from app.api.load_testing_router import router as load_testing_router
from app.api.dashboard_router import router as dashboard_router

api_router = APIRouter()
api_router.include_router(
    home_router,
    prefix="/api",
    tags=["home"],
)

api_router.include_router(
    load_testing_router,
    prefix="/api",
    tags=["Load Testing"]
)

api_router.include_router(
    dashboard_router,
    tags=["Dashboard"]
)
