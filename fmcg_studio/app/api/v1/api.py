"""
V1 API Router - aggregates all v1 endpoints.
"""
from fastapi import APIRouter

from fmcg_studio.app.api.v1.endpoints import dashboard, downloads, forecast, health, home, ideation

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(home.router, tags=["home"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
api_router.include_router(forecast.router, prefix="/trend-forecasting", tags=["trend-forecasting"])
api_router.include_router(ideation.router, prefix="/product-ideation", tags=["product-ideation"])
api_router.include_router(downloads.router, tags=["downloads"])
