"""
Main API router
"""
from fastapi import APIRouter

from app.api.v1 import (
    health,
    version,
    auth,
    functions,
    access,
    services,
    portfolio,
    team,
    careers,
    settings,
    bookings,
    orders,
    dashboard,
)
from app.api.v1.admin import admin_router

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(version.router, tags=["version"])
api_router.include_router(auth.router, prefix="/auth", tags=["authentication"])
api_router.include_router(functions.router, prefix="/functions", tags=["functions"])
api_router.include_router(access.router, prefix="/access", tags=["access"])
api_router.include_router(services.router, prefix="/services", tags=["services"])
api_router.include_router(portfolio.router, prefix="/portfolio", tags=["portfolio"])
api_router.include_router(team.router, prefix="/team", tags=["team"])
api_router.include_router(careers.router, prefix="/careers", tags=["careers"])
api_router.include_router(settings.router, prefix="/site-settings", tags=["site-settings"])
api_router.include_router(bookings.router, prefix="/bookings", tags=["bookings"])
api_router.include_router(orders.router, prefix="/orders", tags=["orders"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
api_router.include_router(admin_router)
