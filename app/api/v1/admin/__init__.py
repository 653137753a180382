"""
Admin API routers
"""
from fastapi import APIRouter

from app.api.v1.admin import (
    applications as admin_applications,
    bookings as admin_bookings,
    dashboard as admin_dashboard,
    jobs as admin_jobs,
    orders as admin_orders,
    portfolio as admin_portfolio,
    services as admin_services,
    settings as admin_settings,
    team as admin_team,
    users as admin_users,
)

admin_router = APIRouter(prefix="/admin", tags=["admin"])
admin_router.include_router(admin_dashboard.router, prefix="/dashboard", tags=["admin-dashboard"])
admin_router.include_router(admin_bookings.router, prefix="/bookings", tags=["admin-bookings"])
admin_router.include_router(admin_orders.router, prefix="/orders", tags=["admin-orders"])
admin_router.include_router(admin_applications.router, prefix="/applications", tags=["admin-applications"])
admin_router.include_router(admin_jobs.router, prefix="/jobs", tags=["admin-jobs"])
admin_router.include_router(admin_portfolio.router, prefix="/portfolio", tags=["admin-portfolio"])
admin_router.include_router(admin_team.router, prefix="/team", tags=["admin-team"])
admin_router.include_router(admin_services.router, prefix="/services", tags=["admin-services"])
admin_router.include_router(admin_users.router, prefix="/users", tags=["admin-users"])
admin_router.include_router(admin_settings.router, prefix="/settings", tags=["admin-settings"])
