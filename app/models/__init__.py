"""
Database models
"""
from app.models.user import User
from app.models.user_role import UserRoleAssignment, AppRole
from app.models.activity import ActivityStatus
from app.models.booking import Booking, BookingStatus
from app.models.order import Order, OrderStatus
from app.models.job import JobPosting, JobApplication, ApplicationStatus
from app.models.portfolio import PortfolioItem, PORTFOLIO_CATEGORIES
from app.models.team import TeamMember
from app.models.catalog import ServiceOffering
from app.models.site_setting import SiteSetting, SITE_SETTING_DEFAULTS
from app.models.audit_log import AuditLog

__all__ = [
    "User",
    "UserRoleAssignment",
    "AppRole",
    "ActivityStatus",
    "Booking",
    "BookingStatus",
    "Order",
    "OrderStatus",
    "JobPosting",
    "JobApplication",
    "ApplicationStatus",
    "PortfolioItem",
    "PORTFOLIO_CATEGORIES",
    "TeamMember",
    "ServiceOffering",
    "SiteSetting",
    "SITE_SETTING_DEFAULTS",
    "AuditLog",
]
