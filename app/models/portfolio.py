"""
Portfolio item model
"""
from sqlalchemy import Column, Integer, String, Boolean, Date, DateTime, Text, JSON
from sqlalchemy.sql import func
from app.db.base import Base


PORTFOLIO_CATEGORIES = [
    "Web Application",
    "Mobile App",
    "E-commerce",
    "Corporate Website",
    "Landing Page",
    "Dashboard",
    "API/Backend",
    "Other",
]


class PortfolioItem(Base):
    __tablename__ = "portfolio_items"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    slug = Column(String, unique=True, nullable=False, index=True)
    description = Column(Text, nullable=True)
    full_description = Column(Text, nullable=True)
    category = Column(String, nullable=True)
    image_url = Column(String, nullable=True)
    technologies = Column(JSON, nullable=False, default=list)
    client_name = Column(String, nullable=True)
    live_url = Column(String, nullable=True)
    github_url = Column(String, nullable=True)
    completion_date = Column(Date, nullable=True)
    is_featured = Column(Boolean, default=False, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False, index=True)
    display_order = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.current_timestamp(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.current_timestamp(), onupdate=func.current_timestamp(), nullable=False)
