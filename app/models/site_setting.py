"""
Site settings model - key/value rows stored in the database
"""
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.sql import func
from app.db.base import Base


class SiteSetting(Base):
    __tablename__ = "site_settings"

    id = Column(Integer, primary_key=True, index=True)
    key = Column(String, unique=True, nullable=False, index=True)
    value = Column(Text, nullable=True)
    updated_by = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.current_timestamp(), onupdate=func.current_timestamp(), nullable=False)


# Defaults used when a key has no row (or an empty value)
SITE_SETTING_DEFAULTS = {
    "site_name": "YessBangal",
    "site_tagline": "Innovative IT Solutions",
    "logo_url": None,
    "banner_url": None,
    "hero_banner_url": None,
    "contact_phone_1": "+88 019 162 11111",
    "contact_phone_2": "+880 1XXX-XXXXXX",
    "contact_email_1": "yessbangla.bd@gmail.com",
    "contact_email_2": "support@yessbangal.com",
    "contact_address_line_1": "11/A, Main Road # 3, Plot # 10",
    "contact_address_line_2": "Mirpur, Dhaka - 1216",
    "business_hours_1": "Sat - Thu: 9AM - 6PM",
    "business_hours_2": "Friday: Closed",
    "social_facebook": "",
    "social_twitter": "",
    "social_instagram": "",
    "social_linkedin": "",
    "social_youtube": "",
}
