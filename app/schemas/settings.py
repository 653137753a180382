"""
Site settings schemas
"""
from typing import Dict, Optional
from pydantic import BaseModel, Field, field_validator

from app.models.site_setting import SITE_SETTING_DEFAULTS


class SiteSettingsUpdate(BaseModel):
    """Bulk upsert of site settings; only known keys are accepted"""
    values: Dict[str, Optional[str]] = Field(..., description="Setting key -> value")

    @field_validator("values")
    @classmethod
    def _known_keys(cls, v: Dict[str, Optional[str]]) -> Dict[str, Optional[str]]:
        unknown = sorted(set(v) - set(SITE_SETTING_DEFAULTS))
        if unknown:
            raise ValueError(f"Unknown setting keys: {unknown}")
        return v


class SiteSettingsOut(BaseModel):
    """Every known setting, stored value or default"""
    values: Dict[str, Optional[str]]
