"""
Status values for resources whose lifecycle is a single active flag
"""
import enum


class ActivityStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"

    @classmethod
    def from_flag(cls, is_active: bool) -> "ActivityStatus":
        return cls.ACTIVE if is_active else cls.INACTIVE

    def to_flag(self) -> bool:
        return self is ActivityStatus.ACTIVE
