from enum import Enum
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field, UUID4, field_validator

from app.schemas.common import CamelModel


# Compact user for nested responses (booking creator, activity log actor)
class UserSummary(BaseModel):
    id: UUID4
    email: str
    full_name: str
    role: str

    class Config:
        from_attributes = True


class UserRole(str, Enum):
    employee = "employee"
    admin = "admin"


# Admin — Create staff account (POST /admin/users)
class UserCreate(CamelModel):
    email: str = Field(min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    role: UserRole = UserRole.employee

    @field_validator("email", mode="before")
    @classmethod
    def normalise_email(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v


# Admin — Change role (PATCH /admin/users/{id}/role)
class UserRoleUpdate(CamelModel):
    role: UserRole


class UserAccount(CamelModel):
    id: UUID4
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    full_name: str
    role: UserRole
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
