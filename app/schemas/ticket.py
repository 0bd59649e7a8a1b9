from enum import Enum
from typing import Optional
from pydantic import Field, UUID4, field_validator
from datetime import datetime

from app.schemas.common import CamelModel


class TicketPriority(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"


class TicketStatus(str, Enum):
    open = "open"
    in_progress = "in_progress"
    closed = "closed"


# Ticket — Create (POST /customer-tickets); always opens as "open"
class CustomerTicketCreate(CamelModel):
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1, max_length=2000)
    priority: TicketPriority = TicketPriority.medium
    customer_name: str = Field(min_length=1, max_length=120)
    customer_email: Optional[str] = Field(None, max_length=255)
    customer_phone: Optional[str] = Field(None, min_length=10, max_length=15)

    @field_validator("customer_email", "customer_phone", mode="before")
    @classmethod
    def parse_empty_str_to_none(cls, v):
        if v == "":
            return None
        return v


# Ticket — Status change (PATCH /customer-tickets/{id}/status)
class TicketStatusUpdate(CamelModel):
    status: TicketStatus
    assigned_to: Optional[UUID4] = None


class CustomerTicket(CamelModel):
    id: UUID4
    title: str
    description: str
    priority: TicketPriority
    status: TicketStatus
    customer_name: str
    customer_email: Optional[str] = None
    customer_phone: Optional[str] = None
    assigned_to: Optional[UUID4] = None
    created_by: Optional[UUID4] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
