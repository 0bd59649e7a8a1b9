from enum import Enum
from typing import Optional
from pydantic import Field, UUID4, field_validator
from datetime import date, datetime

from app.schemas.common import CamelModel


class DeletionReason(str, Enum):
    cancellation = "cancellation"
    reschedule = "reschedule"
    mistake = "mistake"


# Booking — Create (POST /bookings)
class BookingCreate(CamelModel):
    theatre_name: str = Field(min_length=1, max_length=120)
    time_slot: str = Field(min_length=1, max_length=60)
    booking_date: date
    guests: int
    phone_number: Optional[str] = Field(None, min_length=10, max_length=15)
    # Sign and settlement checks live in app.services.settlement, not here
    total_amount: float
    cash_amount: float
    upi_amount: float
    snacks_amount: float = 0
    snacks_cash: float = 0
    snacks_upi: float = 0

    @field_validator("phone_number", mode="before")
    @classmethod
    def parse_empty_str_to_none(cls, v):
        if v == "":
            return None
        return v


# Booking — Edit (PATCH /bookings/{id})
class BookingUpdate(CamelModel):
    guests: Optional[int] = None
    phone_number: Optional[str] = Field(None, min_length=10, max_length=15)
    cash_amount: Optional[float] = None
    upi_amount: Optional[float] = None
    snacks_cash: Optional[float] = None
    snacks_upi: Optional[float] = None

    @field_validator("phone_number", mode="before")
    @classmethod
    def parse_empty_str_to_none(cls, v):
        if v == "":
            return None
        return v


# Booking — Delete (DELETE /bookings/{id})
class BookingDelete(CamelModel):
    reason: DeletionReason
    comment: Optional[str] = Field(None, max_length=500)


# Booking — Full response
class Booking(CamelModel):
    id: UUID4
    theatre_name: str
    time_slot: str
    booking_date: date
    guests: int
    phone_number: Optional[str] = None
    total_amount: float
    cash_amount: float
    upi_amount: float
    snacks_amount: float
    snacks_cash: float
    snacks_upi: float
    created_by: Optional[UUID4] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class BookingDeleteResponse(CamelModel):
    success: bool
    id: UUID4
    reason: DeletionReason
