from uuid import UUID
from typing import List, Optional
from datetime import date

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.api.deps import get_current_user
from app.core.config import settings
from app.models.user import User
from app.models.booking import Booking
from app.schemas.booking import (
    BookingCreate,
    BookingUpdate,
    BookingDelete,
    BookingDeleteResponse,
    Booking as BookingSchema,
)
from app.schemas.common import ErrorResponse
from app.services import booking_service
from app.services.settlement import SettlementError

router = APIRouter(prefix="/bookings", tags=["Bookings"])


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def settlement_http_error(e: SettlementError) -> HTTPException:
    """400 carrying the error kind and the message the dashboard shows verbatim."""
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=ErrorResponse(error=e.kind, message=str(e)).model_dump(),
    )


def _get_or_404(booking_id: UUID, db: Session) -> Booking:
    booking = booking_service.get_booking(db, booking_id)
    if not booking:
        raise HTTPException(status_code=404, detail="Booking not found")
    return booking


# ---------------------------------------------------------------------------
# POST /bookings — record a booking
# ---------------------------------------------------------------------------


@router.post(
    "/",
    response_model=BookingSchema,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
def create_booking(
    data: BookingCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Record a booking. Cash + UPI must add up to `totalAmount`, and when
    snacks were sold, snacks cash + UPI must add up to `snacksAmount`
    (both within 0.01). Theatre and time slot are not checked against the
    configured catalogs.
    """
    try:
        return booking_service.create_booking(db, data, current_user)
    except SettlementError as e:
        raise settlement_http_error(e)


# ---------------------------------------------------------------------------
# GET /bookings — recent bookings
# ---------------------------------------------------------------------------


@router.get("/", response_model=List[BookingSchema])
def list_bookings(
    limit: Optional[int] = Query(None, ge=1, le=500),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Most recently created bookings first."""
    return booking_service.list_bookings(db, limit or settings.BOOKING_LIST_DEFAULT_LIMIT)


@router.get("/date-range", response_model=List[BookingSchema])
def list_bookings_in_range(
    start_date: date = Query(..., description="First booking date (YYYY-MM-DD)"),
    end_date: date = Query(..., description="Last booking date, inclusive (YYYY-MM-DD)"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    if start_date > end_date:
        raise HTTPException(status_code=400, detail="start_date must not be after end_date")
    return booking_service.bookings_between(db, start_date, end_date)


@router.get("/{booking_id}", response_model=BookingSchema)
def get_booking(
    booking_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return _get_or_404(booking_id, db)


# ---------------------------------------------------------------------------
# PATCH /bookings/{id} — edit guests, phone or a payment split
# ---------------------------------------------------------------------------


@router.patch(
    "/{booking_id}",
    response_model=BookingSchema,
    responses={400: {"model": ErrorResponse}},
)
def edit_booking(
    booking_id: UUID,
    changes: BookingUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Totals stay fixed. Sending `cashAmount` re-derives `upiAmount` as
    `totalAmount - cashAmount` (never below zero); sending only `upiAmount`
    re-derives cash. The snack pair behaves the same against `snacksAmount`.
    """
    booking = _get_or_404(booking_id, db)
    try:
        return booking_service.edit_booking(db, booking, changes, current_user)
    except SettlementError as e:
        raise settlement_http_error(e)


# ---------------------------------------------------------------------------
# DELETE /bookings/{id} — remove with a reason
# ---------------------------------------------------------------------------


@router.delete("/{booking_id}", response_model=BookingDeleteResponse)
def delete_booking(
    booking_id: UUID,
    body: BookingDelete = Body(...),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """The row is removed; the reason and comment are kept in the activity log."""
    booking = _get_or_404(booking_id, db)
    booking_service.delete_booking(db, booking, body.reason, body.comment, current_user)
    return BookingDeleteResponse(success=True, id=booking_id, reason=body.reason)
