from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.api.deps import get_current_user
from app.core.config import settings
from app.models.user import User
from app.models.booking import Booking
from app.schemas.analytics import (
    DailyRevenuePoint,
    PaymentMethodBreakdown,
    TimeSlotPerformance,
)
from app.services import analytics
from app.services.booking_service import bookings_between

router = APIRouter(prefix="/analytics", tags=["Analytics"])


@router.get("/daily-revenue", response_model=List[DailyRevenuePoint])
def get_daily_revenue(
    days: Optional[int] = Query(
        None,
        le=analytics.MAX_WINDOW_DAYS,
        description="Trailing window length, today included",
    ),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    One point per day for the last `days` days (default 7), oldest first.
    Days without bookings appear with zero revenue. A window of zero or
    less returns an empty list; more than a year is a 422.
    """
    window = settings.ANALYTICS_DEFAULT_WINDOW_DAYS if days is None else days
    bounds = analytics.window_bounds(window)
    if bounds is None:
        return []
    start, end = bounds
    return analytics.daily_revenue(bookings_between(db, start, end), window, today=end)


@router.get("/payment-methods", response_model=PaymentMethodBreakdown)
def get_payment_methods(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Lifetime cash vs UPI totals including snacks. Percentages are left to the caller."""
    return analytics.payment_method_breakdown(db.query(Booking).all())


@router.get("/time-slots", response_model=List[TimeSlotPerformance])
def get_time_slot_performance(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Bookings and revenue per literal time-slot label, in the order each
    slot first appears.
    """
    bookings = db.query(Booking).order_by(Booking.created_at).all()
    return analytics.time_slot_performance(bookings)


@router.get("/time-slots/busiest", response_model=Optional[TimeSlotPerformance])
def get_busiest_time_slot(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Highest-revenue slot (first seen wins a tie), or null with no bookings."""
    bookings = db.query(Booking).order_by(Booking.created_at).all()
    return analytics.busiest_time_slot(analytics.time_slot_performance(bookings))
