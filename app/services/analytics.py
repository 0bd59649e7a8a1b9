"""
Dashboard aggregates computed from a snapshot of the booking ledger.

Every function takes an already-fetched sequence of bookings (ORM rows or
anything with the same attributes), reads it once or twice and returns
fresh schema objects. Nothing is cached or written back; records are
summed as-is.
"""
from datetime import date, timedelta
from typing import Iterable, List, Optional, Sequence

from app.schemas.analytics import (
    DailyRevenuePoint,
    DailySalesSummary,
    PaymentMethodBreakdown,
    TimeSlotPerformance,
)

DEFAULT_WINDOW_DAYS = 7
MAX_WINDOW_DAYS = 366


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _num(value) -> float:
    return 0.0 if value is None else float(value)


def _as_date(value) -> date:
    if isinstance(value, str):
        return date.fromisoformat(value[:10])
    return value


def booking_revenue(booking) -> float:
    """Primary charge plus snacks — what a booking brought in."""
    return _num(booking.total_amount) + _num(booking.snacks_amount)


def window_bounds(window_days: int, today: Optional[date] = None) -> Optional[tuple]:
    """
    First and last day of a trailing window ending today, or None if empty.

    Windows longer than ``MAX_WINDOW_DAYS`` are clamped to it.
    """
    if window_days <= 0:
        return None
    today = today or date.today()
    try:
        start = today - timedelta(days=min(window_days, MAX_WINDOW_DAYS) - 1)
    except OverflowError:
        return None
    return start, today


# ---------------------------------------------------------------------------
# Aggregates
# ---------------------------------------------------------------------------


def daily_revenue(
    bookings: Iterable,
    window_days: int = DEFAULT_WINDOW_DAYS,
    today: Optional[date] = None,
) -> List[DailyRevenuePoint]:
    """
    Revenue and booking count for each of the last ``window_days`` days.

    The window includes today; days without bookings are zero-filled so
    charts keep one bar per day. Points are ordered oldest first. A
    non-positive window yields an empty list and an oversized one is
    clamped to ``MAX_WINDOW_DAYS``.
    """
    bounds = window_bounds(window_days, today)
    if bounds is None:
        return []
    start, end = bounds

    revenue = {start + timedelta(days=i): 0.0 for i in range((end - start).days + 1)}
    counts = dict.fromkeys(revenue, 0)

    for b in bookings:
        day = _as_date(b.booking_date)
        if start <= day <= end:
            revenue[day] += booking_revenue(b)
            counts[day] += 1

    return [
        DailyRevenuePoint(date=day.isoformat(), revenue=revenue[day], bookings=counts[day])
        for day in sorted(revenue)
    ]


def payment_method_breakdown(bookings: Iterable) -> PaymentMethodBreakdown:
    """Lifetime cash vs electronic totals, snacks included. Raw sums only."""
    cash = 0.0
    upi = 0.0
    for b in bookings:
        cash += _num(b.cash_amount) + _num(b.snacks_cash)
        upi += _num(b.upi_amount) + _num(b.snacks_upi)
    return PaymentMethodBreakdown(cash=cash, upi=upi)


def time_slot_performance(bookings: Iterable) -> List[TimeSlotPerformance]:
    """
    Bookings and revenue per time slot.

    Slots are grouped by their literal label ("2:30 PM" and "2:30PM" are
    different slots) and returned in the order they are first seen.
    """
    counts = {}
    revenue = {}
    for b in bookings:
        slot = b.time_slot
        if slot not in counts:
            counts[slot] = 0
            revenue[slot] = 0.0
        counts[slot] += 1
        revenue[slot] += booking_revenue(b)

    return [
        TimeSlotPerformance(time_slot=slot, bookings=counts[slot], revenue=revenue[slot])
        for slot in counts
    ]


def busiest_time_slot(
    performance: Sequence[TimeSlotPerformance],
) -> Optional[TimeSlotPerformance]:
    """Highest-revenue slot; on a tie the first one in the sequence wins."""
    if not performance:
        return None
    return max(performance, key=lambda p: p.revenue)


def daily_sales_summary(bookings: Iterable, report_date: date) -> DailySalesSummary:
    """Totals for a single booking date, as stored in a sales report."""
    screen = 0.0
    food = 0.0
    count = 0
    guests = 0
    for b in bookings:
        if _as_date(b.booking_date) != report_date:
            continue
        screen += _num(b.total_amount)
        food += _num(b.snacks_amount)
        guests += b.guests or 0
        count += 1

    total = screen + food
    return DailySalesSummary(
        report_date=report_date,
        total_revenue=total,
        food_sales=food,
        screen_sales=screen,
        total_bookings=count,
        total_guests=guests,
        avg_booking_value=total / count if count else 0.0,
    )
