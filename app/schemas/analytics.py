from datetime import date

from app.schemas.common import CamelModel


class DailyRevenuePoint(CamelModel):
    date: str           # "2026-02-25"
    revenue: float      # total_amount + snacks_amount
    bookings: int


class PaymentMethodBreakdown(CamelModel):
    cash: float
    # Electronic payments; the key stays "upi" for existing dashboards
    upi: float


class TimeSlotPerformance(CamelModel):
    time_slot: str
    bookings: int
    revenue: float


class DailySalesSummary(CamelModel):
    report_date: date
    total_revenue: float
    food_sales: float
    screen_sales: float
    total_bookings: int
    total_guests: int
    avg_booking_value: float
