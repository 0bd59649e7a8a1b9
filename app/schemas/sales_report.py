from typing import Optional
from pydantic import Field, UUID4
from datetime import date, datetime

from app.schemas.common import CamelModel


# Sales report — Generate (POST /sales-reports/generate)
class SalesReportGenerate(CamelModel):
    report_date: date = Field(alias="date")


class SalesReport(CamelModel):
    id: UUID4
    report_date: date
    total_revenue: float
    food_sales: float
    screen_sales: float
    total_bookings: int
    total_guests: int
    avg_booking_value: float
    created_by: Optional[UUID4] = None
    created_at: Optional[datetime] = None
