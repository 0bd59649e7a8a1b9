import logging
from datetime import date
from typing import List

from sqlalchemy.orm import Session

from app.models.booking import Booking
from app.models.sales_report import SalesReport
from app.models.user import User
from app.services.activity_service import log_activity
from app.services.analytics import daily_sales_summary

logger = logging.getLogger(__name__)


def generate_daily_report(db: Session, report_date: date, user: User) -> SalesReport:
    """Snapshot one day's bookings into a new sales report row."""
    bookings = db.query(Booking).filter(Booking.booking_date == report_date).all()
    summary = daily_sales_summary(bookings, report_date)

    report = SalesReport(**summary.model_dump(), created_by=user.id)
    db.add(report)
    db.flush()

    log_activity(
        db, user.id, "GENERATE", "SALES_REPORT", report.id,
        details=f"Generated sales report for {report_date.isoformat()}",
    )
    db.commit()
    db.refresh(report)
    logger.info(
        "Sales report for %s generated: %d bookings, revenue %.2f.",
        report_date, summary.total_bookings, summary.total_revenue,
    )
    return report


def list_reports(db: Session, start: date, end: date) -> List[SalesReport]:
    return (
        db.query(SalesReport)
        .filter(SalesReport.report_date >= start, SalesReport.report_date <= end)
        .order_by(SalesReport.report_date.desc(), SalesReport.created_at.desc())
        .all()
    )
