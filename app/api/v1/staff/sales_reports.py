from typing import List
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.api.deps import get_current_user
from app.models.user import User
from app.schemas.sales_report import SalesReport, SalesReportGenerate
from app.services import sales_report_service

router = APIRouter(prefix="/sales-reports", tags=["Sales Reports"])


@router.get("/", response_model=List[SalesReport])
def list_sales_reports(
    start_date: date = Query(..., description="First report date (YYYY-MM-DD)"),
    end_date: date = Query(..., description="Last report date, inclusive (YYYY-MM-DD)"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    if start_date > end_date:
        raise HTTPException(status_code=400, detail="start_date must not be after end_date")
    return sales_report_service.list_reports(db, start_date, end_date)


@router.post("/generate", response_model=SalesReport, status_code=status.HTTP_201_CREATED)
def generate_sales_report(
    body: SalesReportGenerate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Snapshot the given day's bookings: screen sales (primary charge), food
    sales (snacks), their sum, booking and guest counts, and the average
    revenue per booking. Each call stores a new report.
    """
    return sales_report_service.generate_daily_report(db, body.report_date, current_user)
