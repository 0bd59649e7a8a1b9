from typing import List, Optional
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.api.deps import get_current_user
from app.core.config import settings
from app.models.user import User
from app.schemas.expense import Expense, ExpenseCategory, ExpenseCreate
from app.services import expense_service

router = APIRouter(prefix="/expenses", tags=["Expenses"])


@router.post("/", response_model=Expense, status_code=status.HTTP_201_CREATED)
def create_expense(
    data: ExpenseCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return expense_service.create_expense(db, data, current_user)


@router.get("/", response_model=List[Expense])
def list_expenses(
    category: Optional[ExpenseCategory] = Query(None, description='e.g. "Utilities" or "Staff Salaries"'),
    limit: Optional[int] = Query(None, ge=1, le=500),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Most recently recorded expenses first, optionally for one category."""
    return expense_service.list_expenses(
        db, limit or settings.BOOKING_LIST_DEFAULT_LIMIT, category=category
    )


@router.get("/date-range", response_model=List[Expense])
def list_expenses_in_range(
    start_date: date = Query(..., description="First expense date (YYYY-MM-DD)"),
    end_date: date = Query(..., description="Last expense date, inclusive (YYYY-MM-DD)"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    if start_date > end_date:
        raise HTTPException(status_code=400, detail="start_date must not be after end_date")
    return expense_service.expenses_between(db, start_date, end_date)
