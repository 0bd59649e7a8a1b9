import logging
from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from app.models.expense import Expense
from app.models.user import User
from app.schemas.expense import ExpenseCategory, ExpenseCreate
from app.services.activity_service import log_activity

logger = logging.getLogger(__name__)


def list_expenses(
    db: Session,
    limit: int = 50,
    category: Optional[ExpenseCategory] = None,
) -> List[Expense]:
    query = db.query(Expense)
    if category is not None:
        query = query.filter(Expense.category == category.value)
    return query.order_by(Expense.created_at.desc()).limit(limit).all()


def expenses_between(db: Session, start: date, end: date) -> List[Expense]:
    return (
        db.query(Expense)
        .filter(Expense.expense_date >= start, Expense.expense_date <= end)
        .order_by(Expense.expense_date.desc())
        .all()
    )


def create_expense(db: Session, data: ExpenseCreate, user: User) -> Expense:
    expense = Expense(
        category=data.category.value,
        description=data.description,
        amount=data.amount,
        expense_date=data.expense_date,
        created_by=user.id,
    )
    db.add(expense)
    db.flush()

    log_activity(
        db, user.id, "CREATE", "EXPENSE", expense.id,
        details=f"Created expense: {data.description}",
        data={"category": data.category.value, "amount": data.amount},
    )
    db.commit()
    db.refresh(expense)
    logger.info("Expense %s (%s, %.2f) recorded by %s.", expense.id, data.category.value, data.amount, user.id)
    return expense
