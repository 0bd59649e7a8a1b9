from enum import Enum
from typing import Optional
from pydantic import Field, UUID4
from datetime import date, datetime

from app.schemas.common import CamelModel


class ExpenseCategory(str, Enum):
    utilities = "Utilities"
    maintenance = "Maintenance"
    staff_salaries = "Staff Salaries"
    equipment = "Equipment"
    marketing = "Marketing"
    rent = "Rent"
    supplies = "Supplies"
    insurance = "Insurance"
    other = "Other"


# Expense — Create (POST /expenses)
class ExpenseCreate(CamelModel):
    category: ExpenseCategory
    description: str = Field(min_length=1, max_length=500)
    amount: float = Field(ge=0, allow_inf_nan=False)
    expense_date: date


class Expense(CamelModel):
    id: UUID4
    category: ExpenseCategory
    description: str
    amount: float
    expense_date: date
    created_by: Optional[UUID4] = None
    created_at: Optional[datetime] = None
