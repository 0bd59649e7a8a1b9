from enum import Enum
from typing import Optional
from pydantic import Field, UUID4, model_validator
from datetime import date, datetime

from app.schemas.common import CamelModel
from app.schemas.user import UserSummary


class LeaveStatus(str, Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"


# Leave — Apply (POST /leave-applications)
class LeaveApplicationCreate(CamelModel):
    start_date: date
    end_date: date
    reason: str = Field(min_length=1, max_length=1000)

    @model_validator(mode="after")
    def end_not_before_start(self):
        if self.end_date < self.start_date:
            raise ValueError("endDate must not be before startDate")
        return self


# Leave — Review (PATCH /leave-applications/{id}/status)
class LeaveReview(CamelModel):
    status: LeaveStatus

    @model_validator(mode="after")
    def decision_only(self):
        if self.status == LeaveStatus.pending:
            raise ValueError("status must be approved or rejected")
        return self


class LeaveApplication(CamelModel):
    id: UUID4
    user_id: UUID4
    start_date: date
    end_date: date
    reason: str
    status: LeaveStatus
    reviewed_by: Optional[UUID4] = None
    reviewed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    applicant: Optional[UserSummary] = None
