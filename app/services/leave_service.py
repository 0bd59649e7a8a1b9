import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from app.models.leave_application import LeaveApplication
from app.models.user import User
from app.schemas.leave import LeaveApplicationCreate, LeaveStatus
from app.services.activity_service import log_activity

logger = logging.getLogger(__name__)


class LeaveAlreadyReviewed(ValueError):
    def __init__(self, status: str):
        self.status = status
        super().__init__(f"Leave application is already {status}")


def get_leave(db: Session, leave_id) -> Optional[LeaveApplication]:
    return db.get(LeaveApplication, leave_id)


def list_leaves(
    db: Session,
    user: Optional[User] = None,
    status: Optional[LeaveStatus] = None,
) -> List[LeaveApplication]:
    """Newest first; pass ``user`` to see only that person's applications."""
    query = db.query(LeaveApplication).options(joinedload(LeaveApplication.applicant))
    if user is not None:
        query = query.filter(LeaveApplication.user_id == user.id)
    if status is not None:
        query = query.filter(LeaveApplication.status == status.value)
    return query.order_by(LeaveApplication.created_at.desc()).all()


def apply_for_leave(db: Session, data: LeaveApplicationCreate, user: User) -> LeaveApplication:
    leave = LeaveApplication(
        user_id=user.id,
        start_date=data.start_date,
        end_date=data.end_date,
        reason=data.reason,
        status=LeaveStatus.pending.value,
    )
    db.add(leave)
    db.flush()

    log_activity(
        db, user.id, "CREATE", "LEAVE_APPLICATION", leave.id,
        details=f"Applied for leave from {data.start_date.isoformat()} to {data.end_date.isoformat()}",
    )
    db.commit()
    db.refresh(leave)
    logger.info("Leave %s requested by %s (%s to %s).", leave.id, user.id, data.start_date, data.end_date)
    return leave


def review_leave(
    db: Session,
    leave: LeaveApplication,
    status: LeaveStatus,
    reviewer: User,
) -> LeaveApplication:
    """Approve or reject a pending application; a decision is final."""
    if leave.status != LeaveStatus.pending.value:
        raise LeaveAlreadyReviewed(leave.status)

    leave.status = status.value
    leave.reviewed_by = reviewer.id
    leave.reviewed_at = datetime.now(timezone.utc)
    log_activity(
        db, reviewer.id, "UPDATE", "LEAVE_APPLICATION", leave.id,
        details=f"{status.value.capitalize()} leave application",
        data={"status": status.value, "applicant": str(leave.user_id)},
    )
    db.commit()
    db.refresh(leave)
    logger.info("Leave %s %s by %s.", leave.id, status.value, reviewer.id)
    return leave
