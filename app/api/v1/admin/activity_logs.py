from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session, joinedload

from app.db.session import get_db
from app.api.deps import get_current_admin_user
from app.models.user import User
from app.models.activity_log import ActivityLog
from app.schemas.activity_log import ActivityLogEntry
from app.schemas.user import UserSummary
from app.schemas.common import PaginatedResponse
from app.services.activity_service import load_details

router = APIRouter(prefix="/admin/activity-logs", tags=["Admin - Activity"])


def _serialize_entry(entry: ActivityLog) -> ActivityLogEntry:
    user_summary = None
    if entry.user:
        user_summary = UserSummary(
            id=entry.user.id,
            email=entry.user.email,
            full_name=entry.user.full_name,
            role=entry.user.role,
        )

    return ActivityLogEntry(
        id=entry.id,
        action=entry.action,
        resource_type=entry.resource_type,
        resource_id=entry.resource_id,
        details=entry.details,
        data=load_details(entry),
        created_at=entry.created_at,
        user=user_summary,
    )


@router.get("/", response_model=PaginatedResponse[ActivityLogEntry])
def list_activity(
    # --- Filters ---
    resource_type: Optional[str] = Query(None, description="BOOKING, SALES_REPORT, CONFIGURATION, EXPENSE, LEAVE_APPLICATION, CUSTOMER_TICKET or USER"),
    action: Optional[str] = Query(None, description="CREATE, UPDATE, DELETE or GENERATE"),
    resource_id: Optional[str] = Query(None, description="Entries about one record, e.g. a deleted booking"),
    # --- Pagination ---
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    """
    Audit trail of staff actions, newest first. Deleted bookings survive
    only here: their `data` holds the deletion reason, comment and a
    snapshot of the removed row.
    """
    query = db.query(ActivityLog).options(joinedload(ActivityLog.user))

    if resource_type:
        query = query.filter(ActivityLog.resource_type == resource_type.upper())
    if action:
        query = query.filter(ActivityLog.action == action.upper())
    if resource_id:
        query = query.filter(ActivityLog.resource_id == resource_id)

    total = query.count()
    entries = (
        query.order_by(ActivityLog.created_at.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )

    return PaginatedResponse(
        data=[_serialize_entry(e) for e in entries],
        total=total,
        page=page,
        limit=limit,
        total_pages=-(-total // limit) if total else 0,
    )
