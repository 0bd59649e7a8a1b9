from uuid import UUID
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.api.deps import get_current_user, get_current_admin_user
from app.models.user import User
from app.schemas.leave import (
    LeaveApplication,
    LeaveApplicationCreate,
    LeaveReview,
    LeaveStatus,
)
from app.services import leave_service

router = APIRouter(prefix="/leave-applications", tags=["Leave"])


@router.post("/", response_model=LeaveApplication, status_code=status.HTTP_201_CREATED)
def apply_for_leave(
    data: LeaveApplicationCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Applications start as `pending` until an admin reviews them."""
    return leave_service.apply_for_leave(db, data, current_user)


@router.get("/", response_model=List[LeaveApplication])
def list_leave_applications(
    status: Optional[LeaveStatus] = Query(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Admins see every application; employees see their own."""
    owner = None if current_user.role == "admin" else current_user
    return leave_service.list_leaves(db, user=owner, status=status)


@router.patch("/{leave_id}/status", response_model=LeaveApplication)
def review_leave_application(
    leave_id: UUID,
    body: LeaveReview,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    """Approve or reject a pending application. Decisions cannot be changed."""
    leave = leave_service.get_leave(db, leave_id)
    if not leave:
        raise HTTPException(status_code=404, detail="Leave application not found")
    try:
        return leave_service.review_leave(db, leave, body.status, current_user)
    except leave_service.LeaveAlreadyReviewed as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
