from uuid import UUID
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.api.deps import get_current_admin_user
from app.models.user import User
from app.schemas.user import UserAccount, UserCreate, UserRole, UserRoleUpdate
from app.services import user_service
from app.services.user_service import UserManagementError

router = APIRouter(prefix="/admin/users", tags=["Admin - Users"])


def _get_or_404(user_id: UUID, db: Session) -> User:
    user = db.get(User, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.get("/", response_model=List[UserAccount])
def list_users(
    role: Optional[UserRole] = Query(None),
    include_inactive: bool = Query(False),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    return user_service.list_users(db, role=role, include_inactive=include_inactive)


@router.post("/", response_model=UserAccount, status_code=status.HTTP_201_CREATED)
def create_user(
    data: UserCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    """Add a staff account. Sign-in tokens are issued out of band."""
    try:
        return user_service.create_user(db, data, current_user)
    except UserManagementError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.patch("/{user_id}/role", response_model=UserAccount)
def change_user_role(
    user_id: UUID,
    body: UserRoleUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    user = _get_or_404(user_id, db)
    try:
        return user_service.change_role(db, user, body.role, current_user)
    except UserManagementError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/{user_id}", response_model=UserAccount)
def deactivate_user(
    user_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    """Revokes access; the account stays on record as inactive."""
    user = _get_or_404(user_id, db)
    try:
        return user_service.deactivate_user(db, user, current_user)
    except UserManagementError as e:
        raise HTTPException(status_code=400, detail=str(e))
