import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.models.user import User
from app.schemas.user import UserCreate, UserRole
from app.services.activity_service import log_activity

logger = logging.getLogger(__name__)


class UserManagementError(ValueError):
    pass


def list_users(db: Session, role: Optional[UserRole] = None, include_inactive: bool = False) -> List[User]:
    query = db.query(User)
    if role is not None:
        query = query.filter(User.role == role.value)
    if not include_inactive:
        query = query.filter(User.is_active.is_(True))
    return query.order_by(User.created_at.desc(), User.email).all()


def create_user(db: Session, data: UserCreate, admin: User) -> User:
    if db.query(User).filter(User.email == data.email).first():
        raise UserManagementError("User with this email already exists")

    user = User(
        email=data.email,
        first_name=data.first_name,
        last_name=data.last_name,
        role=data.role.value,
    )
    db.add(user)
    db.flush()

    log_activity(
        db, admin.id, "CREATE", "USER", user.id,
        details=f"Created {data.role.value} account {data.email}",
    )
    db.commit()
    db.refresh(user)
    logger.info("User %s (%s) created by %s.", user.email, user.role, admin.id)
    return user


def change_role(db: Session, user: User, role: UserRole, admin: User) -> User:
    """Admins cannot change their own role, so there is always one left."""
    if user.id == admin.id:
        raise UserManagementError("You cannot change your own role")

    previous = user.role
    user.role = role.value
    log_activity(
        db, admin.id, "UPDATE", "USER", user.id,
        details=f"Changed role of {user.email} from {previous} to {role.value}",
        data={"from": previous, "to": role.value},
    )
    db.commit()
    db.refresh(user)
    logger.info("Role of %s changed %s -> %s by %s.", user.email, previous, role.value, admin.id)
    return user


def deactivate_user(db: Session, user: User, admin: User) -> User:
    """
    Remove a staff member's access. The row is kept because bookings and
    the activity log still point at it; their tokens stop working at once.
    """
    if user.id == admin.id:
        raise UserManagementError("You cannot remove your own account")

    user.is_active = False
    log_activity(
        db, admin.id, "DELETE", "USER", user.id,
        details=f"Deactivated account {user.email}",
    )
    db.commit()
    db.refresh(user)
    logger.info("User %s deactivated by %s.", user.email, admin.id)
    return user
