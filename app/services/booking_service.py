import logging
from datetime import date, datetime, timezone
from typing import List, Optional

from sqlalchemy.orm import Session

from app.models.booking import Booking
from app.models.user import User
from app.schemas.booking import (
    Booking as BookingSchema,
    BookingCreate,
    BookingUpdate,
    DeletionReason,
)
from app.services.activity_service import log_activity
from app.services.settlement import SettlementError, rebalance, validate_settlement

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = (
    "guests",
    "phone_number",
    "cash_amount",
    "upi_amount",
    "snacks_cash",
    "snacks_upi",
)


def get_booking(db: Session, booking_id) -> Optional[Booking]:
    return db.get(Booking, booking_id)


def list_bookings(db: Session, limit: int = 50) -> List[Booking]:
    return db.query(Booking).order_by(Booking.created_at.desc()).limit(limit).all()


def bookings_between(db: Session, start: date, end: date) -> List[Booking]:
    return (
        db.query(Booking)
        .filter(Booking.booking_date >= start, Booking.booking_date <= end)
        .order_by(Booking.booking_date.desc())
        .all()
    )


def create_booking(db: Session, data: BookingCreate, user: User) -> Booking:
    """Persist a booking once its payment split has passed the settlement gate."""
    try:
        validate_settlement(data)
    except SettlementError as e:
        logger.info("Rejected booking for %s: %s", data.theatre_name, e.kind)
        raise

    booking = Booking(**data.model_dump(), created_by=user.id)
    db.add(booking)
    db.flush()

    log_activity(
        db, user.id, "CREATE", "BOOKING", booking.id,
        details=f"Created booking for {data.theatre_name}",
    )
    db.commit()
    db.refresh(booking)
    logger.info("Booking %s created by %s.", booking.id, user.id)
    return booking


def _as_create(booking: Booking) -> BookingCreate:
    """Current state of a stored booking as a validatable payload."""
    return BookingCreate.model_construct(
        theatre_name=booking.theatre_name,
        time_slot=booking.time_slot,
        booking_date=booking.booking_date,
        guests=booking.guests,
        phone_number=booking.phone_number,
        total_amount=float(booking.total_amount or 0),
        cash_amount=float(booking.cash_amount or 0),
        upi_amount=float(booking.upi_amount or 0),
        snacks_amount=float(booking.snacks_amount or 0),
        snacks_cash=float(booking.snacks_cash or 0),
        snacks_upi=float(booking.snacks_upi or 0),
    )


def apply_edit(current: BookingCreate, changes: BookingUpdate) -> BookingCreate:
    """
    Merge an edit into a booking payload.

    Totals are fixed anchors: for each payment pair only one side is taken
    from the edit and the other is re-derived (cash wins if both are sent).
    The merged payload is fully validated; raises ``SettlementError``.
    """
    updates = changes.model_dump(exclude_unset=True)
    merged = current.model_copy(
        update={k: updates[k] for k in ("guests", "phone_number") if k in updates}
    )

    rebalanced = False
    for pair in (("cash_amount", "upi_amount"), ("snacks_cash", "snacks_upi")):
        changed = next((f for f in pair if updates.get(f) is not None), None)
        if changed is None:
            continue
        merged = rebalance(merged.model_copy(update={changed: updates[changed]}), changed)
        rebalanced = True

    if not rebalanced:
        validate_settlement(merged)
    return merged


def edit_booking(db: Session, booking: Booking, changes: BookingUpdate, user: User) -> Booking:
    try:
        merged = apply_edit(_as_create(booking), changes)
    except SettlementError as e:
        logger.info("Rejected edit of booking %s: %s", booking.id, e.kind)
        raise

    changed = {}
    for field in EDITABLE_FIELDS:
        new = getattr(merged, field)
        old = getattr(booking, field)
        if field.endswith(("_amount", "_cash", "_upi")):
            if old is not None and abs(float(old) - new) < 0.005:
                continue
        elif old == new:
            continue
        setattr(booking, field, new)
        changed[field] = new

    booking.updated_at = datetime.now(timezone.utc)
    log_activity(
        db, user.id, "UPDATE", "BOOKING", booking.id,
        details=f"Updated booking for {booking.theatre_name}",
        data={"changes": changed},
    )
    db.commit()
    db.refresh(booking)
    logger.info("Booking %s edited by %s: %s", booking.id, user.id, sorted(changed))
    return booking


def delete_booking(
    db: Session,
    booking: Booking,
    reason: DeletionReason,
    comment: Optional[str],
    user: User,
) -> None:
    """
    Hard-delete a booking. The reason, comment and a snapshot of the row
    survive only in the activity log.
    """
    snapshot = BookingSchema.model_validate(booking).model_dump(mode="json")
    booking_id = booking.id
    log_activity(
        db, user.id, "DELETE", "BOOKING", booking_id,
        details=f"Deleted booking for {booking.theatre_name} ({reason.value})",
        data={"reason": reason.value, "comment": comment, "booking": snapshot},
    )
    db.delete(booking)
    db.commit()
    logger.info("Booking %s deleted by %s, reason=%s.", booking_id, user.id, reason.value)
