import json
import logging
from sqlalchemy.orm import Session
from app.models.configuration import Configuration
from app.services.activity_service import log_activity

logger = logging.getLogger(__name__)

THEATRES_KEY = "theatres"
TIME_SLOTS_KEY = "time_slots"

DEFAULT_THEATRES = [
    "Screen 1",
    "Screen 2",
    "Screen 3",
    "VIP Screen",
    "Premium Hall",
]
DEFAULT_TIME_SLOTS = [
    "10:00 AM - 12:00 PM",
    "12:00 PM - 2:00 PM",
    "2:00 PM - 4:00 PM",
    "4:00 PM - 6:00 PM",
    "6:00 PM - 8:00 PM",
    "8:00 PM - 10:00 PM",
]


def _get_list(db: Session, key: str, default: list[str]) -> list[str]:
    row = db.get(Configuration, key)
    if row and row.value:
        try:
            value = json.loads(row.value)
        except (json.JSONDecodeError, TypeError):
            logger.warning("Configuration %s holds invalid JSON; using defaults.", key)
            return list(default)
        if isinstance(value, list):
            return [str(v) for v in value]
    return list(default)


def _set_list(db: Session, key: str, values: list[str], user_id) -> None:
    row = db.get(Configuration, key)
    if not row:
        row = Configuration(key=key, value=json.dumps(values), updated_by=user_id)
        db.add(row)
    else:
        row.value = json.dumps(values)
        row.updated_by = user_id


def get_catalog(db: Session) -> dict:
    return {
        "theatres": _get_list(db, THEATRES_KEY, DEFAULT_THEATRES),
        "time_slots": _get_list(db, TIME_SLOTS_KEY, DEFAULT_TIME_SLOTS),
    }


def update_catalog(db: Session, theatres: list[str], time_slots: list[str], user_id) -> dict:
    """
    Replace both catalogs. Existing bookings are not re-checked against
    the new lists.
    """
    _set_list(db, THEATRES_KEY, theatres, user_id)
    _set_list(db, TIME_SLOTS_KEY, time_slots, user_id)
    log_activity(
        db, user_id, "UPDATE", "CONFIGURATION", None,
        details=f"Updated catalogs: {len(theatres)} theatres, {len(time_slots)} time slots",
        data={"theatres": theatres, "time_slots": time_slots},
    )
    db.commit()
    logger.info("Catalog configuration updated by %s.", user_id)
    return get_catalog(db)
