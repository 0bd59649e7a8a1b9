import json
from sqlalchemy.orm import Session
from app.models.activity_log import ActivityLog


def log_activity(
    db: Session,
    user_id,
    action: str,
    resource_type: str,
    resource_id=None,
    details: str | None = None,
    data: dict | None = None,
) -> ActivityLog:
    """Queue an activity row on the session; the caller's commit persists it."""
    entry = ActivityLog(
        user_id=user_id,
        action=action,
        resource_type=resource_type,
        resource_id=str(resource_id) if resource_id is not None else None,
        details=details or "",
        details_json=json.dumps(data or {}, ensure_ascii=False, default=str),
    )
    db.add(entry)
    return entry


def load_details(entry: ActivityLog) -> dict:
    try:
        return json.loads(entry.details_json or "{}")
    except (json.JSONDecodeError, TypeError):
        return {}
