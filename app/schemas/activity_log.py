from typing import Any, Dict, Optional
from pydantic import UUID4
from datetime import datetime

from app.schemas.common import CamelModel
from app.schemas.user import UserSummary


class ActivityLogEntry(CamelModel):
    id: UUID4
    action: str
    resource_type: str
    resource_id: Optional[str] = None
    details: Optional[str] = None
    data: Dict[str, Any] = {}
    created_at: Optional[datetime] = None
    user: Optional[UserSummary] = None
