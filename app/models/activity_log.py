import uuid
from sqlalchemy import Column, String, DateTime, func, ForeignKey, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from app.db.session import Base

class ActivityLog(Base):
    __tablename__ = "activity_logs"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(UUID(as_uuid=True), ForeignKey("users.id"), nullable=False, index=True)
    action = Column(String(20), nullable=False, index=True)  # CREATE, UPDATE, DELETE, GENERATE
    resource_type = Column(String(40), nullable=False, index=True)  # BOOKING, SALES_REPORT, CONFIGURATION, EXPENSE, LEAVE_APPLICATION, CUSTOMER_TICKET, USER
    # Plain string: deleted bookings keep their id here after the row is gone
    resource_id = Column(String(64), nullable=True, index=True)
    details = Column(Text, nullable=True)
    details_json = Column(Text, default="{}")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    user = relationship("User")
