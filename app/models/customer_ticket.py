import uuid
from sqlalchemy import Column, String, DateTime, func, ForeignKey, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from app.db.session import Base

class CustomerTicket(Base):
    __tablename__ = "customer_tickets"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    priority = Column(String(10), default="medium", nullable=False)  # low, medium, high
    status = Column(String(20), default="open", nullable=False, index=True)  # open, in_progress, closed

    customer_name = Column(String(120), nullable=False)
    customer_email = Column(String(255), nullable=True)
    customer_phone = Column(String(15), nullable=True)

    assigned_to = Column(UUID(as_uuid=True), ForeignKey("users.id"), nullable=True, index=True)
    created_by = Column(UUID(as_uuid=True), ForeignKey("users.id"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=True)

    assignee = relationship("User", foreign_keys=[assigned_to])
    creator = relationship("User", foreign_keys=[created_by])
