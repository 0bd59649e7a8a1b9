from sqlalchemy import Column, String, DateTime, func, ForeignKey, Text
from sqlalchemy.dialects.postgresql import UUID
from app.db.session import Base

class Configuration(Base):
    __tablename__ = "configurations"

    key = Column(String(80), primary_key=True)  # theatres, time_slots
    value = Column(Text, nullable=False)  # JSON-encoded list of strings
    updated_by = Column(UUID(as_uuid=True), ForeignKey("users.id"), nullable=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
