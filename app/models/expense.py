import uuid
from sqlalchemy import Column, String, DateTime, func, DECIMAL, ForeignKey, Date, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from app.db.session import Base

class Expense(Base):
    __tablename__ = "expenses"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    category = Column(String(40), nullable=False, index=True)  # Utilities, Rent, Staff Salaries, ...
    description = Column(Text, nullable=False)
    amount = Column(DECIMAL(10, 2), nullable=False)
    expense_date = Column(Date, nullable=False, index=True)

    created_by = Column(UUID(as_uuid=True), ForeignKey("users.id"), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    creator = relationship("User")
