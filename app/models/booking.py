import uuid
from sqlalchemy import Column, String, DateTime, func, DECIMAL, Integer, ForeignKey, Date
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from app.db.session import Base

class Booking(Base):
    __tablename__ = "bookings"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    theatre_name = Column(String(120), nullable=False, index=True)
    time_slot = Column(String(60), nullable=False, index=True)  # free text from the slot catalog
    booking_date = Column(Date, nullable=False, index=True)
    guests = Column(Integer, nullable=False)
    phone_number = Column(String(15), nullable=True)

    # Primary charge: cash_amount + upi_amount == total_amount
    total_amount = Column(DECIMAL(10, 2), nullable=False, default=0)
    cash_amount = Column(DECIMAL(10, 2), nullable=False, default=0)
    upi_amount = Column(DECIMAL(10, 2), nullable=False, default=0)

    # Snack add-on, settled independently of the primary charge
    snacks_amount = Column(DECIMAL(10, 2), nullable=False, default=0)
    snacks_cash = Column(DECIMAL(10, 2), nullable=False, default=0)
    snacks_upi = Column(DECIMAL(10, 2), nullable=False, default=0)

    created_by = Column(UUID(as_uuid=True), ForeignKey("users.id"), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=True)

    creator = relationship("User")
