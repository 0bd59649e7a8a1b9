import uuid
from sqlalchemy import Column, DateTime, func, DECIMAL, Integer, ForeignKey, Date
from sqlalchemy.dialects.postgresql import UUID
from app.db.session import Base

class SalesReport(Base):
    __tablename__ = "sales_reports"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    report_date = Column(Date, nullable=False, index=True)
    total_revenue = Column(DECIMAL(12, 2), nullable=False, default=0)
    food_sales = Column(DECIMAL(12, 2), nullable=False, default=0)    # snacks
    screen_sales = Column(DECIMAL(12, 2), nullable=False, default=0)  # primary charge
    total_bookings = Column(Integer, nullable=False, default=0)
    total_guests = Column(Integer, nullable=False, default=0)
    avg_booking_value = Column(DECIMAL(12, 2), nullable=False, default=0)
    created_by = Column(UUID(as_uuid=True), ForeignKey("users.id"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
