from app.schemas.common import PaginatedResponse, ErrorResponse, CamelModel
from app.schemas.user import UserSummary, UserAccount, UserCreate, UserRoleUpdate, UserRole
from app.schemas.booking import (
    Booking, BookingCreate, BookingUpdate, BookingDelete, BookingDeleteResponse,
    DeletionReason,
)
from app.schemas.analytics import (
    DailyRevenuePoint, PaymentMethodBreakdown, TimeSlotPerformance, DailySalesSummary,
)
from app.schemas.configuration import CatalogConfig, CatalogConfigUpdate
from app.schemas.sales_report import SalesReport, SalesReportGenerate
from app.schemas.activity_log import ActivityLogEntry
from app.schemas.expense import Expense, ExpenseCreate, ExpenseCategory
from app.schemas.leave import LeaveApplication, LeaveApplicationCreate, LeaveReview, LeaveStatus
from app.schemas.ticket import (
    CustomerTicket, CustomerTicketCreate, TicketStatusUpdate, TicketPriority, TicketStatus,
)
