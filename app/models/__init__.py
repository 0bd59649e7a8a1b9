from app.models.user import User
from app.models.booking import Booking
from app.models.activity_log import ActivityLog
from app.models.configuration import Configuration
from app.models.sales_report import SalesReport
from app.models.expense import Expense
from app.models.leave_application import LeaveApplication
from app.models.customer_ticket import CustomerTicket
