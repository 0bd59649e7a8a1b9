from fastapi import APIRouter

# Staff — bookings ledger
from app.api.v1.staff.bookings import router as bookings_router

# Staff — dashboard analytics & sales reports
from app.api.v1.staff.analytics import router as analytics_router
from app.api.v1.staff.sales_reports import router as sales_reports_router

# Staff — theatre & time-slot catalogs (writes are admin-only)
from app.api.v1.staff.config import router as config_router

# Staff — back office: expenses, leave, customer tickets
from app.api.v1.staff.expenses import router as expenses_router
from app.api.v1.staff.leave_applications import router as leave_router
from app.api.v1.staff.customer_tickets import router as tickets_router

# Admin
from app.api.v1.admin.activity_logs import router as activity_logs_router
from app.api.v1.admin.users import router as users_router

api_router = APIRouter()

# --- Staff ---
api_router.include_router(bookings_router)
api_router.include_router(analytics_router)
api_router.include_router(sales_reports_router)
api_router.include_router(config_router)
api_router.include_router(expenses_router)
api_router.include_router(leave_router)
api_router.include_router(tickets_router)

# --- Admin ---
api_router.include_router(activity_logs_router)
api_router.include_router(users_router)
