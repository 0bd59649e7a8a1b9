import json
import uuid
from datetime import date

import pytest
from pydantic import ValidationError

from app.models.activity_log import ActivityLog
from app.models.user import User
from app.schemas.expense import ExpenseCategory, ExpenseCreate
from app.schemas.leave import LeaveApplicationCreate, LeaveReview, LeaveStatus
from app.schemas.ticket import CustomerTicketCreate, TicketPriority, TicketStatus
from app.schemas.user import UserCreate, UserRole
from app.services import expense_service, leave_service, ticket_service, user_service


def expense(**overrides) -> ExpenseCreate:
    fields = dict(
        category=ExpenseCategory.utilities,
        description="Electricity bill",
        amount=4200,
        expense_date=date(2026, 3, 1),
    )
    fields.update(overrides)
    return ExpenseCreate(**fields)


def leave(**overrides) -> LeaveApplicationCreate:
    fields = dict(start_date=date(2026, 4, 1), end_date=date(2026, 4, 3), reason="Family wedding")
    fields.update(overrides)
    return LeaveApplicationCreate(**fields)


def ticket(**overrides) -> CustomerTicketCreate:
    fields = dict(
        title="Projector flicker",
        description="Screen 2 flickered during the 6 PM show",
        customer_name="Asha",
        customer_phone="9876543210",
    )
    fields.update(overrides)
    return CustomerTicketCreate(**fields)


# ---------------------------------------------------------------------------
# Expenses
# ---------------------------------------------------------------------------


def test_create_expense_persists_and_logs(db, employee):
    created = expense_service.create_expense(db, expense(), employee)
    assert created.category == "Utilities"
    assert float(created.amount) == 4200
    assert created.created_by == employee.id

    [entry] = db.query(ActivityLog).all()
    assert (entry.action, entry.resource_type) == ("CREATE", "EXPENSE")
    assert entry.details == "Created expense: Electricity bill"
    assert json.loads(entry.details_json)["category"] == "Utilities"


@pytest.mark.parametrize("amount", [-1, float("inf"), float("nan")])
def test_expense_amount_must_be_a_non_negative_number(amount):
    with pytest.raises(ValidationError):
        expense(amount=amount)


def test_expense_category_must_be_known():
    with pytest.raises(ValidationError):
        expense(category="Snacks")


def test_list_expenses_by_category_and_limit(db, employee):
    expense_service.create_expense(db, expense(), employee)
    expense_service.create_expense(db, expense(category=ExpenseCategory.rent, amount=30000), employee)
    expense_service.create_expense(db, expense(description="Water bill", amount=800), employee)

    assert len(expense_service.list_expenses(db)) == 3
    assert len(expense_service.list_expenses(db, limit=2)) == 2
    rent = expense_service.list_expenses(db, category=ExpenseCategory.rent)
    assert [float(e.amount) for e in rent] == [30000]


def test_expenses_between_is_inclusive(db, employee):
    for day in (1, 2, 3, 4):
        expense_service.create_expense(db, expense(expense_date=date(2026, 3, day)), employee)
    found = expense_service.expenses_between(db, date(2026, 3, 2), date(2026, 3, 3))
    assert [e.expense_date for e in found] == [date(2026, 3, 3), date(2026, 3, 2)]


# ---------------------------------------------------------------------------
# Leave applications
# ---------------------------------------------------------------------------


def test_leave_starts_pending(db, employee):
    created = leave_service.apply_for_leave(db, leave(), employee)
    assert created.status == "pending"
    assert created.user_id == employee.id
    assert created.reviewed_by is None

    entry = db.query(ActivityLog).one()
    assert entry.resource_type == "LEAVE_APPLICATION"
    assert entry.details == "Applied for leave from 2026-04-01 to 2026-04-03"


def test_leave_dates_must_be_in_order():
    with pytest.raises(ValidationError):
        leave(start_date=date(2026, 4, 3), end_date=date(2026, 4, 1))
    assert leave(end_date=date(2026, 4, 1)).end_date == date(2026, 4, 1)


def test_review_cannot_reset_to_pending():
    with pytest.raises(ValidationError):
        LeaveReview(status="pending")


def test_approve_records_reviewer(db, employee, admin):
    created = leave_service.apply_for_leave(db, leave(), employee)
    reviewed = leave_service.review_leave(db, created, LeaveStatus.approved, admin)
    assert reviewed.status == "approved"
    assert reviewed.reviewed_by == admin.id
    assert reviewed.reviewed_at is not None

    entry = db.query(ActivityLog).filter(ActivityLog.action == "UPDATE").one()
    assert entry.details == "Approved leave application"
    assert entry.user_id == admin.id


def test_decision_is_final(db, employee, admin):
    created = leave_service.apply_for_leave(db, leave(), employee)
    leave_service.review_leave(db, created, LeaveStatus.rejected, admin)
    with pytest.raises(leave_service.LeaveAlreadyReviewed):
        leave_service.review_leave(db, created, LeaveStatus.approved, admin)
    assert created.status == "rejected"


def test_list_leaves_for_one_user_and_status(db, employee, admin):
    mine = leave_service.apply_for_leave(db, leave(), employee)
    leave_service.apply_for_leave(db, leave(reason="Conference"), admin)
    leave_service.review_leave(db, mine, LeaveStatus.approved, admin)

    assert len(leave_service.list_leaves(db)) == 2
    assert [a.id for a in leave_service.list_leaves(db, user=employee)] == [mine.id]
    pending = leave_service.list_leaves(db, status=LeaveStatus.pending)
    assert [a.reason for a in pending] == ["Conference"]


# ---------------------------------------------------------------------------
# Customer tickets
# ---------------------------------------------------------------------------


def test_ticket_opens_with_medium_priority(db, employee):
    created = ticket_service.create_ticket(db, ticket(), employee)
    assert created.status == "open"
    assert created.priority == "medium"
    assert created.customer_email is None
    assert created.created_by == employee.id

    entry = db.query(ActivityLog).one()
    assert (entry.action, entry.resource_type) == ("CREATE", "CUSTOMER_TICKET")


def test_blank_contact_fields_become_none():
    data = ticket(customer_email="", customer_phone="")
    assert (data.customer_email, data.customer_phone) == (None, None)


def test_status_workflow_with_assignee(db, employee, admin):
    created = ticket_service.create_ticket(db, ticket(priority=TicketPriority.high), employee)

    moved = ticket_service.update_ticket_status(db, created, TicketStatus.in_progress, admin.id, employee)
    assert (moved.status, moved.assigned_to) == ("in_progress", admin.id)
    assert moved.updated_at is not None

    closed = ticket_service.update_ticket_status(db, moved, TicketStatus.closed, None, admin)
    assert closed.status == "closed"
    assert closed.assigned_to == admin.id

    reopened = ticket_service.update_ticket_status(db, closed, TicketStatus.open, None, admin)
    assert reopened.status == "open"

    updates = db.query(ActivityLog).filter(ActivityLog.action == "UPDATE").all()
    assert sorted(json.loads(e.details_json)["to"] for e in updates) == ["closed", "in_progress", "open"]


def test_unknown_assignee_is_rejected(db, employee):
    created = ticket_service.create_ticket(db, ticket(), employee)
    with pytest.raises(ticket_service.UnknownAssignee):
        ticket_service.update_ticket_status(
            db, created, TicketStatus.in_progress, uuid.uuid4(), employee
        )


def test_list_tickets_by_status(db, employee):
    first = ticket_service.create_ticket(db, ticket(), employee)
    ticket_service.create_ticket(db, ticket(title="Lost umbrella"), employee)
    ticket_service.update_ticket_status(db, first, TicketStatus.closed, None, employee)

    assert len(ticket_service.list_tickets(db)) == 2
    assert [t.title for t in ticket_service.list_tickets(db, status=TicketStatus.open)] == ["Lost umbrella"]


# ---------------------------------------------------------------------------
# User management
# ---------------------------------------------------------------------------


def test_create_user_normalises_email(db, admin):
    data = UserCreate(email="  New.Hire@Example.com ", first_name="New", last_name="Hire")
    created = user_service.create_user(db, data, admin)
    assert created.email == "new.hire@example.com"
    assert created.role == "employee"
    assert created.is_active

    entry = db.query(ActivityLog).one()
    assert (entry.action, entry.resource_type) == ("CREATE", "USER")


def test_duplicate_email_is_rejected(db, admin, employee):
    data = UserCreate(email="staff@example.com", first_name="Again", last_name="Staff")
    with pytest.raises(user_service.UserManagementError):
        user_service.create_user(db, data, admin)


def test_change_role(db, admin, employee):
    promoted = user_service.change_role(db, employee, UserRole.admin, admin)
    assert promoted.role == "admin"
    entry = db.query(ActivityLog).one()
    assert json.loads(entry.details_json) == {"from": "employee", "to": "admin"}


def test_admin_cannot_change_own_role(db, admin):
    with pytest.raises(user_service.UserManagementError):
        user_service.change_role(db, admin, UserRole.employee, admin)
    assert admin.role == "admin"


def test_deactivate_keeps_the_row(db, admin, employee):
    user_service.deactivate_user(db, employee, admin)
    db.expire_all()
    stored = db.get(User, employee.id)
    assert stored is not None
    assert stored.is_active is False
    assert employee.id not in [u.id for u in user_service.list_users(db)]
    assert employee.id in [u.id for u in user_service.list_users(db, include_inactive=True)]


def test_admin_cannot_deactivate_self(db, admin):
    with pytest.raises(user_service.UserManagementError):
        user_service.deactivate_user(db, admin, admin)


def test_list_users_by_role(db, admin, employee):
    assert [u.email for u in user_service.list_users(db, role=UserRole.admin)] == ["admin@example.com"]
