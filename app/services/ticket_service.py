import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.orm import Session

from app.models.customer_ticket import CustomerTicket
from app.models.user import User
from app.schemas.ticket import CustomerTicketCreate, TicketStatus
from app.services.activity_service import log_activity

logger = logging.getLogger(__name__)


class UnknownAssignee(ValueError):
    def __init__(self, user_id):
        self.user_id = user_id
        super().__init__("Assignee must be an active staff member")


def get_ticket(db: Session, ticket_id) -> Optional[CustomerTicket]:
    return db.get(CustomerTicket, ticket_id)


def list_tickets(db: Session, status: Optional[TicketStatus] = None) -> List[CustomerTicket]:
    query = db.query(CustomerTicket)
    if status is not None:
        query = query.filter(CustomerTicket.status == status.value)
    return query.order_by(CustomerTicket.created_at.desc()).all()


def create_ticket(db: Session, data: CustomerTicketCreate, user: User) -> CustomerTicket:
    ticket = CustomerTicket(
        **data.model_dump(exclude={"priority"}),
        priority=data.priority.value,
        status=TicketStatus.open.value,
        created_by=user.id,
    )
    db.add(ticket)
    db.flush()

    log_activity(
        db, user.id, "CREATE", "CUSTOMER_TICKET", ticket.id,
        details=f"Created customer ticket: {data.title}",
    )
    db.commit()
    db.refresh(ticket)
    logger.info("Ticket %s opened by %s (priority %s).", ticket.id, user.id, data.priority.value)
    return ticket


def update_ticket_status(
    db: Session,
    ticket: CustomerTicket,
    status: TicketStatus,
    assigned_to,
    user: User,
) -> CustomerTicket:
    """
    Move a ticket to ``status``. Any status may follow any other, so a
    closed ticket can be reopened. ``assigned_to`` replaces the assignee
    when given and leaves it alone when None.
    """
    if assigned_to is not None:
        assignee = db.get(User, assigned_to)
        if not assignee or not assignee.is_active:
            raise UnknownAssignee(assigned_to)
        ticket.assigned_to = assignee.id

    previous = ticket.status
    ticket.status = status.value
    ticket.updated_at = datetime.now(timezone.utc)
    log_activity(
        db, user.id, "UPDATE", "CUSTOMER_TICKET", ticket.id,
        details=f"Updated ticket status to {status.value}",
        data={"from": previous, "to": status.value, "assigned_to": ticket.assigned_to},
    )
    db.commit()
    db.refresh(ticket)
    logger.info("Ticket %s moved %s -> %s by %s.", ticket.id, previous, status.value, user.id)
    return ticket
