from uuid import UUID
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.api.deps import get_current_user
from app.models.user import User
from app.schemas.ticket import (
    CustomerTicket,
    CustomerTicketCreate,
    TicketStatus,
    TicketStatusUpdate,
)
from app.services import ticket_service

router = APIRouter(prefix="/customer-tickets", tags=["Customer Tickets"])


@router.post("/", response_model=CustomerTicket, status_code=status.HTTP_201_CREATED)
def create_ticket(
    data: CustomerTicketCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return ticket_service.create_ticket(db, data, current_user)


@router.get("/", response_model=List[CustomerTicket])
def list_tickets(
    status: Optional[TicketStatus] = Query(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return ticket_service.list_tickets(db, status=status)


@router.patch("/{ticket_id}/status", response_model=CustomerTicket)
def update_ticket_status(
    ticket_id: UUID,
    body: TicketStatusUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Move a ticket between `open`, `in_progress` and `closed`, optionally
    (re)assigning it to a staff member.
    """
    ticket = ticket_service.get_ticket(db, ticket_id)
    if not ticket:
        raise HTTPException(status_code=404, detail="Ticket not found")
    try:
        return ticket_service.update_ticket_status(
            db, ticket, body.status, body.assigned_to, current_user
        )
    except ticket_service.UnknownAssignee as e:
        raise HTTPException(status_code=400, detail=str(e))
