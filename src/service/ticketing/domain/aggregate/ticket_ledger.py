"""
Ticket Ledger - Aggregate Root for issued tickets

[Business Invariants]
- Ticket ids are unique and assigned monotonically (max id + 1, first id 0)
- No two ACTIVE tickets hold the same (show_id, seat_number)
- ACTIVE -> CANCELLED happens once; tickets are never removed

Seat occupancy lives in ShowLedger. This ledger never calls it: callers claim
the seat first and release it after a successful cancel.
"""

import copy
from typing import Dict, Iterable, List, Optional

import attrs

from src.platform.exception.exceptions import (
    InvalidLedgerDataError,
    SeatAlreadyBookedError,
    TicketNotFoundError,
)
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.domain.entity.ticket_entity import Ticket
from src.service.ticketing.domain.enum.ticket_status import TicketStatus
from src.service.ticketing.domain.value_object.seat_ref import SeatRef


def _index_by_id(tickets: Iterable[Ticket] | Dict[int, Ticket]) -> Dict[int, Ticket]:
    if isinstance(tickets, dict):
        tickets = tickets.values()
    indexed: Dict[int, Ticket] = {}
    active_seats: set[SeatRef] = set()
    for ticket in tickets:
        if ticket.id in indexed:
            raise InvalidLedgerDataError(f'Duplicate ticket id {ticket.id}')
        if ticket.is_active:
            if ticket.seat_ref in active_seats:
                raise InvalidLedgerDataError(
                    f'Seat {ticket.seat_number} of show {ticket.show_id} '
                    f'is held by more than one active ticket'
                )
            active_seats.add(ticket.seat_ref)
        indexed[ticket.id] = ticket
    return indexed


@attrs.define
class TicketLedger:
    # Insertion order is ledger order
    tickets: Dict[int, Ticket] = attrs.field(factory=dict, converter=_index_by_id)

    def __len__(self) -> int:
        return len(self.tickets)

    def __iter__(self):
        return iter(self.tickets.values())

    def next_id(self) -> int:
        return max(self.tickets, default=-1) + 1

    def find_by_id(self, ticket_id: int) -> Optional[Ticket]:
        return self.tickets.get(ticket_id)

    def find_active_holder(self, seat_ref: SeatRef) -> Optional[Ticket]:
        for ticket in self.tickets.values():
            if ticket.is_active and ticket.seat_ref == seat_ref:
                return ticket
        return None

    def list_by_user(self, user_id: int, active_only: bool = False) -> List[Ticket]:
        return [
            ticket
            for ticket in self.tickets.values()
            if ticket.user_id == user_id and (ticket.is_active or not active_only)
        ]

    @Logger.io
    def issue(
        self,
        *,
        user_id: int,
        show_id: int,
        seat_number: int,
        payment_method: str,
        payment_account: str,
        transaction_number: str,
        ticket_number: str,
    ) -> Ticket:
        """
        Record a new ACTIVE ticket. The seat must already be claimed in ShowLedger.

        Raises:
            SeatAlreadyBookedError: Another active ticket holds the same seat
        """
        seat_ref = SeatRef(show_id=show_id, seat_number=seat_number)
        if self.find_active_holder(seat_ref) is not None:
            raise SeatAlreadyBookedError(seat_number)

        ticket = Ticket(
            id=self.next_id(),
            ticket_number=ticket_number,
            user_id=user_id,
            show_id=show_id,
            seat_number=seat_number,
            payment_method=payment_method,
            payment_account=payment_account,
            transaction_number=transaction_number,
            status=TicketStatus.ACTIVE,
        )
        self.tickets[ticket.id] = ticket
        return ticket

    @Logger.io
    def cancel(self, ticket_id: int) -> SeatRef:
        """
        Flip an ACTIVE ticket to CANCELLED

        Returns:
            The (show_id, seat_number) to release in ShowLedger

        Raises:
            TicketNotFoundError: No such ticket
            AlreadyCancelledError: Ticket was cancelled before
        """
        ticket = self.tickets.get(ticket_id)
        if ticket is None:
            raise TicketNotFoundError(ticket_id)
        cancelled = ticket.cancel()
        self.tickets[ticket_id] = cancelled
        return cancelled.seat_ref

    def snapshot(self) -> 'TicketLedger':
        return copy.deepcopy(self)
