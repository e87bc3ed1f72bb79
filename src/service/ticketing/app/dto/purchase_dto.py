from typing import List

import attrs

from src.service.ticketing.domain.entity.show_entity import Show
from src.service.ticketing.domain.entity.ticket_entity import Ticket


@attrs.define
class PurchaseResult:
    """Tickets in request order; total_cost is computed, never stored per ticket"""

    show: Show
    tickets: List[Ticket]
    transaction_number: str
    total_cost: int

    @property
    def seat_numbers(self) -> List[int]:
        return [ticket.seat_number for ticket in self.tickets]
