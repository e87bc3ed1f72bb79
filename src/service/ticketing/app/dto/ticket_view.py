from typing import Optional

import attrs

from src.service.ticketing.domain.entity.show_entity import Show
from src.service.ticketing.domain.entity.ticket_entity import Ticket
from src.service.ticketing.domain.enum.ticket_status import TicketDisplayStatus


@attrs.define
class TicketView:
    """A ticket joined with its show for listing"""

    ticket: Ticket
    show: Optional[Show]
    display_status: TicketDisplayStatus

    @property
    def show_title(self) -> str:
        if self.show is None:
            return f'Show #{self.ticket.show_id}'
        return f"{self.show.singer}'s {self.show.type} show"
