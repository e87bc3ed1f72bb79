from datetime import date
from typing import List

from src.platform.logging.loguru_io import Logger
from src.platform.state.ledger_lock import LedgerLock
from src.service.ticketing.app.dto.ticket_view import TicketView
from src.service.ticketing.app.interface.i_clock import IClock
from src.service.ticketing.app.interface.i_show_ledger_repo import IShowLedgerRepo
from src.service.ticketing.app.interface.i_ticket_ledger_repo import ITicketLedgerRepo
from src.service.ticketing.domain.entity.show_entity import Show
from src.service.ticketing.domain.entity.ticket_entity import Ticket
from src.service.ticketing.domain.enum.ticket_status import TicketDisplayStatus


class ListUserTicketsUseCase:
    """
    A user's tickets joined with their shows.

    Display status: Canceled if cancelled, Expired if the show date has
    passed, otherwise Active.
    """

    def __init__(
        self,
        *,
        show_ledger_repo: IShowLedgerRepo,
        ticket_ledger_repo: ITicketLedgerRepo,
        clock: IClock,
        ledger_lock: LedgerLock,
    ) -> None:
        self.show_ledger_repo = show_ledger_repo
        self.ticket_ledger_repo = ticket_ledger_repo
        self.clock = clock
        self.ledger_lock = ledger_lock

    @staticmethod
    def _display_status(ticket: Ticket, show: Show | None, today: date) -> TicketDisplayStatus:
        if not ticket.is_active:
            return TicketDisplayStatus.CANCELLED
        if show is not None and not show.is_upcoming(today):
            return TicketDisplayStatus.EXPIRED
        return TicketDisplayStatus.ACTIVE

    @Logger.io
    async def execute(
        self, *, user_id: int, active_only: bool = False, upcoming_only: bool = False
    ) -> List[TicketView]:
        """
        Args:
            active_only: Skip cancelled tickets
            upcoming_only: Skip tickets whose show date has passed (cancellable tickets)
        """
        async with self.ledger_lock.hold(key=f'read:tickets:user:{user_id}'):
            show_ledger = await self.show_ledger_repo.load()
            ticket_ledger = await self.ticket_ledger_repo.load()
        today = self.clock.today()

        views: List[TicketView] = []
        for ticket in ticket_ledger.list_by_user(user_id, active_only=active_only):
            show = show_ledger.find(ticket.show_id)
            if upcoming_only and (show is None or not show.is_upcoming(today)):
                continue
            views.append(
                TicketView(
                    ticket=ticket,
                    show=show,
                    display_status=self._display_status(ticket, show, today),
                )
            )
        return views
