from typing import Optional

from src.platform.exception.exceptions import TicketNotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.storage.unit_of_work import LedgerUnitOfWork
from src.service.ticketing.domain.entity.ticket_entity import Ticket


class CancelTicketUseCase:
    """
    Cancel one ticket and free its seat.

    Flow (under the ledger lock):
    1. TicketLedger.cancel flips the ticket to CANCELLED
    2. ShowLedger.release_seat frees the seat it held
    3. Persist both ledgers

    A second cancel of the same ticket raises AlreadyCancelledError and leaves
    seat occupancy untouched.
    """

    def __init__(self, *, uow: LedgerUnitOfWork) -> None:
        self.uow = uow

    @Logger.io
    async def execute(self, *, ticket_id: int, user_id: Optional[int] = None) -> Ticket:
        """
        Args:
            user_id: When given, only this user's tickets can be cancelled

        Raises:
            TicketNotFoundError: No such ticket (or not owned by user_id)
            AlreadyCancelledError: Ticket was cancelled before
            StorageUnavailableError: Ledgers could not be loaded or saved
        """
        async with self.uow.transaction(key=f'ticket:{ticket_id}') as tx:
            ticket = tx.ticket_ledger.find_by_id(ticket_id)
            if ticket is None or (user_id is not None and ticket.user_id != user_id):
                raise TicketNotFoundError(ticket_id)

            seat_ref = tx.ticket_ledger.cancel(ticket_id)
            released = tx.show_ledger.release_seat(seat_ref.show_id, seat_ref.seat_number)
            if not released:
                Logger.base.warning(
                    f'⚠️ [CANCEL] Seat {seat_ref.seat_number} of show {seat_ref.show_id} '
                    f'was not marked booked'
                )
            cancelled = tx.ticket_ledger.tickets[ticket_id]
            await tx.commit()

        Logger.base.info(f'🗑️ [CANCEL] ticket={ticket_id} seat={seat_ref}')
        return cancelled
