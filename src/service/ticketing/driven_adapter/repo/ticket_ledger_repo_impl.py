from pathlib import Path
from typing import List

from src.platform.exception.exceptions import DomainError, StorageUnavailableError
from src.platform.logging.loguru_io import Logger
from src.platform.storage.flat_file import decode_records, read_records, write_records
from src.service.ticketing.app.interface.i_ticket_ledger_repo import ITicketLedgerRepo
from src.service.ticketing.domain.aggregate.ticket_ledger import TicketLedger
from src.service.ticketing.domain.entity.ticket_entity import Ticket
from src.service.ticketing.domain.enum.ticket_status import TicketStatus
from src.service.ticketing.driven_adapter.model.ledger_columns import TICKET_COLUMNS


class TicketLedgerRepoImpl(ITicketLedgerRepo):
    def __init__(self, *, path: Path) -> None:
        self.path = path

    @Logger.io(truncate_content=True)
    async def load(self) -> TicketLedger:
        records = await read_records(self.path, columns=TICKET_COLUMNS)
        tickets = decode_records(self.path, records, self._record_to_entity)
        try:
            return TicketLedger(tickets=tickets)
        except DomainError as e:
            raise StorageUnavailableError(f'{self.path}: {e.message}') from e

    @Logger.io(truncate_content=True)
    async def save(self, *, ledger: TicketLedger) -> None:
        await write_records(
            self.path,
            columns=TICKET_COLUMNS,
            rows=[self._entity_to_record(ticket) for ticket in ledger],
        )

    @staticmethod
    def _record_to_entity(fields: List[str]) -> Ticket:
        (
            ticket_id,
            ticket_number,
            user_id,
            show_id,
            seat_number,
            payment_method,
            payment_account,
            transaction_number,
            status,
        ) = fields
        return Ticket(
            id=int(ticket_id),
            ticket_number=ticket_number,
            user_id=int(user_id),
            show_id=int(show_id),
            seat_number=int(seat_number),
            payment_method=payment_method,
            payment_account=payment_account,
            transaction_number=transaction_number,
            # Anything but 0/1 raises ValueError
            status=TicketStatus(int(status)),
        )

    @staticmethod
    def _entity_to_record(ticket: Ticket) -> List[str]:
        return [
            str(ticket.id),
            ticket.ticket_number,
            str(ticket.user_id),
            str(ticket.show_id),
            str(ticket.seat_number),
            ticket.payment_method,
            ticket.payment_account,
            ticket.transaction_number,
            str(int(ticket.status)),
        ]
