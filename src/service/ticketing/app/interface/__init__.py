"""Application layer interfaces (Ports)"""

from src.service.ticketing.app.interface.i_clock import IClock
from src.service.ticketing.app.interface.i_identifier_generator import IIdentifierGenerator
from src.service.ticketing.app.interface.i_show_ledger_repo import IShowLedgerRepo
from src.service.ticketing.app.interface.i_ticket_ledger_repo import ITicketLedgerRepo
from src.service.ticketing.app.interface.i_user_repo import IUserRepo

__all__ = [
    'IClock',
    'IIdentifierGenerator',
    'IShowLedgerRepo',
    'ITicketLedgerRepo',
    'IUserRepo',
]
