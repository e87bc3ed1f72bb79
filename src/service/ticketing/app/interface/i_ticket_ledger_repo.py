"""
Ticket Ledger Repository Interface (storage port)
"""

from abc import ABC, abstractmethod

from src.service.ticketing.domain.aggregate.ticket_ledger import TicketLedger


class ITicketLedgerRepo(ABC):
    @abstractmethod
    async def load(self) -> TicketLedger:
        """
        Load the full ticket ledger

        Raises:
            StorageUnavailableError: Ledger unreadable or malformed
        """
        pass

    @abstractmethod
    async def save(self, *, ledger: TicketLedger) -> None:
        """
        Persist the full ticket ledger, all-or-nothing

        Raises:
            StorageUnavailableError: Ledger unwritable; the previous state stays on disk
        """
        pass
