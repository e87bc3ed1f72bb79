"""
Show Ledger Repository Interface (storage port)

The core never opens files; it loads a ledger snapshot and saves it back.
"""

from abc import ABC, abstractmethod

from src.service.ticketing.domain.aggregate.show_ledger import ShowLedger


class IShowLedgerRepo(ABC):
    @abstractmethod
    async def load(self) -> ShowLedger:
        """
        Load the full show ledger

        Raises:
            StorageUnavailableError: Ledger unreadable or malformed
        """
        pass

    @abstractmethod
    async def save(self, *, ledger: ShowLedger) -> None:
        """
        Persist the full show ledger, all-or-nothing

        Raises:
            StorageUnavailableError: Ledger unwritable; the previous state stays on disk
        """
        pass
