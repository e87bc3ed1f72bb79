"""
Unit of Work Pattern - one ledger transaction per command

Architecture:
- UoW holds the ledger lock for the whole transaction
- UoW loads both ledgers once, the use case mutates them in memory
- commit() saves shows, then tickets; a failed ticket save restores the show
  file from the pre-transaction snapshot
- Leaving the block without commit() persists nothing
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from src.platform.exception.exceptions import StorageUnavailableError
from src.platform.logging.loguru_io import Logger
from src.platform.state.ledger_lock import LedgerLock


if TYPE_CHECKING:
    from src.service.ticketing.app.interface.i_show_ledger_repo import IShowLedgerRepo
    from src.service.ticketing.app.interface.i_ticket_ledger_repo import ITicketLedgerRepo
    from src.service.ticketing.domain.aggregate.show_ledger import ShowLedger
    from src.service.ticketing.domain.aggregate.ticket_ledger import TicketLedger


class LedgerTransaction:
    """
    Usage in use case:
        async with uow.transaction(key=f'show:{show_id}') as tx:
            tx.show_ledger.claim_seat(show_id, seat)
            tx.ticket_ledger.issue(...)
            await tx.commit()
    """

    def __init__(
        self,
        *,
        show_ledger_repo: IShowLedgerRepo,
        ticket_ledger_repo: ITicketLedgerRepo,
        show_ledger: ShowLedger,
        ticket_ledger: TicketLedger,
    ) -> None:
        self._show_ledger_repo = show_ledger_repo
        self._ticket_ledger_repo = ticket_ledger_repo
        self.show_ledger = show_ledger
        self.ticket_ledger = ticket_ledger
        self._shows_before = show_ledger.snapshot()
        self.committed = False

    async def commit(self) -> None:
        """
        Raises:
            StorageUnavailableError: A save failed; both files hold their previous content
        """
        await self._show_ledger_repo.save(ledger=self.show_ledger)
        try:
            await self._ticket_ledger_repo.save(ledger=self.ticket_ledger)
        except StorageUnavailableError:
            await self._restore_shows()
            raise
        self.committed = True

    async def _restore_shows(self) -> None:
        try:
            await self._show_ledger_repo.save(ledger=self._shows_before)
        except StorageUnavailableError as restore_error:
            Logger.base.critical(
                f'💥 [UOW] Show ledger restore failed, files may disagree: {restore_error}'
            )
        else:
            Logger.base.warning('↩️ [UOW] Ticket save failed, show ledger restored')


class LedgerUnitOfWork:
    def __init__(
        self,
        *,
        show_ledger_repo: IShowLedgerRepo,
        ticket_ledger_repo: ITicketLedgerRepo,
        ledger_lock: LedgerLock,
    ) -> None:
        self.show_ledger_repo = show_ledger_repo
        self.ticket_ledger_repo = ticket_ledger_repo
        self.ledger_lock = ledger_lock

    @asynccontextmanager
    async def transaction(self, *, key: str) -> AsyncIterator[LedgerTransaction]:
        async with self.ledger_lock.hold(key=key):
            show_ledger = await self.show_ledger_repo.load()
            ticket_ledger = await self.ticket_ledger_repo.load()
            tx = LedgerTransaction(
                show_ledger_repo=self.show_ledger_repo,
                ticket_ledger_repo=self.ticket_ledger_repo,
                show_ledger=show_ledger,
                ticket_ledger=ticket_ledger,
            )
            yield tx
            if not tx.committed:
                Logger.base.debug(f'🗑️ [UOW] {key} left without commit, nothing persisted')
