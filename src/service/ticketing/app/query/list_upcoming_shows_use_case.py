from datetime import date
from typing import List, Optional

from src.platform.logging.loguru_io import Logger
from src.platform.state.ledger_lock import LedgerLock
from src.service.ticketing.app.interface.i_clock import IClock
from src.service.ticketing.app.interface.i_show_ledger_repo import IShowLedgerRepo
from src.service.ticketing.domain.entity.show_entity import Show


class ListUpcomingShowsUseCase:
    def __init__(
        self, *, show_ledger_repo: IShowLedgerRepo, clock: IClock, ledger_lock: LedgerLock
    ) -> None:
        self.show_ledger_repo = show_ledger_repo
        self.clock = clock
        self.ledger_lock = ledger_lock

    @Logger.io
    async def execute(self, *, reference_date: Optional[date] = None) -> List[Show]:
        """Shows dated today (or reference_date) and later, in ledger order"""
        # A commit in flight may have saved shows but not tickets yet
        async with self.ledger_lock.hold(key='read:shows'):
            ledger = await self.show_ledger_repo.load()
        return ledger.list_upcoming(reference_date or self.clock.today())
