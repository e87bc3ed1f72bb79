"""
Ledger Lock

In-process lock for the flat-file ledgers.

Purchases and cancellations hold it from ledger load to ledger save, so a
seat-availability check and the seat claim that follows are atomic as a unit.
Queries hold it while loading, so they never read the show file of a commit
whose ticket save is still pending (or about to be rolled back).
The scope is the whole ledger rather than one show because every save
rewrites the complete show and ticket files.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
import time

import anyio

from src.platform.logging.loguru_io import Logger


class LedgerLock:
    def __init__(self) -> None:
        self._lock = anyio.Lock()
        self.holder: str | None = None

    @property
    def locked(self) -> bool:
        return self._lock.locked()

    @asynccontextmanager
    async def hold(self, *, key: str) -> AsyncIterator[None]:
        """
        Hold the ledger lock for the duration of the block

        Args:
            key: Lock key for logging (e.g., "show:3", "ticket:12")
        """
        if self._lock.locked():
            Logger.base.debug(f'⏳ [LOCK] Waiting for {self.holder} (requested by {key})')

        async with self._lock:
            self.holder = key
            started_at = time.monotonic()
            Logger.base.debug(f'🔒 [LOCK] Acquired ledger lock: {key}')
            try:
                yield
            finally:
                self.holder = None
                Logger.base.debug(
                    f'🔓 [LOCK] Released ledger lock: {key} '
                    f'(held {(time.monotonic() - started_at) * 1000:.1f}ms)'
                )
