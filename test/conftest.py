"""
Test Configuration and Fixtures

This module provides:
- Test log directory setup (before settings/loguru are imported)
- In-memory ledger repositories standing in for the flat files
- A fixed clock and a seeded identifier generator
- Use case fixtures wired to the in-memory repositories

Architecture:
- Unit tests (test/**/unit/): in-memory repositories only
- Integration tests (test/**/integration/): real flat files under tmp_path
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# settings and the loguru sinks are configured at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('DATA_DIR', str(Path(__file__).parent / 'test_data'))


_early_setup_test_environment()

import copy  # noqa: E402
from datetime import date, datetime  # noqa: E402
import random  # noqa: E402
import re  # noqa: E402
from typing import Callable  # noqa: E402

import pytest  # noqa: E402

from src.platform.exception.exceptions import StorageUnavailableError  # noqa: E402
from src.platform.state.ledger_lock import LedgerLock  # noqa: E402
from src.platform.storage.unit_of_work import LedgerUnitOfWork  # noqa: E402
from src.service.ticketing.app.command.cancel_ticket_use_case import (  # noqa: E402
    CancelTicketUseCase,
)
from src.service.ticketing.app.command.purchase_tickets_use_case import (  # noqa: E402
    PurchaseTicketsUseCase,
)
from src.service.ticketing.app.interface import (  # noqa: E402
    IClock,
    IShowLedgerRepo,
    ITicketLedgerRepo,
    IUserRepo,
)
from src.service.ticketing.domain.aggregate.show_ledger import ShowLedger  # noqa: E402
from src.service.ticketing.domain.aggregate.ticket_ledger import TicketLedger  # noqa: E402
from src.service.ticketing.domain.aggregate.user_directory import UserDirectory  # noqa: E402
from src.service.ticketing.domain.entity.show_entity import Show  # noqa: E402
from src.service.ticketing.domain.value_object.show_date import ShowDate  # noqa: E402
from src.service.ticketing.driven_adapter.identifier.identifier_generator_impl import (  # noqa: E402
    IdentifierGeneratorImpl,
)


TODAY = date(2024, 8, 1)


# =============================================================================
# In-memory adapters
# =============================================================================


class FixedClock(IClock):
    def __init__(self, moment: datetime) -> None:
        self.moment = moment

    def now(self) -> datetime:
        return self.moment


class InMemoryShowLedgerRepo(IShowLedgerRepo):
    """Keeps a private copy, like a file would; fail_save_at counts save calls"""

    def __init__(self, ledger: ShowLedger | None = None) -> None:
        self.stored = copy.deepcopy(ledger or ShowLedger())
        self.save_calls = 0
        self.fail_save_at: int | None = None

    async def load(self) -> ShowLedger:
        return copy.deepcopy(self.stored)

    async def save(self, *, ledger: ShowLedger) -> None:
        self.save_calls += 1
        if self.fail_save_at == self.save_calls:
            raise StorageUnavailableError('show ledger unwritable')
        self.stored = copy.deepcopy(ledger)


class InMemoryTicketLedgerRepo(ITicketLedgerRepo):
    def __init__(self, ledger: TicketLedger | None = None) -> None:
        self.stored = copy.deepcopy(ledger or TicketLedger())
        self.save_calls = 0
        self.fail_on_save = False

    async def load(self) -> TicketLedger:
        return copy.deepcopy(self.stored)

    async def save(self, *, ledger: TicketLedger) -> None:
        self.save_calls += 1
        if self.fail_on_save:
            raise StorageUnavailableError('ticket ledger unwritable')
        self.stored = copy.deepcopy(ledger)


class InMemoryUserRepo(IUserRepo):
    def __init__(self) -> None:
        self.stored = UserDirectory()

    async def load(self) -> UserDirectory:
        return copy.deepcopy(self.stored)

    async def save(self, *, directory: UserDirectory) -> None:
        self.stored = copy.deepcopy(directory)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def make_show() -> Callable[..., Show]:
    """Show builder with sensible defaults; override any field by keyword"""

    def _make_show(**overrides) -> Show:
        fields = {
            'id': 0,
            'singer': 'James',
            'date': ShowDate(year=2024, month=8, day=15),
            'venue': 'Army Stadium',
            'type': 'Rock',
            'price': 500,
            'seats': 5,
            'booked': set(),
        }
        fields.update(overrides)
        return Show(**fields)

    return _make_show


@pytest.fixture
def ticket_number_pattern() -> re.Pattern:
    """3 letters, 5 digits, 1 letter"""
    return re.compile(r'^[A-Z]{3}[0-9]{5}[A-Z]$')


@pytest.fixture
def transaction_number_pattern() -> re.Pattern:
    """3 base-36 chars, then HHMMSS"""
    return re.compile(r'^[0-9A-Z]{3}[0-9]{6}$')


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(TODAY.year, TODAY.month, TODAY.day, 14, 23, 5))


@pytest.fixture
def identifier_generator(clock: FixedClock) -> IdentifierGeneratorImpl:
    return IdentifierGeneratorImpl(clock=clock, rng=random.Random(42))


@pytest.fixture
def show_ledger_repo(make_show: Callable[..., Show]) -> InMemoryShowLedgerRepo:
    return InMemoryShowLedgerRepo(ShowLedger(shows=[make_show()]))


@pytest.fixture
def ticket_ledger_repo() -> InMemoryTicketLedgerRepo:
    return InMemoryTicketLedgerRepo()


@pytest.fixture
def user_repo() -> InMemoryUserRepo:
    return InMemoryUserRepo()


@pytest.fixture
def ledger_lock() -> LedgerLock:
    return LedgerLock()


@pytest.fixture
def uow(
    show_ledger_repo: InMemoryShowLedgerRepo,
    ticket_ledger_repo: InMemoryTicketLedgerRepo,
    ledger_lock: LedgerLock,
) -> LedgerUnitOfWork:
    return LedgerUnitOfWork(
        show_ledger_repo=show_ledger_repo,
        ticket_ledger_repo=ticket_ledger_repo,
        ledger_lock=ledger_lock,
    )


@pytest.fixture
def purchase_use_case(
    uow: LedgerUnitOfWork, identifier_generator: IdentifierGeneratorImpl
) -> PurchaseTicketsUseCase:
    return PurchaseTicketsUseCase(uow=uow, identifier_generator=identifier_generator)


@pytest.fixture
def cancel_use_case(uow: LedgerUnitOfWork) -> CancelTicketUseCase:
    return CancelTicketUseCase(uow=uow)
