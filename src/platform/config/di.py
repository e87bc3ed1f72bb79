"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers
from rich.console import Console

from src.platform.config.core_setting import Settings
from src.platform.state.ledger_lock import LedgerLock
from src.platform.storage.unit_of_work import LedgerUnitOfWork
from src.service.ticketing.app.command.cancel_ticket_use_case import CancelTicketUseCase
from src.service.ticketing.app.command.purchase_tickets_use_case import PurchaseTicketsUseCase
from src.service.ticketing.app.command.register_user_use_case import RegisterUserUseCase
from src.service.ticketing.app.query.authenticate_user_use_case import AuthenticateUserUseCase
from src.service.ticketing.app.query.list_upcoming_shows_use_case import (
    ListUpcomingShowsUseCase,
)
from src.service.ticketing.app.query.list_user_tickets_use_case import ListUserTicketsUseCase
from src.service.ticketing.driven_adapter.clock.system_clock import SystemClock
from src.service.ticketing.driven_adapter.identifier.identifier_generator_impl import (
    IdentifierGeneratorImpl,
)
from src.service.ticketing.driven_adapter.repo.show_ledger_repo_impl import ShowLedgerRepoImpl
from src.service.ticketing.driven_adapter.repo.ticket_ledger_repo_impl import (
    TicketLedgerRepoImpl,
)
from src.service.ticketing.driven_adapter.repo.user_repo_impl import UserRepoImpl


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Console output (stdout); logs go to stderr
    console = providers.Singleton(Console)

    # One in-process ledger lock shared by the command and listing use cases
    ledger_lock = providers.Singleton(LedgerLock)

    clock = providers.Singleton(SystemClock, timezone=config_service.provided.TIMEZONE)
    identifier_generator = providers.Singleton(IdentifierGeneratorImpl, clock=clock)

    # Repositories (stateless - each load reads the file again)
    show_ledger_repo = providers.Singleton(
        ShowLedgerRepoImpl, path=config_service.provided.SHOWS_PATH
    )
    ticket_ledger_repo = providers.Singleton(
        TicketLedgerRepoImpl, path=config_service.provided.TICKETS_PATH
    )
    user_repo = providers.Singleton(UserRepoImpl, path=config_service.provided.USERS_PATH)

    ledger_unit_of_work = providers.Singleton(
        LedgerUnitOfWork,
        show_ledger_repo=show_ledger_repo,
        ticket_ledger_repo=ticket_ledger_repo,
        ledger_lock=ledger_lock,
    )

    # Command use cases
    purchase_tickets_use_case = providers.Factory(
        PurchaseTicketsUseCase,
        uow=ledger_unit_of_work,
        identifier_generator=identifier_generator,
    )
    cancel_ticket_use_case = providers.Factory(CancelTicketUseCase, uow=ledger_unit_of_work)
    register_user_use_case = providers.Factory(
        RegisterUserUseCase, user_repo=user_repo, ledger_lock=ledger_lock
    )

    # Query use cases; ledger reads wait out a commit in flight
    authenticate_user_use_case = providers.Factory(AuthenticateUserUseCase, user_repo=user_repo)
    list_upcoming_shows_use_case = providers.Factory(
        ListUpcomingShowsUseCase,
        show_ledger_repo=show_ledger_repo,
        clock=clock,
        ledger_lock=ledger_lock,
    )
    list_user_tickets_use_case = providers.Factory(
        ListUserTicketsUseCase,
        show_ledger_repo=show_ledger_repo,
        ticket_ledger_repo=ticket_ledger_repo,
        clock=clock,
        ledger_lock=ledger_lock,
    )


container = Container()


def setup() -> None:
    container.config_service()


def cleanup() -> None:
    container.reset_singletons()
