"""
Interactive console

Menus: Register / Login / Exit, then View shows / Buy tickets / Cancel a
ticket / Show tickets / Exit. Every action runs its use case and renders
CustomBaseError by kind; the menu loop always continues.
"""

from functools import partial
from typing import Awaitable, Callable, Optional, Self

import anyio.to_thread
from dependency_injector.wiring import Provide, inject
from rich.console import Console
from rich.prompt import Prompt

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import CustomBaseError, InvalidSelectionError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.command.cancel_ticket_use_case import CancelTicketUseCase
from src.service.ticketing.app.command.purchase_tickets_use_case import PurchaseTicketsUseCase
from src.service.ticketing.app.command.register_user_use_case import RegisterUserUseCase
from src.service.ticketing.app.query.authenticate_user_use_case import AuthenticateUserUseCase
from src.service.ticketing.app.query.list_upcoming_shows_use_case import (
    ListUpcomingShowsUseCase,
)
from src.service.ticketing.app.query.list_user_tickets_use_case import ListUserTicketsUseCase
from src.service.ticketing.domain.entity.user_entity import User
from src.service.ticketing.driving_adapter.cli.console_view import (
    render_error,
    render_purchase,
    render_shows,
    render_tickets,
)
from src.service.ticketing.driving_adapter.cli.selection import (
    parse_seat_numbers,
    resolve_selection,
)


# (message, password) -> answer; blocking, run in a worker thread
PromptFunc = Callable[[str, bool], str]


class ConsoleApp:
    def __init__(
        self,
        *,
        console: Console,
        settings: Settings,
        register_user_use_case: RegisterUserUseCase,
        authenticate_user_use_case: AuthenticateUserUseCase,
        list_upcoming_shows_use_case: ListUpcomingShowsUseCase,
        list_user_tickets_use_case: ListUserTicketsUseCase,
        purchase_tickets_use_case: PurchaseTicketsUseCase,
        cancel_ticket_use_case: CancelTicketUseCase,
        prompt: Optional[PromptFunc] = None,
    ) -> None:
        self.console = console
        self.settings = settings
        self.register_user_use_case = register_user_use_case
        self.authenticate_user_use_case = authenticate_user_use_case
        self.list_upcoming_shows_use_case = list_upcoming_shows_use_case
        self.list_user_tickets_use_case = list_user_tickets_use_case
        self.purchase_tickets_use_case = purchase_tickets_use_case
        self.cancel_ticket_use_case = cancel_ticket_use_case
        self._prompt = prompt or self._rich_prompt

    @classmethod
    @inject
    def depends(
        cls,
        console: Console = Provide[Container.console],
        settings: Settings = Provide[Container.config_service],
        register_user_use_case: RegisterUserUseCase = Provide[Container.register_user_use_case],
        authenticate_user_use_case: AuthenticateUserUseCase = Provide[
            Container.authenticate_user_use_case
        ],
        list_upcoming_shows_use_case: ListUpcomingShowsUseCase = Provide[
            Container.list_upcoming_shows_use_case
        ],
        list_user_tickets_use_case: ListUserTicketsUseCase = Provide[
            Container.list_user_tickets_use_case
        ],
        purchase_tickets_use_case: PurchaseTicketsUseCase = Provide[
            Container.purchase_tickets_use_case
        ],
        cancel_ticket_use_case: CancelTicketUseCase = Provide[Container.cancel_ticket_use_case],
    ) -> Self:
        return cls(
            console=console,
            settings=settings,
            register_user_use_case=register_user_use_case,
            authenticate_user_use_case=authenticate_user_use_case,
            list_upcoming_shows_use_case=list_upcoming_shows_use_case,
            list_user_tickets_use_case=list_user_tickets_use_case,
            purchase_tickets_use_case=purchase_tickets_use_case,
            cancel_ticket_use_case=cancel_ticket_use_case,
        )

    # ============================================================
    # Input helpers
    # ============================================================

    def _rich_prompt(self, message: str, password: bool) -> str:
        return Prompt.ask(message, console=self.console, password=password)

    async def ask(self, message: str, *, password: bool = False) -> str:
        return await anyio.to_thread.run_sync(self._prompt, message, password)

    async def select(self, message: str, count: int) -> Optional[int]:
        """Bounded re-prompt; None when the user cancels or runs out of attempts"""
        for _ in range(self.settings.MAX_PROMPT_ATTEMPTS):
            raw = await self.ask(f'{message} (-1 to cancel)')
            try:
                index = resolve_selection(raw, count)
            except InvalidSelectionError as e:
                render_error(self.console, e)
                continue
            if index is None:
                self.console.print('Canceled.')
            return index

        self.console.print('Too many invalid attempts.', style='yellow')
        return None

    async def _guarded(self, action: Callable[[], Awaitable[None]]) -> None:
        try:
            await action()
        except CustomBaseError as e:
            render_error(self.console, e)

    # ============================================================
    # Menus
    # ============================================================

    async def run(self) -> None:
        self.console.print(f'🎤 {self.settings.PROJECT_NAME}', style='bold cyan')
        try:
            user = await self.auth_menu()
            if user is not None:
                await self.main_menu(user)
        except (EOFError, KeyboardInterrupt):
            Logger.base.info('⌨️ [CONSOLE] Input closed')
        self.console.print('Exiting...')

    async def auth_menu(self) -> Optional[User]:
        failed_logins = 0
        while True:
            self.console.print('\n--- Login or Register to continue ---', style='bold')
            self.console.print('\t1. Register\n\t2. Login\n\t3. Exit')
            option = (await self.ask('Enter an option')).strip()

            if option == '1':
                await self._guarded(self.register)
            elif option == '2':
                user = await self.login()
                if user is not None:
                    return user
                failed_logins += 1
                if failed_logins >= self.settings.MAX_LOGIN_ATTEMPTS:
                    self.console.print('Too many failed login attempts.', style='red')
                    return None
            elif option == '3':
                return None
            else:
                self.console.print('Invalid option! Please try again.', style='red')

    async def main_menu(self, user: User) -> None:
        actions = {
            '1': self.view_shows,
            '2': self.buy_tickets,
            '3': self.cancel_ticket,
            '4': self.show_tickets,
        }
        self.console.print(f'Logged in as: {user.username}', style='cyan')
        while True:
            self.console.print('\nNavigation:', style='bold')
            self.console.print(
                '\t1. View show(s)\n\t2. Buy ticket(s)\n\t3. Cancel a ticket\n'
                '\t4. Show ticket(s)\n\t5. Exit'
            )
            option = (await self.ask('Select')).strip()
            if option == '5':
                return
            action = actions.get(option)
            if action is None:
                self.console.print('Invalid option! Please try again.', style='red')
                continue
            await self._guarded(partial(action, user))

    # ============================================================
    # Actions
    # ============================================================

    async def register(self) -> None:
        username = (await self.ask('Enter username')).strip()
        password = await self.ask('Enter password', password=True)
        await self.register_user_use_case.execute(username=username, password=password)
        self.console.print('\nRegistration successful!', style='green')

    async def login(self) -> Optional[User]:
        username = (await self.ask('Enter username')).strip()
        password = await self.ask('Enter password', password=True)
        try:
            user = await self.authenticate_user_use_case.execute(
                username=username, password=password
            )
        except CustomBaseError as e:
            render_error(self.console, e)
            return None
        self.console.print('\nLogin successful!', style='green')
        return user

    async def view_shows(self, user: User) -> None:
        shows = await self.list_upcoming_shows_use_case.execute()
        if not shows:
            self.console.print('No shows found!', style='yellow')
            return
        render_shows(self.console, shows, title='Upcoming shows')

    async def buy_tickets(self, user: User) -> None:
        shows = await self.list_upcoming_shows_use_case.execute()
        if not shows:
            self.console.print('No shows found!', style='yellow')
            return
        render_shows(self.console, shows, title='Available shows')
        index = await self.select('Select a show', len(shows))
        if index is None:
            return

        show = shows[index]
        currency = self.settings.CURRENCY
        self.console.print(
            f"Cost for {show.singer}'s {show.type} show is {show.price} {currency}/ticket"
        )
        available = show.available_seat_numbers()
        if not available:
            self.console.print('Sorry, this show is sold out.', style='yellow')
            return
        self.console.print(f'Available seats: {", ".join(str(seat) for seat in available)}')
        seat_numbers = parse_seat_numbers(
            await self.ask('Select seat(s) from above available seat(s)')
        )
        self.console.print(
            f'You have selected {len(seat_numbers)} '
            f'({", ".join(str(seat) for seat in seat_numbers)}) '
            f'totaling {show.price_for(len(seat_numbers))} {currency}'
        )

        methods = self.settings.PAYMENT_METHODS
        self.console.print('Please select a payment method')
        for serial, method in enumerate(methods, start=1):
            self.console.print(f'\t{serial}. {method}')
        method_index = await self.select('Select', len(methods))
        if method_index is None:
            return
        payment_method = methods[method_index]
        payment_account = (
            await self.ask(f'Please enter your {payment_method} account number')
        ).strip()

        result = await self.purchase_tickets_use_case.execute(
            user_id=user.id,
            show_id=show.id,
            seat_numbers=seat_numbers,
            payment_method=payment_method,
            payment_account=payment_account,
        )
        render_purchase(
            self.console,
            result,
            payment_method=payment_method,
            payment_account=payment_account,
            currency=currency,
        )

    async def cancel_ticket(self, user: User) -> None:
        views = await self.list_user_tickets_use_case.execute(
            user_id=user.id, active_only=True, upcoming_only=True
        )
        if not views:
            self.console.print('No tickets found!', style='yellow')
            return
        render_tickets(self.console, views, title='Available tickets')
        index = await self.select('Select a ticket', len(views))
        if index is None:
            return

        ticket = await self.cancel_ticket_use_case.execute(
            ticket_id=views[index].ticket.id, user_id=user.id
        )
        self.console.print(
            f'Ticket {ticket.ticket_number} canceled, seat {ticket.seat_number} released.',
            style='green',
        )

    async def show_tickets(self, user: User) -> None:
        views = await self.list_user_tickets_use_case.execute(user_id=user.id)
        if not views:
            self.console.print('No tickets found!', style='yellow')
            return
        render_tickets(self.console, views, title='All your purchased tickets')
