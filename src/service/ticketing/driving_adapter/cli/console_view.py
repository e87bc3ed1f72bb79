"""Rich rendering of shows, tickets and purchase receipts."""

from typing import Sequence

from rich.console import Console
from rich.table import Table

from src.platform.exception.exceptions import CustomBaseError, ErrorKind
from src.service.ticketing.app.dto import PurchaseResult, TicketView
from src.service.ticketing.domain.entity.show_entity import Show
from src.service.ticketing.domain.enum import TicketDisplayStatus


_STATUS_STYLE = {
    TicketDisplayStatus.ACTIVE: 'green',
    TicketDisplayStatus.EXPIRED: 'dim',
    TicketDisplayStatus.CANCELLED: 'red',
}


def render_shows(console: Console, shows: Sequence[Show], *, title: str) -> None:
    table = Table(title=title, show_header=True, header_style='bold magenta')
    table.add_column('#', justify='right', style='cyan', no_wrap=True)
    table.add_column('Singer')
    table.add_column('Date')
    table.add_column('Venue')
    table.add_column('Type')
    table.add_column('Price', justify='right')
    table.add_column('Available Seats', justify='right', style='green')

    for serial, show in enumerate(shows, start=1):
        table.add_row(
            str(serial),
            show.singer,
            show.date.display(),
            show.venue,
            show.type,
            str(show.price),
            str(show.available_seats),
        )
    console.print(table)


def render_tickets(console: Console, views: Sequence[TicketView], *, title: str) -> None:
    table = Table(title=title, show_header=True, header_style='bold magenta')
    table.add_column('#', justify='right', style='cyan', no_wrap=True)
    table.add_column('Ticket Number', no_wrap=True)
    table.add_column('Show')
    table.add_column('Venue')
    table.add_column('Date')
    table.add_column('Seat', justify='right')
    table.add_column('Payment')
    table.add_column('Transaction', no_wrap=True)
    table.add_column('Status')

    for serial, view in enumerate(views, start=1):
        ticket = view.ticket
        table.add_row(
            str(serial),
            ticket.ticket_number,
            view.show_title,
            view.show.venue if view.show else '-',
            view.show.date.display() if view.show else '-',
            str(ticket.seat_number),
            f'{ticket.payment_method} ({ticket.payment_account})',
            ticket.transaction_number,
            f'[{_STATUS_STYLE[view.display_status]}]{view.display_status}[/]',
        )
    console.print(table)


def render_purchase(
    console: Console,
    result: PurchaseResult,
    *,
    payment_method: str,
    payment_account: str,
    currency: str,
) -> None:
    console.print(
        f'\n✅ Thank you! Transaction ID {result.transaction_number}, '
        f'{len(result.tickets)} ticket(s) purchased, and {result.total_cost} {currency} '
        f'credited from your {payment_method} account ({payment_account}).',
        style='green',
    )
    console.print('Purchased ticket(s):')
    for ticket in result.tickets:
        console.print(f'\t{ticket.ticket_number} (seat {ticket.seat_number})')


def render_error(console: Console, error: CustomBaseError) -> None:
    if error.kind == ErrorKind.INFORMATIONAL:
        console.print(f'ℹ️  {error.message}', style='yellow')
    elif error.kind == ErrorKind.USER_INPUT:
        console.print(f'❌ {error.message}', style='red')
    elif error.kind == ErrorKind.INTERNAL:
        console.print(f'⚠️  Internal error: {error.message}', style='bold magenta')
    else:
        console.print(
            '💥 System error, please retry or contact support.', style='bold red'
        )
