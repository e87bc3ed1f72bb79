from typing import Any

import pytest

from src.platform.exception.exceptions import (
    AlreadyCancelledError,
    ErrorKind,
    StorageUnavailableError,
    TicketNotFoundError,
)
from src.service.ticketing.app.command.cancel_ticket_use_case import CancelTicketUseCase
from src.service.ticketing.app.command.purchase_tickets_use_case import PurchaseTicketsUseCase
from src.service.ticketing.domain.enum.ticket_status import TicketStatus


@pytest.fixture
async def purchased(purchase_use_case: PurchaseTicketsUseCase) -> Any:
    return await purchase_use_case.execute(
        user_id=7,
        show_id=0,
        seat_numbers=[1, 2],
        payment_method='Nagad',
        payment_account='01800000000',
    )


@pytest.mark.unit
class TestCancelTicketUseCase:
    @pytest.mark.asyncio
    async def test_cancel_releases_seat(
        self,
        cancel_use_case: CancelTicketUseCase,
        purchased: Any,
        show_ledger_repo,
        ticket_ledger_repo,
    ):
        """
        Given: Seats [1, 2] purchased
        When: Cancelling the seat-1 ticket
        Then: Ticket is CANCELLED, only seat 2 stays booked and the seat-2 ticket is untouched
        """
        ticket = await cancel_use_case.execute(ticket_id=purchased.tickets[0].id)

        assert ticket.status == TicketStatus.CANCELLED
        assert show_ledger_repo.stored.get(0).booked == {2}
        stored = ticket_ledger_repo.stored
        assert stored.find_by_id(purchased.tickets[0].id).status == TicketStatus.CANCELLED
        assert stored.find_by_id(purchased.tickets[1].id) == purchased.tickets[1]
        assert stored.find_by_id(purchased.tickets[1].id).status == TicketStatus.ACTIVE

    @pytest.mark.asyncio
    async def test_cancel_twice_is_informational(
        self,
        cancel_use_case: CancelTicketUseCase,
        purchased: Any,
        show_ledger_repo,
        ticket_ledger_repo,
    ):
        ticket_id = purchased.tickets[0].id
        await cancel_use_case.execute(ticket_id=ticket_id)
        saves_before = ticket_ledger_repo.save_calls

        with pytest.raises(AlreadyCancelledError) as exc_info:
            await cancel_use_case.execute(ticket_id=ticket_id)

        assert exc_info.value.kind == ErrorKind.INFORMATIONAL
        assert show_ledger_repo.stored.get(0).booked == {2}
        assert ticket_ledger_repo.save_calls == saves_before

    @pytest.mark.asyncio
    async def test_cancel_unknown_ticket(self, cancel_use_case: CancelTicketUseCase):
        with pytest.raises(TicketNotFoundError):
            await cancel_use_case.execute(ticket_id=99)

    @pytest.mark.asyncio
    async def test_cancel_someone_elses_ticket(
        self, cancel_use_case: CancelTicketUseCase, purchased: Any, ticket_ledger_repo
    ):
        with pytest.raises(TicketNotFoundError):
            await cancel_use_case.execute(ticket_id=purchased.tickets[0].id, user_id=8)

        assert ticket_ledger_repo.stored.find_by_id(purchased.tickets[0].id).is_active

    @pytest.mark.asyncio
    async def test_cancel_with_failed_ticket_save_keeps_seat_booked(
        self,
        cancel_use_case: CancelTicketUseCase,
        purchased: Any,
        show_ledger_repo,
        ticket_ledger_repo,
    ):
        ticket_ledger_repo.fail_on_save = True

        with pytest.raises(StorageUnavailableError):
            await cancel_use_case.execute(ticket_id=purchased.tickets[0].id)

        assert show_ledger_repo.stored.get(0).booked == {1, 2}
        assert ticket_ledger_repo.stored.find_by_id(purchased.tickets[0].id).is_active
