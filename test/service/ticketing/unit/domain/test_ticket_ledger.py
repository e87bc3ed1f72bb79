import attrs
import pytest

from src.platform.exception.exceptions import (
    AlreadyCancelledError,
    InvalidLedgerDataError,
    SeatAlreadyBookedError,
    TicketNotFoundError,
)
from src.service.ticketing.domain.aggregate.ticket_ledger import TicketLedger
from src.service.ticketing.domain.entity.ticket_entity import Ticket
from src.service.ticketing.domain.enum.ticket_status import TicketStatus
from src.service.ticketing.domain.value_object.seat_ref import SeatRef


def _issue(ledger: TicketLedger, *, user_id: int = 0, show_id: int = 0, seat_number: int = 1):
    return ledger.issue(
        user_id=user_id,
        show_id=show_id,
        seat_number=seat_number,
        payment_method='bKash',
        payment_account='01700000000',
        transaction_number='7QK142305',
        ticket_number='KDX04817Q',
    )


@pytest.mark.unit
class TestTicketLedgerIssue:
    def test_first_ticket_id_is_zero_and_increments(self):
        ledger = TicketLedger()

        first = _issue(ledger, seat_number=1)
        second = _issue(ledger, seat_number=2)

        assert (first.id, second.id) == (0, 1)
        assert first.status == TicketStatus.ACTIVE

    def test_same_active_seat_rejected(self):
        ledger = TicketLedger()
        _issue(ledger, seat_number=3)

        with pytest.raises(SeatAlreadyBookedError):
            _issue(ledger, seat_number=3)

    def test_seat_reusable_after_cancel(self):
        ledger = TicketLedger()
        ticket = _issue(ledger, seat_number=3)
        ledger.cancel(ticket.id)

        reissued = _issue(ledger, seat_number=3)

        assert reissued.id == 1


@pytest.mark.unit
class TestTicketLedgerCancel:
    def test_cancel_returns_seat_and_flips_status(self):
        ledger = TicketLedger()
        ticket = _issue(ledger, show_id=4, seat_number=2)

        seat_ref = ledger.cancel(ticket.id)

        assert seat_ref == SeatRef(show_id=4, seat_number=2)
        assert ledger.find_by_id(ticket.id).status == TicketStatus.CANCELLED
        # Stored ticket is replaced, the issued one is never mutated
        assert ticket.status == TicketStatus.ACTIVE

    def test_ticket_is_immutable(self):
        ticket = _issue(TicketLedger())

        with pytest.raises(attrs.exceptions.FrozenInstanceError):
            ticket.status = TicketStatus.CANCELLED

    def test_cancel_twice(self):
        ledger = TicketLedger()
        ticket = _issue(ledger)
        ledger.cancel(ticket.id)

        with pytest.raises(AlreadyCancelledError) as exc_info:
            ledger.cancel(ticket.id)
        assert exc_info.value.message == 'Ticket is already canceled'

    def test_cancel_unknown(self):
        with pytest.raises(TicketNotFoundError):
            TicketLedger().cancel(7)


@pytest.mark.unit
class TestTicketLedgerQueries:
    def test_list_by_user_in_ledger_order(self):
        ledger = TicketLedger()
        mine_1 = _issue(ledger, user_id=1, seat_number=1)
        _issue(ledger, user_id=2, seat_number=2)
        mine_2 = _issue(ledger, user_id=1, seat_number=3)
        ledger.cancel(mine_2.id)

        assert [t.id for t in ledger.list_by_user(1)] == [mine_1.id, mine_2.id]
        assert [t.id for t in ledger.list_by_user(1, active_only=True)] == [mine_1.id]
        assert ledger.list_by_user(9) == []

    def test_two_active_tickets_on_one_seat_rejected_on_load(self):
        tickets = [
            Ticket(
                id=ticket_id,
                ticket_number='KDX04817Q',
                user_id=0,
                show_id=0,
                seat_number=1,
                payment_method='bKash',
                payment_account='017',
                transaction_number='7QK142305',
            )
            for ticket_id in (0, 1)
        ]

        with pytest.raises(InvalidLedgerDataError):
            TicketLedger(tickets=tickets)
