from typing import Callable

import pytest

from src.platform.exception.exceptions import (
    InvalidLedgerDataError,
    SeatAlreadyBookedError,
    SeatOutOfRangeError,
)
from src.service.ticketing.domain.entity.show_entity import Show


@pytest.mark.unit
class TestShowSeats:
    def test_available_seats_is_seats_minus_booked(self, make_show: Callable[..., Show]):
        show = make_show(seats=5, booked={2, 4})

        assert show.available_seats == 3
        assert show.available_seat_numbers() == [1, 3, 5]

    def test_claim_seat_adds_to_booked(self, make_show: Callable[..., Show]):
        show = make_show(seats=5)

        show.claim_seat(3)

        assert show.booked == {3}
        assert show.available_seats == 4

    @pytest.mark.parametrize('seat_number', [0, 6, -1])
    def test_claim_seat_outside_range(self, make_show: Callable[..., Show], seat_number: int):
        show = make_show(seats=5)

        with pytest.raises(SeatOutOfRangeError):
            show.claim_seat(seat_number)
        assert show.booked == set()

    def test_claim_booked_seat(self, make_show: Callable[..., Show]):
        show = make_show(seats=5, booked={5})

        with pytest.raises(SeatAlreadyBookedError) as exc_info:
            show.claim_seat(5)
        assert exc_info.value.message == 'Seat number 5 is already booked!'

    def test_release_seat_absent_is_noop(self, make_show: Callable[..., Show]):
        show = make_show(booked={1})

        assert show.release_seat(2) is False
        assert show.release_seat(1) is True
        assert show.booked == set()

    def test_price_for_seat_count(self, make_show: Callable[..., Show]):
        assert make_show(price=500).price_for(2) == 1000


@pytest.mark.unit
class TestShowValidation:
    def test_booked_seat_outside_range_rejected(self, make_show: Callable[..., Show]):
        with pytest.raises(InvalidLedgerDataError):
            make_show(seats=3, booked={4})

    def test_separator_in_text_field_rejected(self, make_show: Callable[..., Show]):
        with pytest.raises(InvalidLedgerDataError, match='singer'):
            make_show(singer='AC|DC')

    def test_negative_price_rejected(self, make_show: Callable[..., Show]):
        with pytest.raises(InvalidLedgerDataError, match='price'):
            make_show(price=-1)

    def test_zero_seat_show_is_sold_out(self, make_show: Callable[..., Show]):
        show = make_show(seats=0)

        assert show.available_seats == 0
        with pytest.raises(SeatOutOfRangeError):
            show.claim_seat(1)
