from datetime import date
from typing import Iterable, List, Set

import attrs

from src.platform.exception.exceptions import (
    InvalidLedgerDataError,
    SeatAlreadyBookedError,
    SeatOutOfRangeError,
)
from src.service.ticketing.domain.validators import NumericValidators, StringValidators
from src.service.ticketing.domain.value_object.show_date import ShowDate


def _to_seat_set(value: Iterable[int]) -> Set[int]:
    return {int(seat) for seat in value}


@attrs.define
class Show:
    id: int
    singer: str = attrs.field(validator=StringValidators.required_text)
    date: ShowDate
    venue: str = attrs.field(validator=StringValidators.required_text)
    type: str = attrs.field(validator=StringValidators.required_text)
    price: int = attrs.field(validator=NumericValidators.non_negative)
    seats: int = attrs.field(validator=NumericValidators.non_negative)
    # Seat numbers currently occupied, each in [1, seats]
    booked: Set[int] = attrs.field(factory=set, converter=_to_seat_set)

    def __attrs_post_init__(self) -> None:
        out_of_range = sorted(seat for seat in self.booked if not self.has_seat(seat))
        if out_of_range:
            raise InvalidLedgerDataError(
                f'Show {self.id} has booked seats outside 1-{self.seats}: {out_of_range}'
            )

    @property
    def available_seats(self) -> int:
        return self.seats - len(self.booked)

    def has_seat(self, seat_number: int) -> bool:
        return 1 <= seat_number <= self.seats

    def is_seat_booked(self, seat_number: int) -> bool:
        return seat_number in self.booked

    def is_upcoming(self, reference_date: date) -> bool:
        return self.date.is_on_or_after(reference_date)

    def available_seat_numbers(self) -> List[int]:
        return [seat for seat in range(1, self.seats + 1) if seat not in self.booked]

    def price_for(self, seat_count: int) -> int:
        return self.price * seat_count

    def claim_seat(self, seat_number: int) -> None:
        """
        Mark one seat as occupied

        Raises:
            SeatOutOfRangeError: seat_number not in [1, seats]
            SeatAlreadyBookedError: seat_number already occupied
        """
        if not self.has_seat(seat_number):
            raise SeatOutOfRangeError(seat_number, self.seats)
        if seat_number in self.booked:
            raise SeatAlreadyBookedError(seat_number)
        self.booked.add(seat_number)

    def release_seat(self, seat_number: int) -> bool:
        """Free one seat. Returns False when the seat was not occupied."""
        if seat_number not in self.booked:
            return False
        self.booked.discard(seat_number)
        return True
