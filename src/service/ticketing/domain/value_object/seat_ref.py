import attrs


@attrs.frozen
class SeatRef:
    """A seat of a show, as held by one ticket"""

    show_id: int
    seat_number: int
