"""
Show Ledger - Aggregate Root for seat inventory

[Business Invariants]
- Show ids are unique within the ledger
- Every booked seat of a show lies in [1, seats], so |booked| <= seats
- Availability is computed from the booked set, never stored
"""

from datetime import date
import copy
from typing import Dict, Iterable, List, Optional

import attrs

from src.platform.exception.exceptions import InvalidLedgerDataError, ShowNotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.domain.entity.show_entity import Show


def _index_by_id(shows: Iterable[Show] | Dict[int, Show]) -> Dict[int, Show]:
    if isinstance(shows, dict):
        shows = shows.values()
    indexed: Dict[int, Show] = {}
    for show in shows:
        if show.id in indexed:
            raise InvalidLedgerDataError(f'Duplicate show id {show.id}')
        indexed[show.id] = show
    return indexed


@attrs.define
class ShowLedger:
    # Insertion order is ledger order
    shows: Dict[int, Show] = attrs.field(factory=dict, converter=_index_by_id)

    def __len__(self) -> int:
        return len(self.shows)

    def __iter__(self):
        return iter(self.shows.values())

    def find(self, show_id: int) -> Optional[Show]:
        return self.shows.get(show_id)

    def get(self, show_id: int) -> Show:
        show = self.shows.get(show_id)
        if show is None:
            raise ShowNotFoundError(show_id)
        return show

    def list_upcoming(self, reference_date: date) -> List[Show]:
        """Shows dated on/after reference_date, in ledger order"""
        return [show for show in self.shows.values() if show.is_upcoming(reference_date)]

    def is_seat_booked(self, show_id: int, seat_number: int) -> bool:
        return self.get(show_id).is_seat_booked(seat_number)

    @Logger.io
    def claim_seat(self, show_id: int, seat_number: int) -> None:
        """
        Raises:
            ShowNotFoundError: No such show
            SeatOutOfRangeError: seat_number not in [1, seats]
            SeatAlreadyBookedError: seat_number already in booked
        """
        self.get(show_id).claim_seat(seat_number)

    @Logger.io
    def release_seat(self, show_id: int, seat_number: int) -> bool:
        """
        Remove seat_number from booked; absent seats are a no-op (returns False)

        Raises:
            ShowNotFoundError: No such show
        """
        return self.get(show_id).release_seat(seat_number)

    def snapshot(self) -> 'ShowLedger':
        """Independent copy (booked sets included) for restore after a failed save"""
        return copy.deepcopy(self)
