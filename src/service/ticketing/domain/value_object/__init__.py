"""Ticketing Domain Value Objects"""

from src.service.ticketing.domain.value_object.seat_ref import SeatRef
from src.service.ticketing.domain.value_object.show_date import ShowDate

__all__ = ['SeatRef', 'ShowDate']
