from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

from src.service.ticketing.app.interface.i_clock import IClock


class SystemClock(IClock):
    """Wall clock; host local time unless a timezone name is configured"""

    def __init__(self, *, timezone: Optional[str] = None) -> None:
        self.tz = ZoneInfo(timezone) if timezone else None

    def now(self) -> datetime:
        return datetime.now(self.tz)
