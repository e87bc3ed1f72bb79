from abc import ABC, abstractmethod
from datetime import date, datetime


class IClock(ABC):
    """Current date/time source for upcoming-vs-past checks and transaction numbers"""

    @abstractmethod
    def now(self) -> datetime:
        pass

    def today(self) -> date:
        return self.now().date()
