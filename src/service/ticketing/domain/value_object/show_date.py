"""
Show Date - Value Object

Stored as "day,month,year" (e.g. "15,8,2024"). Only a numeric parse is
applied; calendar validity is not checked, matching the ledger files.
"""

import calendar
from datetime import date
from typing import Self

import attrs


@attrs.frozen(order=True)
class ShowDate:
    # Field order drives ordering: year, then month, then day
    year: int
    month: int
    day: int

    @classmethod
    def parse(cls, raw: str) -> Self:
        parts = [part.strip() for part in raw.split(',')]
        if len(parts) != 3:
            raise ValueError(f'Invalid show date "{raw}". Expected: day,month,year')
        try:
            day, month, year = (int(part) for part in parts)
        except ValueError:
            raise ValueError(f'Invalid show date "{raw}". Expected: day,month,year')
        return cls(year=year, month=month, day=day)

    @classmethod
    def from_date(cls, value: date) -> Self:
        return cls(year=value.year, month=value.month, day=value.day)

    def is_on_or_after(self, reference: date) -> bool:
        return (self.year, self.month, self.day) >= (reference.year, reference.month, reference.day)

    def display(self) -> str:
        """Human form, e.g. "15 August, 2024" """
        month_name = calendar.month_name[self.month] if 1 <= self.month <= 12 else str(self.month)
        return f'{self.day:02d} {month_name}, {self.year}'

    def __str__(self) -> str:
        return f'{self.day},{self.month},{self.year}'
