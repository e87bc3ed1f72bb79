import random
import string
from typing import Optional

from src.service.ticketing.app.interface.i_clock import IClock
from src.service.ticketing.app.interface.i_identifier_generator import IIdentifierGenerator


_LETTERS = string.ascii_uppercase
_ALPHANUMERIC = string.digits + string.ascii_uppercase


class IdentifierGeneratorImpl(IIdentifierGenerator):
    def __init__(self, *, clock: IClock, rng: Optional[random.Random] = None) -> None:
        self.clock = clock
        self.rng = rng or random.Random()

    def _pick(self, alphabet: str, count: int) -> str:
        return ''.join(self.rng.choice(alphabet) for _ in range(count))

    def ticket_number(self) -> str:
        return self._pick(_LETTERS, 3) + self._pick(string.digits, 5) + self._pick(_LETTERS, 1)

    def transaction_number(self) -> str:
        return self._pick(_ALPHANUMERIC, 3) + self.clock.now().strftime('%H%M%S')
