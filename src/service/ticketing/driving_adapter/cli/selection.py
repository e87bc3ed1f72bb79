"""Pure parsers for console input; the re-prompt loop lives in ConsoleApp."""

import re
from typing import List, Optional

from src.platform.exception.exceptions import InvalidSeatInputError, InvalidSelectionError


CANCEL_SELECTION = -1

_SEAT_SPLIT = re.compile(r'[,\s]+')


def resolve_selection(raw: str, count: int) -> Optional[int]:
    """
    Map a 1-based menu answer to a 0-based index

    Returns:
        The index, or None when the user entered -1 to cancel

    Raises:
        InvalidSelectionError: Not a number, or outside 1..count
    """
    try:
        choice = int(raw.strip())
    except ValueError:
        raise InvalidSelectionError(raw, count)
    if choice == CANCEL_SELECTION:
        return None
    if not 1 <= choice <= count:
        raise InvalidSelectionError(raw, count)
    return choice - 1


def parse_seat_numbers(raw: str) -> List[int]:
    """
    "1, 2 5" -> [1, 2, 5]. Order and repeats are kept; the purchase decides on them.

    Raises:
        InvalidSeatInputError: Empty input or a non-numeric token
    """
    tokens = [token for token in _SEAT_SPLIT.split(raw.strip()) if token]
    if not tokens:
        raise InvalidSeatInputError(raw)
    try:
        return [int(token) for token in tokens]
    except ValueError:
        raise InvalidSeatInputError(raw)
