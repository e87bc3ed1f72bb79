from enum import IntEnum, StrEnum


class TicketStatus(IntEnum):
    """Persisted ticket lifecycle (stored as 1/0 in the ticket ledger)"""

    CANCELLED = 0
    ACTIVE = 1


class TicketDisplayStatus(StrEnum):
    """Status shown to the user - EXPIRED is derived from the show date, never stored"""

    ACTIVE = 'Active'
    EXPIRED = 'Expired'
    CANCELLED = 'Canceled'
