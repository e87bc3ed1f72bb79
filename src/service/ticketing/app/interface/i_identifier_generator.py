from abc import ABC, abstractmethod


class IIdentifierGenerator(ABC):
    """
    Human-readable identifiers for tickets and transactions.

    Neither value is a key: collisions are possible and accepted, tickets are
    addressed by their integer id.
    """

    @abstractmethod
    def ticket_number(self) -> str:
        """3 uppercase letters + 5 digits + 1 uppercase letter, e.g. "KDX04817Q" """
        pass

    @abstractmethod
    def transaction_number(self) -> str:
        """3 characters from 0-9A-Z + current time as HHMMSS, e.g. "7QK142305" """
        pass
