from enum import StrEnum


class ErrorKind(StrEnum):
    """How the caller should treat an error - controls logging and console rendering"""

    USER_INPUT = 'user_input'  # abort the current operation, user may retry
    INFORMATIONAL = 'informational'  # not a failure, caller continues
    INTERNAL = 'internal'  # consistency fault on an already-validated id
    STORAGE = 'storage'  # ledger unreadable/unwritable, on-disk state unchanged


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, kind: ErrorKind) -> None:
        self.message = message
        self.kind = kind
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, kind: ErrorKind = ErrorKind.USER_INPUT) -> None:
        super().__init__(message, kind)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorKind.INTERNAL)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorKind.USER_INPUT)


class LoginError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorKind.USER_INPUT)


class StorageUnavailableError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorKind.STORAGE)


# Seat inventory / booking ledger errors


class ShowNotFoundError(NotFoundError):
    def __init__(self, show_id: int) -> None:
        super().__init__(f'Show {show_id} not found')
        self.show_id = show_id


class TicketNotFoundError(NotFoundError):
    def __init__(self, ticket_id: int) -> None:
        super().__init__(f'Ticket {ticket_id} not found')
        self.ticket_id = ticket_id


class SeatOutOfRangeError(DomainError):
    def __init__(self, seat_number: int, seats: int) -> None:
        super().__init__(f'Seat number {seat_number} is out of range (1-{seats})')
        self.seat_number = seat_number
        self.seats = seats


class SeatAlreadyBookedError(ConflictError):
    def __init__(self, seat_number: int) -> None:
        super().__init__(f'Seat number {seat_number} is already booked!')
        self.seat_number = seat_number


class DuplicateSeatInRequestError(DomainError):
    def __init__(self, seat_number: int) -> None:
        super().__init__(
            f'Duplicate seat number {seat_number} detected! Please select unique seats.'
        )
        self.seat_number = seat_number


class EmptySeatRequestError(DomainError):
    def __init__(self) -> None:
        super().__init__('At least one seat must be selected')


class AlreadyCancelledError(DomainError):
    def __init__(self, ticket_id: int) -> None:
        super().__init__('Ticket is already canceled', ErrorKind.INFORMATIONAL)
        self.ticket_id = ticket_id


class InvalidLedgerDataError(DomainError):
    pass


# Console / user errors


class InvalidSelectionError(DomainError):
    def __init__(self, raw: str, count: int) -> None:
        super().__init__(f'Invalid selection "{raw}". Choose 1-{count} or -1 to cancel.')
        self.raw = raw
        self.count = count


class UsernameTakenError(ConflictError):
    def __init__(self, username: str) -> None:
        super().__init__('Username already exists! Please choose a different username.')
        self.username = username


class InvalidSeatInputError(DomainError):
    def __init__(self, raw: str) -> None:
        super().__init__(
            f'Invalid seat numbers "{raw}". Enter numbers separated by commas or spaces.'
        )
        self.raw = raw
