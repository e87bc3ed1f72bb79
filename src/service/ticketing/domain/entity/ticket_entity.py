import attrs

from src.platform.exception.exceptions import AlreadyCancelledError
from src.service.ticketing.domain.enum.ticket_status import TicketStatus
from src.service.ticketing.domain.validators import StringValidators
from src.service.ticketing.domain.value_object.seat_ref import SeatRef


@attrs.frozen
class Ticket:
    id: int
    # Display label only, not unique by construction; id is the key
    ticket_number: str = attrs.field(validator=StringValidators.required_text)
    user_id: int
    show_id: int
    seat_number: int
    payment_method: str = attrs.field(validator=StringValidators.storable_text)
    payment_account: str = attrs.field(validator=StringValidators.storable_text)
    transaction_number: str = attrs.field(validator=StringValidators.storable_text)
    status: TicketStatus = attrs.field(default=TicketStatus.ACTIVE, converter=TicketStatus)

    @property
    def is_active(self) -> bool:
        return self.status == TicketStatus.ACTIVE

    @property
    def seat_ref(self) -> SeatRef:
        return SeatRef(show_id=self.show_id, seat_number=self.seat_number)

    def cancel(self) -> 'Ticket':
        """
        Cancel ticket (Domain validation)

        Raises:
            AlreadyCancelledError: Ticket was cancelled before
        """
        if self.status == TicketStatus.CANCELLED:
            raise AlreadyCancelledError(self.id)
        return attrs.evolve(self, status=TicketStatus.CANCELLED)
