from typing import List, Sequence

from src.platform.exception.exceptions import (
    CustomBaseError,
    DuplicateSeatInRequestError,
    EmptySeatRequestError,
    SeatAlreadyBookedError,
)
from src.platform.logging.loguru_io import Logger
from src.platform.storage.unit_of_work import LedgerUnitOfWork
from src.service.ticketing.app.dto.purchase_dto import PurchaseResult
from src.service.ticketing.app.interface.i_identifier_generator import IIdentifierGenerator
from src.service.ticketing.domain.aggregate.show_ledger import ShowLedger
from src.service.ticketing.domain.entity.ticket_entity import Ticket


class PurchaseTicketsUseCase:
    """
    Buy one or more seats of one show in a single all-or-nothing request.

    Flow (under the ledger lock):
    1. Reject empty requests and seats repeated within the request
    2. Reject any seat that is already booked
    3. Draw one transaction number for the whole request
    4. Per seat, in request order: claim it in ShowLedger, issue a ticket
    5. Persist both ledgers

    A claim failure in step 4 (e.g. seat outside the show) releases every seat
    this request claimed and nothing is persisted.
    """

    def __init__(
        self,
        *,
        uow: LedgerUnitOfWork,
        identifier_generator: IIdentifierGenerator,
    ) -> None:
        self.uow = uow
        self.identifier_generator = identifier_generator

    @staticmethod
    def _validate_request(seat_numbers: Sequence[int]) -> None:
        if not seat_numbers:
            raise EmptySeatRequestError()
        seen: set[int] = set()
        for seat_number in seat_numbers:
            if seat_number in seen:
                raise DuplicateSeatInRequestError(seat_number)
            seen.add(seat_number)

    @staticmethod
    def _rollback_claims(show_ledger: ShowLedger, show_id: int, claimed: List[int]) -> None:
        for seat_number in claimed:
            show_ledger.release_seat(show_id, seat_number)
        Logger.base.warning(
            f'↩️ [PURCHASE] Released {len(claimed)} claimed seats of show {show_id}'
        )

    @Logger.io
    async def execute(
        self,
        *,
        user_id: int,
        show_id: int,
        seat_numbers: Sequence[int],
        payment_method: str,
        payment_account: str,
    ) -> PurchaseResult:
        """
        Raises:
            EmptySeatRequestError: No seat requested
            DuplicateSeatInRequestError: Same seat requested twice
            ShowNotFoundError: No such show
            SeatAlreadyBookedError: A requested seat is taken
            SeatOutOfRangeError: A requested seat does not exist in the show
            StorageUnavailableError: Ledgers could not be loaded or saved
        """
        seat_numbers = list(seat_numbers)
        self._validate_request(seat_numbers)

        async with self.uow.transaction(key=f'show:{show_id}') as tx:
            show = tx.show_ledger.get(show_id)
            for seat_number in seat_numbers:
                if tx.show_ledger.is_seat_booked(show_id, seat_number):
                    raise SeatAlreadyBookedError(seat_number)

            transaction_number = self.identifier_generator.transaction_number()
            claimed: List[int] = []
            tickets: List[Ticket] = []
            try:
                for seat_number in seat_numbers:
                    ticket_number = self.identifier_generator.ticket_number()
                    tx.show_ledger.claim_seat(show_id, seat_number)
                    claimed.append(seat_number)
                    tickets.append(
                        tx.ticket_ledger.issue(
                            user_id=user_id,
                            show_id=show_id,
                            seat_number=seat_number,
                            payment_method=payment_method,
                            payment_account=payment_account,
                            transaction_number=transaction_number,
                            ticket_number=ticket_number,
                        )
                    )
            except CustomBaseError:
                self._rollback_claims(tx.show_ledger, show_id, claimed)
                raise

            await tx.commit()

        Logger.base.info(
            f'🎫 [PURCHASE] user={user_id} show={show_id} seats={seat_numbers} '
            f'txn={transaction_number}'
        )
        return PurchaseResult(
            show=show,
            tickets=tickets,
            transaction_number=transaction_number,
            total_cost=show.price_for(len(tickets)),
        )
