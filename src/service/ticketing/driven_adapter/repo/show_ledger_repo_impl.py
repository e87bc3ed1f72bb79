from pathlib import Path
from typing import List

from src.platform.exception.exceptions import DomainError, StorageUnavailableError
from src.platform.logging.loguru_io import Logger
from src.platform.storage.flat_file import decode_records, read_records, write_records
from src.service.ticketing.app.interface.i_show_ledger_repo import IShowLedgerRepo
from src.service.ticketing.domain.aggregate.show_ledger import ShowLedger
from src.service.ticketing.domain.entity.show_entity import Show
from src.service.ticketing.domain.value_object.show_date import ShowDate
from src.service.ticketing.driven_adapter.model.ledger_columns import SEAT_SEPARATOR, SHOW_COLUMNS


class ShowLedgerRepoImpl(IShowLedgerRepo):
    def __init__(self, *, path: Path) -> None:
        self.path = path

    @Logger.io(truncate_content=True)
    async def load(self) -> ShowLedger:
        records = await read_records(self.path, columns=SHOW_COLUMNS)
        shows = decode_records(self.path, records, self._record_to_entity)
        try:
            return ShowLedger(shows=shows)
        except DomainError as e:
            raise StorageUnavailableError(f'{self.path}: {e.message}') from e

    @Logger.io(truncate_content=True)
    async def save(self, *, ledger: ShowLedger) -> None:
        await write_records(
            self.path,
            columns=SHOW_COLUMNS,
            rows=[self._entity_to_record(show) for show in ledger],
        )

    @staticmethod
    def _record_to_entity(fields: List[str]) -> Show:
        show_id, singer, date, venue, show_type, price, seats, booked = fields
        return Show(
            id=int(show_id),
            singer=singer,
            date=ShowDate.parse(date),
            venue=venue,
            type=show_type,
            price=int(price),
            seats=int(seats),
            booked={int(seat) for seat in booked.split(SEAT_SEPARATOR) if seat.strip()},
        )

    @staticmethod
    def _entity_to_record(show: Show) -> List[str]:
        return [
            str(show.id),
            show.singer,
            str(show.date),
            show.venue,
            show.type,
            str(show.price),
            str(show.seats),
            SEAT_SEPARATOR.join(str(seat) for seat in sorted(show.booked)),
        ]
