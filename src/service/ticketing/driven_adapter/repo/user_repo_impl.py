from pathlib import Path
from typing import List

from src.platform.exception.exceptions import DomainError, StorageUnavailableError
from src.platform.logging.loguru_io import Logger
from src.platform.storage.flat_file import decode_records, read_records, write_records
from src.service.ticketing.app.interface.i_user_repo import IUserRepo
from src.service.ticketing.domain.aggregate.user_directory import UserDirectory
from src.service.ticketing.domain.entity.user_entity import User
from src.service.ticketing.driven_adapter.model.ledger_columns import USER_COLUMNS


class UserRepoImpl(IUserRepo):
    def __init__(self, *, path: Path) -> None:
        self.path = path

    @Logger.io(truncate_content=True)
    async def load(self) -> UserDirectory:
        records = await read_records(self.path, columns=USER_COLUMNS)
        users = decode_records(self.path, records, self._record_to_entity)
        try:
            return UserDirectory(users=users)
        except DomainError as e:
            raise StorageUnavailableError(f'{self.path}: {e.message}') from e

    @Logger.io(truncate_content=True)
    async def save(self, *, directory: UserDirectory) -> None:
        await write_records(
            self.path,
            columns=USER_COLUMNS,
            rows=[[str(user.id), user.username, user.password] for user in directory],
        )

    @staticmethod
    def _record_to_entity(fields: List[str]) -> User:
        user_id, username, password = fields
        return User(id=int(user_id), username=username, password=password)
