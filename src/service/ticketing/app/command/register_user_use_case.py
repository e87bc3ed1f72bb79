from src.platform.logging.loguru_io import Logger
from src.platform.state.ledger_lock import LedgerLock
from src.service.ticketing.app.interface.i_user_repo import IUserRepo
from src.service.ticketing.domain.entity.user_entity import User


class RegisterUserUseCase:
    def __init__(self, *, user_repo: IUserRepo, ledger_lock: LedgerLock) -> None:
        self.user_repo = user_repo
        self.ledger_lock = ledger_lock

    @Logger.io
    async def execute(self, *, username: str, password: str) -> User:
        """
        Raises:
            UsernameTakenError: Username already registered
            InvalidLedgerDataError: Empty username/password or forbidden characters
            StorageUnavailableError: User file could not be loaded or saved
        """
        async with self.ledger_lock.hold(key=f'user:{username}'):
            directory = await self.user_repo.load()
            user = directory.register(username=username, password=password)
            await self.user_repo.save(directory=directory)

        Logger.base.info(f'👤 [REGISTER] user={user.id} username={user.username}')
        return user
