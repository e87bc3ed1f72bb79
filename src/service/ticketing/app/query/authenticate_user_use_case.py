from src.platform.exception.exceptions import LoginError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_user_repo import IUserRepo
from src.service.ticketing.domain.entity.user_entity import User


class AuthenticateUserUseCase:
    def __init__(self, *, user_repo: IUserRepo) -> None:
        self.user_repo = user_repo

    @Logger.io
    async def execute(self, *, username: str, password: str) -> User:
        directory = await self.user_repo.load()
        user = directory.find_by_username(username)
        if user is None or not user.check_password(password):
            raise LoginError('Invalid username or password!')
        return user
