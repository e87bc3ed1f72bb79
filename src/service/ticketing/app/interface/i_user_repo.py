from abc import ABC, abstractmethod

from src.service.ticketing.domain.aggregate.user_directory import UserDirectory


class IUserRepo(ABC):
    @abstractmethod
    async def load(self) -> UserDirectory:
        pass

    @abstractmethod
    async def save(self, *, directory: UserDirectory) -> None:
        pass
