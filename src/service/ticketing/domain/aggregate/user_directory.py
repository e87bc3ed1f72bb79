from typing import Dict, Iterable, Optional

import attrs

from src.platform.exception.exceptions import InvalidLedgerDataError, UsernameTakenError
from src.service.ticketing.domain.entity.user_entity import User


def _index_by_id(users: Iterable[User] | Dict[int, User]) -> Dict[int, User]:
    if isinstance(users, dict):
        users = users.values()
    indexed: Dict[int, User] = {}
    usernames: set[str] = set()
    for user in users:
        if user.id in indexed:
            raise InvalidLedgerDataError(f'Duplicate user id {user.id}')
        if user.username in usernames:
            raise InvalidLedgerDataError(f'Duplicate username "{user.username}"')
        indexed[user.id] = user
        usernames.add(user.username)
    return indexed


@attrs.define
class UserDirectory:
    # Ids and usernames are both unique
    users: Dict[int, User] = attrs.field(factory=dict, converter=_index_by_id)

    def __len__(self) -> int:
        return len(self.users)

    def __iter__(self):
        return iter(self.users.values())

    def find_by_username(self, username: str) -> Optional[User]:
        return next((user for user in self.users.values() if user.username == username), None)

    def register(self, *, username: str, password: str) -> User:
        if self.find_by_username(username) is not None:
            raise UsernameTakenError(username)
        user = User(id=max(self.users, default=-1) + 1, username=username, password=password)
        self.users[user.id] = user
        return user
