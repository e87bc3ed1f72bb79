import pytest

from src.platform.exception.exceptions import LoginError, UsernameTakenError
from src.platform.state.ledger_lock import LedgerLock
from src.service.ticketing.app.command.register_user_use_case import RegisterUserUseCase
from src.service.ticketing.app.query.authenticate_user_use_case import AuthenticateUserUseCase


@pytest.fixture
def register(user_repo, ledger_lock: LedgerLock) -> RegisterUserUseCase:
    return RegisterUserUseCase(user_repo=user_repo, ledger_lock=ledger_lock)


@pytest.fixture
def authenticate(user_repo) -> AuthenticateUserUseCase:
    return AuthenticateUserUseCase(user_repo=user_repo)


@pytest.mark.unit
class TestUserAuth:
    @pytest.mark.asyncio
    async def test_register_then_login(
        self, register: RegisterUserUseCase, authenticate: AuthenticateUserUseCase
    ):
        created = await register.execute(username='alice', password='pw')

        user = await authenticate.execute(username='alice', password='pw')

        assert user.id == created.id == 0

    @pytest.mark.asyncio
    async def test_register_taken_username(self, register: RegisterUserUseCase, user_repo):
        await register.execute(username='alice', password='pw')

        with pytest.raises(UsernameTakenError):
            await register.execute(username='alice', password='other')
        assert len(user_repo.stored) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize('username, password', [('alice', 'wrong'), ('nobody', 'pw')])
    async def test_login_mismatch(
        self,
        register: RegisterUserUseCase,
        authenticate: AuthenticateUserUseCase,
        username: str,
        password: str,
    ):
        await register.execute(username='alice', password='pw')

        with pytest.raises(LoginError):
            await authenticate.execute(username=username, password=password)
