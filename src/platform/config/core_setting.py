from pathlib import Path
from typing import Annotated, List, Optional

import orjson
from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from src.platform.constant.path import DATA_DIR


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Show Ticketing'
    VERSION: str = '0.1.0'
    DEBUG: bool = False  # Enables DEBUG logs and the rotating log file
    LOG_LEVEL: str = 'WARNING'  # stderr sink level when DEBUG is off

    # Flat-file ledgers
    DATA_DIR: Path = DATA_DIR
    SHOWS_FILE: str = 'shows.txt'
    TICKETS_FILE: str = 'tickets.txt'
    USERS_FILE: str = 'users.txt'

    # Booking
    CURRENCY: str = 'BDT'
    PAYMENT_METHODS: Annotated[List[str], NoDecode] = ['bKash', 'Nagad', 'Rocket']

    @field_validator('PAYMENT_METHODS', mode='before')
    @classmethod
    def assemble_payment_methods(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and v.startswith('['):
            return orjson.loads(v)
        elif isinstance(v, str):
            return [i.strip() for i in v.split(',') if i.strip()]
        return v

    # Console
    MAX_LOGIN_ATTEMPTS: int = 3
    MAX_PROMPT_ATTEMPTS: int = 3

    # None uses the host's local time, like the original console program
    TIMEZONE: Optional[str] = None

    @property
    def SHOWS_PATH(self) -> Path:
        return self.DATA_DIR / self.SHOWS_FILE

    @property
    def TICKETS_PATH(self) -> Path:
        return self.DATA_DIR / self.TICKETS_FILE

    @property
    def USERS_PATH(self) -> Path:
        return self.DATA_DIR / self.USERS_FILE


settings = Settings()  # type: ignore
