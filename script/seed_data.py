#!/usr/bin/env python3
"""
Ledger Seed Script
Populate sample data into the flat-file ledgers

Features:
1. Create Users - 2 test users sharing one password
2. Create Shows - upcoming shows plus one past show (its tickets list as Expired)
3. Reset Tickets - an empty ticket ledger, since seeded shows start with no bookings

Notes:
- Files land in settings.DATA_DIR (override with DATA_DIR=...)
- Existing ledgers are overwritten
"""

from dataclasses import dataclass
from datetime import date, timedelta

import anyio

from src.platform.config.core_setting import settings
from src.service.ticketing.domain.aggregate.show_ledger import ShowLedger
from src.service.ticketing.domain.aggregate.ticket_ledger import TicketLedger
from src.service.ticketing.domain.aggregate.user_directory import UserDirectory
from src.service.ticketing.domain.entity.show_entity import Show
from src.service.ticketing.domain.value_object import ShowDate
from src.service.ticketing.driven_adapter.repo.show_ledger_repo_impl import ShowLedgerRepoImpl
from src.service.ticketing.driven_adapter.repo.ticket_ledger_repo_impl import (
    TicketLedgerRepoImpl,
)
from src.service.ticketing.driven_adapter.repo.user_repo_impl import UserRepoImpl

DEFAULT_PASSWORD = 'P@ssw0rd'
TEST_USERNAMES = ['buyer', 'buyer_2']


@dataclass
class ShowConfig:
    """Show seed configuration"""
    singer: str
    days_from_today: int
    venue: str
    type: str
    price: int
    seats: int


# Shows to create, dated relative to today
SHOWS = [
    ShowConfig('James', 14, 'Army Stadium', 'Rock', 1500, 50),
    ShowConfig('Habib Wahid', 30, 'ICCB Hall 4', 'Pop', 1200, 40),
    ShowConfig('Shironamhin', 45, 'Bangabandhu Stadium', 'Band', 800, 100),
    ShowConfig('Runa Laila', -7, 'Shilpakala Academy', 'Classical', 2000, 30),
]


def build_show_ledger(today: date) -> ShowLedger:
    return ShowLedger(
        shows=[
            Show(
                id=show_id,
                singer=config.singer,
                date=ShowDate.from_date(today + timedelta(days=config.days_from_today)),
                venue=config.venue,
                type=config.type,
                price=config.price,
                seats=config.seats,
            )
            for show_id, config in enumerate(SHOWS)
        ]
    )


def build_user_directory() -> UserDirectory:
    directory = UserDirectory()
    for username in TEST_USERNAMES:
        directory.register(username=username, password=DEFAULT_PASSWORD)
    return directory


async def main() -> None:
    print('🌱 Starting data seeding...')
    print('=' * 50)

    show_ledger = build_show_ledger(date.today())
    await ShowLedgerRepoImpl(path=settings.SHOWS_PATH).save(ledger=show_ledger)
    for show in show_ledger:
        print(f'   ✅ Created show: ID={show.id}, {show.singer} ({show.date.display()})')

    user_directory = build_user_directory()
    await UserRepoImpl(path=settings.USERS_PATH).save(directory=user_directory)
    for user in user_directory:
        print(f'   ✅ Created user: ID={user.id}, Username={user.username}')

    await TicketLedgerRepoImpl(path=settings.TICKETS_PATH).save(ledger=TicketLedger())
    print('   ✅ Reset ticket ledger')

    print()
    print('=' * 50)
    print(f'🌱 Data seeding completed! Ledgers in {settings.DATA_DIR}')
    print(f'📋 Test accounts: {", ".join(TEST_USERNAMES)} / {DEFAULT_PASSWORD}')


if __name__ == '__main__':
    anyio.run(main)
