"""
Show Ticketing - Console Application
Handles registration/login, show listing, ticket purchase and cancellation.
"""

import anyio

from src.platform.config.di import cleanup, container, setup
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.driving_adapter.cli.console_app import ConsoleApp


async def main() -> None:
    Logger.base.info('🚀 [Show Ticketing] Starting up...')
    setup()

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Show Ticketing] Dependency injection wired')

    try:
        await ConsoleApp.depends().run()
    finally:
        cleanup()
        container.unwire()
        Logger.base.info('🛑 [Show Ticketing] Shutdown complete')


def run() -> None:
    anyio.run(main)


if __name__ == '__main__':
    run()
