"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.ticketing.driving_adapter.cli import console_app


WIRE_MODULES: list[ModuleType] = [
    console_app,
]
