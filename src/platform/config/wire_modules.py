"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.user.driving_adapter.http_controller import user_controller


WIRE_MODULES: list[ModuleType] = [
    user_controller,
]
