from .run import RunFactory
from .settings import UserSettingsFactory

__all__ = [
    "RunFactory",
    "UserSettingsFactory",
]
