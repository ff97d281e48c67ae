from functools import lru_cache

from .config import HasherSettings, load_settings
from .hasher import PasswordHasher, PasswordVerificationResult


@lru_cache(maxsize=None)
def default_settings() -> HasherSettings:
    # .env and the environment are read once per process, not per call
    return load_settings()


def _hasher(settings: HasherSettings | None) -> PasswordHasher:
    return PasswordHasher(iterations=(settings or default_settings()).iterations)


def hash_password(password: str, *, settings: HasherSettings | None = None) -> str:
    return _hasher(settings).hash_password(password)


def verify_password(stored: str, candidate: str, *,
                    settings: HasherSettings | None = None) -> PasswordVerificationResult:
    return _hasher(settings).verify_password(stored, candidate)
