import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from .keys import PBKDF2_PARAMS

logger = logging.getLogger(__name__)

ITERATIONS_ENV = "HASHVAULT_ITERATIONS"
MAX_ITERATIONS = 0xFFFFFFFF  # stored as a UInt32


@dataclass(frozen=True)
class HasherSettings:
    iterations: int = PBKDF2_PARAMS["iterations"]


def _iterations(default: int) -> int:
    raw = os.getenv(ITERATIONS_ENV)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("%s=%r is not an integer, using %d", ITERATIONS_ENV, raw, default)
        return default
    if not 1 <= value <= MAX_ITERATIONS:
        logger.warning("%s=%d must be between 1 and %d, using %d",
                       ITERATIONS_ENV, value, MAX_ITERATIONS, default)
        return default
    if value < default:
        logger.warning("%s=%d is below the recommended %d", ITERATIONS_ENV, value, default)
    return value


def load_settings() -> HasherSettings:
    """Read settings from the environment (and a .env file, if present)."""
    load_dotenv(find_dotenv(usecwd=True))
    return HasherSettings(iterations=_iterations(HasherSettings.iterations))
