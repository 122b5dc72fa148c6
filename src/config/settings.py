"""
Environment settings loaded from .env file.
"""
import os
from typing import List

from dotenv import load_dotenv

from src.config.constants import (
    DEFAULT_MAX_LENGTH,
    DEFAULT_MIN_LENGTH,
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    DEFAULT_PRECISION,
    DEFAULT_SORT_DIRECTION,
    DEFAULT_SORT_FIELD,
    MAX_PAGE_SIZE,
    MAX_PRECISION,
    MIN_PAGE_SIZE,
    VALID_SORT_FIELDS,
)

load_dotenv()


def _csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


# --- Pagination ---
DEFAULT_PAGE_SIZE_SETTING: int = int(os.getenv("VALIDATION_DEFAULT_PAGE_SIZE", str(DEFAULT_PAGE_SIZE)))
MAX_PAGE_SIZE_SETTING: int = int(os.getenv("VALIDATION_MAX_PAGE_SIZE", str(MAX_PAGE_SIZE)))
MIN_PAGE_SIZE_SETTING: int = int(os.getenv("VALIDATION_MIN_PAGE_SIZE", str(MIN_PAGE_SIZE)))
DEFAULT_PAGE_SETTING: int = int(os.getenv("VALIDATION_DEFAULT_PAGE", str(DEFAULT_PAGE)))

# --- Sorting ---
SORT_FIELDS: List[str] = _csv(os.getenv("VALIDATION_SORT_FIELDS", ",".join(VALID_SORT_FIELDS)))
DEFAULT_SORT_FIELD_SETTING: str = os.getenv("VALIDATION_DEFAULT_SORT_FIELD", DEFAULT_SORT_FIELD)
DEFAULT_SORT_DIRECTION_SETTING: str = os.getenv("VALIDATION_DEFAULT_SORT_DIRECTION", DEFAULT_SORT_DIRECTION)

# --- Strings ---
DEFAULT_MIN_LENGTH_SETTING: int = int(os.getenv("VALIDATION_DEFAULT_MIN_LENGTH", str(DEFAULT_MIN_LENGTH)))
DEFAULT_MAX_LENGTH_SETTING: int = int(os.getenv("VALIDATION_DEFAULT_MAX_LENGTH", str(DEFAULT_MAX_LENGTH)))

# --- Numbers ---
DEFAULT_PRECISION_SETTING: int = int(os.getenv("VALIDATION_DEFAULT_PRECISION", str(DEFAULT_PRECISION)))
MAX_PRECISION_SETTING: int = int(os.getenv("VALIDATION_MAX_PRECISION", str(MAX_PRECISION)))

# --- Runtime ---
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
