"""
Constants used across the validation chain.
Pinned defaults; runtime overrides come from src.config.settings.
"""
from typing import List

# =============================================================================
# Sortable fields of a fiscal credit record (closed allow-list)
# =============================================================================
VALID_SORT_FIELDS: List[str] = [
    "id",
    "numeroCredito",
    "numeroNfse",
    "dataConstituicao",
    "valorIssqn",
    "tipoCredito",
    "simplesNacional",
    "aliquota",
    "valorFaturado",
    "valorDeducao",
    "baseCalculo",
]

SORT_DIRECTIONS: List[str] = ["ASC", "DESC"]

# =============================================================================
# Pagination defaults
# =============================================================================
DEFAULT_PAGE: int = 0
DEFAULT_PAGE_SIZE: int = 10
MIN_PAGE_SIZE: int = 1
MAX_PAGE_SIZE: int = 100
DEFAULT_SORT_FIELD: str = "id"
DEFAULT_SORT_DIRECTION: str = "ASC"

# =============================================================================
# String / number defaults
# =============================================================================
DEFAULT_MIN_LENGTH: int = 1
DEFAULT_MAX_LENGTH: int = 255
DEFAULT_PRECISION: int = 2
MAX_PRECISION: int = 10

# =============================================================================
# Handler priority bands (lower runs first)
# =============================================================================
STRING_HANDLER_PRIORITY: int = 100
NUMBER_HANDLER_PRIORITY: int = 200
PAGEABLE_HANDLER_PRIORITY: int = 300

# Field name used when a result concerns the whole pagination bundle.
PAGEABLE_FIELD: str = "pageable"
