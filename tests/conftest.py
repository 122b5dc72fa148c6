"""
Shared test fixtures for the validation chain test suite.
"""
import pytest

from src.config.validation_config import ValidationConfig
from src.models.page_spec import PageSpec
from src.validation.chain import ValidationChain, build_default_chain
from src.validation.factory import ValidationFactory
from src.validation.handlers.number_handler import NumberValidationHandler
from src.validation.handlers.pageable_handler import PageableValidationHandler
from src.validation.handlers.string_handler import StringValidationHandler
from src.validation.pagination import PageableNormalizer


def pytest_make_parametrize_id(config, val, argname):
    """Give huge ints a short test id; str() on them exceeds Python's digit limit."""
    if isinstance(val, int) and not isinstance(val, bool) and val.bit_length() > 64:
        return f"{argname}-int{val.bit_length()}bits"
    return None


# ==========================================================================
# Configuration
# ==========================================================================

@pytest.fixture
def config():
    """Pinned defaults: id/ASC, page size 10, max 100."""
    return ValidationConfig()


@pytest.fixture
def small_config():
    """Narrow allow-list and small page sizes, to check config is honoured."""
    return ValidationConfig(
        valid_sort_fields=frozenset({"numeroCredito", "dataConstituicao"}),
        default_page_size=5,
        max_page_size=20,
        default_sort_field="dataConstituicao",
        default_sort_direction="desc",
    )


# ==========================================================================
# Handlers
# ==========================================================================

@pytest.fixture
def string_handler(config):
    return StringValidationHandler(config)


@pytest.fixture
def number_handler(config):
    return NumberValidationHandler(config)


@pytest.fixture
def pageable_handler(config):
    return PageableValidationHandler(config)


@pytest.fixture
def normalizer(config):
    return PageableNormalizer(config)


# ==========================================================================
# Chain & factory
# ==========================================================================

@pytest.fixture
def chain(config) -> ValidationChain:
    return build_default_chain(config)


@pytest.fixture
def factory(chain) -> ValidationFactory:
    return ValidationFactory(chain)


# ==========================================================================
# Sample values
# ==========================================================================

@pytest.fixture
def default_page_spec():
    return PageSpec(page=0, size=10, sort_field="id", sort_direction="ASC")


@pytest.fixture
def credit_query_params():
    """Query parameters as a controller would receive them (all strings)."""
    return {
        "page": "2",
        "size": "25",
        "sortBy": "dataConstituicao",
        "sortDirection": "desc",
    }
