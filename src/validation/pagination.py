"""
Pagination/Sort Normalizer — lenient policy.

Turns raw, possibly invalid page/size/sort inputs into a safe, bounded
PageSpec. Nothing is ever rejected: every invalid or missing input is
replaced by the configured default (or clamped to the configured bound) and
the correction is reported as a warning.

    page            absent / unparsable / negative    → default page (0)
    size            absent / unparsable / <= 0        → default size (10)
                    > max (including huge exponents)  → max (100)
    sort_by         absent / blank / not allowed      → default field
    sort_direction  absent / blank / not ASC|DESC     → default direction
"""
import logging
from typing import Any, List, Optional, Tuple

import numpy as np

from src.config import messages
from src.config.constants import SORT_DIRECTIONS
from src.config.validation_config import ValidationConfig
from src.models.page_spec import PageSpec
from src.validation.parsing import ValueParseError, ValueTooLargeError, describe, parse_integer

logger = logging.getLogger(__name__)


class PageableNormalizer:
    """Lenient builder of PageSpec objects, sharing the handlers' configuration."""

    def __init__(self, config: ValidationConfig):
        self.config = config

    def normalize(
        self,
        page: Any = None,
        size: Any = None,
        sort_by: Any = None,
        sort_direction: Any = None,
    ) -> Tuple[PageSpec, List[str]]:
        """
        Build a PageSpec from raw values.

        Returns:
            (spec, warnings), with one warning per corrected or defaulted input.
        """
        warnings: List[str] = []
        spec = PageSpec(
            page=self.normalize_page(page, warnings),
            size=self.normalize_size(size, warnings),
            sort_field=self.normalize_sort_field(sort_by, warnings),
            sort_direction=self.normalize_sort_direction(sort_direction, warnings),
        )
        if warnings:
            logger.debug("Pagination normalized to %r with corrections: %s", spec, warnings)
        return spec, warnings

    def default_page_spec(self) -> PageSpec:
        return PageSpec(
            page=self.config.default_page,
            size=self.config.default_page_size,
            sort_field=self.config.default_sort_field,
            sort_direction=self.config.default_sort_direction,
        )

    def unsorted(self, page: Any = None, size: Any = None) -> PageSpec:
        """PageSpec without a sort order (page and size still normalized)."""
        return PageSpec(page=self.normalize_page(page), size=self.normalize_size(size))

    # ------------------------------------------------------------------
    # Individual parameters
    # ------------------------------------------------------------------

    def normalize_page(self, page: Any, warnings: Optional[List[str]] = None) -> int:
        warnings = warnings if warnings is not None else []
        default = self.config.default_page
        if page is None:
            warnings.append(messages.PAGE_NOT_SPECIFIED % default)
            return default
        try:
            value = parse_integer(page, "page")
        except ValueParseError:
            warnings.append(messages.PAGE_INVALID_CORRECTED % (describe(page), default))
            return default
        if value < 0:
            warnings.append(messages.PAGE_NEGATIVE_CORRECTED % 0)
            return 0
        return value

    def normalize_size(self, size: Any, warnings: Optional[List[str]] = None) -> int:
        warnings = warnings if warnings is not None else []
        default = self.config.default_page_size
        maximum = self.config.max_page_size
        if size is None:
            warnings.append(messages.SIZE_NOT_SPECIFIED % default)
            return default
        try:
            value = parse_integer(size, "size")
        except ValueTooLargeError as exc:
            if exc.negative:
                warnings.append(messages.SIZE_INVALID_CORRECTED % (describe(size), default))
                return default
            warnings.append(messages.SIZE_CLAMPED % (describe(size), maximum))
            return maximum
        except ValueParseError:
            warnings.append(messages.SIZE_INVALID_CORRECTED % (describe(size), default))
            return default
        if value <= 0:
            warnings.append(messages.SIZE_INVALID_CORRECTED % (describe(size), default))
            return default
        clamped = int(np.clip(value, self.config.min_page_size, maximum))
        if clamped != value:
            warnings.append(messages.SIZE_CLAMPED % (describe(size), clamped))
        return clamped

    def normalize_sort_field(self, sort_by: Any, warnings: Optional[List[str]] = None) -> str:
        warnings = warnings if warnings is not None else []
        default = self.config.default_sort_field
        if sort_by is None or (isinstance(sort_by, str) and not sort_by.strip()):
            warnings.append(messages.SORT_FIELD_NOT_SPECIFIED % default)
            return default
        if not isinstance(sort_by, str) or not self.config.is_valid_sort_field(sort_by.strip()):
            warnings.append(messages.SORT_FIELD_CORRECTED % (describe(sort_by), default))
            return default
        return sort_by.strip()

    def normalize_sort_direction(self, sort_direction: Any, warnings: Optional[List[str]] = None) -> str:
        warnings = warnings if warnings is not None else []
        default = self.config.default_sort_direction
        if sort_direction is None or (isinstance(sort_direction, str) and not sort_direction.strip()):
            warnings.append(messages.SORT_DIRECTION_NOT_SPECIFIED % default)
            return default
        if isinstance(sort_direction, str):
            direction = sort_direction.strip().upper()
            if direction in SORT_DIRECTIONS:
                return direction
        warnings.append(messages.SORT_DIRECTION_CORRECTED % (describe(sort_direction), default))
        return default
