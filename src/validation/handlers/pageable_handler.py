"""
Pageable Handler — pagination bundles, sort fields and sort directions.

Two pagination policies live here, selected by kind:

- PAGEABLE (strict): absent parameters take their defaults, but every
  present-and-invalid parameter is reported as an error.
- PAGEABLE_LENIENT: delegated to PageableNormalizer; invalid parameters are
  replaced by defaults and reported as warnings, never as errors.

Both produce a PageSpec as ``processed_value`` on success.
"""
import logging
from typing import Any, List, Optional, Tuple

from src.config import messages
from src.config.constants import PAGEABLE_FIELD, PAGEABLE_HANDLER_PRIORITY, SORT_DIRECTIONS
from src.config.validation_config import ValidationConfig
from src.models.page_spec import PageSpec
from src.models.validation import ValidationKind, ValidationRequest, ValidationResult
from src.validation.handlers.base import ValidationHandler
from src.validation.pagination import PageableNormalizer
from src.validation.parsing import ValueParseError, ValueTooLargeError, parse_integer

logger = logging.getLogger(__name__)

# (parameter, error message) for one offending pagination parameter
_ParamError = Tuple[str, str]


class PageableValidationHandler(ValidationHandler):
    """
    Handles:
        PAGEABLE          → strict PageSpec from page/size/sort_by/sort_direction
        PAGEABLE_LENIENT  → normalized PageSpec, corrections as warnings
        PAGE_SPEC         → re-validation of an existing PageSpec
        SORT_FIELD        → allow-listed field name (default when absent)
        SORT_DIRECTION    → "ASC" | "DESC" (default when absent)
    """

    kinds = frozenset({
        ValidationKind.PAGEABLE,
        ValidationKind.PAGEABLE_LENIENT,
        ValidationKind.PAGE_SPEC,
        ValidationKind.SORT_FIELD,
        ValidationKind.SORT_DIRECTION,
    })

    def __init__(
        self,
        config: ValidationConfig,
        normalizer: Optional[PageableNormalizer] = None,
        priority: int = PAGEABLE_HANDLER_PRIORITY,
    ) -> None:
        super().__init__("PageableValidationHandler", priority)
        self.config = config
        self.normalizer = normalizer if normalizer is not None else PageableNormalizer(config)

    def _do_handle(self, request: ValidationRequest) -> ValidationResult:
        if request.kind is ValidationKind.PAGEABLE:
            return self._validate_pageable(request)
        if request.kind is ValidationKind.PAGEABLE_LENIENT:
            return self._normalize_pageable(request)
        if request.kind is ValidationKind.PAGE_SPEC:
            return self._validate_page_spec(request.value, request.field_name or PAGEABLE_FIELD)
        if request.kind is ValidationKind.SORT_FIELD:
            return self._validate_sort_field(request.value, request.field_name)
        if request.kind is ValidationKind.SORT_DIRECTION:
            return self._validate_sort_direction(request.value, request.field_name)
        return self.unsupported(request)

    # ------------------------------------------------------------------
    # Strict pagination
    # ------------------------------------------------------------------

    def _validate_pageable(self, request: ValidationRequest) -> ValidationResult:
        errors: List[_ParamError] = []
        warnings: List[str] = []

        page = self._strict_page(request.get("page"), errors, warnings)
        size = self._strict_size(request.get("size"), errors, warnings)
        sort_field = self._strict_sort_field(request.get("sort_by"), errors, warnings)
        sort_direction = self._strict_sort_direction(request.get("sort_direction"), errors, warnings)

        if errors:
            logger.debug("Strict pagination rejected: %s", errors)
            return self.error([message for _, message in errors], errors[0][0])

        spec = PageSpec(page=page, size=size, sort_field=sort_field, sort_direction=sort_direction)
        return self.success(messages.PAGEABLE_VALIDATED, PAGEABLE_FIELD, spec, warnings=warnings)

    def _strict_page(self, raw: Any, errors: List[_ParamError], warnings: List[str]) -> Optional[int]:
        if raw is None:
            warnings.append(messages.PAGE_NOT_SPECIFIED % self.config.default_page)
            return self.config.default_page
        try:
            page = parse_integer(raw, "page")
        except ValueTooLargeError as exc:
            errors.append(("page", messages.PAGE_NEGATIVE if exc.negative else str(exc)))
            return None
        except ValueParseError as exc:
            errors.append(("page", str(exc)))
            return None
        if page < 0:
            errors.append(("page", messages.PAGE_NEGATIVE))
            return None
        return page

    def _strict_size(self, raw: Any, errors: List[_ParamError], warnings: List[str]) -> Optional[int]:
        if raw is None:
            warnings.append(messages.SIZE_NOT_SPECIFIED % self.config.default_page_size)
            return self.config.default_page_size
        try:
            size = parse_integer(raw, "size")
        except ValueTooLargeError as exc:
            if exc.negative:
                errors.append(("size", messages.SIZE_MUST_BE_POSITIVE))
            else:
                errors.append(("size", messages.SIZE_EXCEEDS_MAX % self.config.max_page_size))
            return None
        except ValueParseError as exc:
            errors.append(("size", str(exc)))
            return None
        if size <= 0:
            errors.append(("size", messages.SIZE_MUST_BE_POSITIVE))
            return None
        if size > self.config.max_page_size:
            errors.append(("size", messages.SIZE_EXCEEDS_MAX % self.config.max_page_size))
            return None
        return size

    def _strict_sort_field(self, raw: Any, errors: List[_ParamError], warnings: List[str]) -> Optional[str]:
        if raw is None:
            warnings.append(messages.SORT_FIELD_NOT_SPECIFIED % self.config.default_sort_field)
            return self.config.default_sort_field
        if not isinstance(raw, str):
            errors.append(("sort_by", messages.SORT_FIELD_MUST_BE_STRING))
            return None
        sort_field = raw.strip()
        if not self.config.is_valid_sort_field(sort_field):
            errors.append(("sort_by", self._invalid_sort_field(sort_field)))
            return None
        return sort_field

    def _strict_sort_direction(self, raw: Any, errors: List[_ParamError], warnings: List[str]) -> Optional[str]:
        if raw is None:
            warnings.append(messages.SORT_DIRECTION_NOT_SPECIFIED % self.config.default_sort_direction)
            return self.config.default_sort_direction
        if not isinstance(raw, str):
            errors.append(("sort_direction", messages.SORT_DIRECTION_MUST_BE_STRING))
            return None
        direction = raw.strip().upper()
        if direction not in SORT_DIRECTIONS:
            errors.append(("sort_direction", messages.INVALID_SORT_DIRECTION))
            return None
        return direction

    # ------------------------------------------------------------------
    # Lenient pagination
    # ------------------------------------------------------------------

    def _normalize_pageable(self, request: ValidationRequest) -> ValidationResult:
        spec, warnings = self.normalizer.normalize(
            page=request.get("page"),
            size=request.get("size"),
            sort_by=request.get("sort_by"),
            sort_direction=request.get("sort_direction"),
        )
        return self.success(messages.PAGEABLE_NORMALIZED, PAGEABLE_FIELD, spec, warnings=warnings)

    # ------------------------------------------------------------------
    # Existing PageSpec
    # ------------------------------------------------------------------

    def _validate_page_spec(self, spec: Any, field_name: str) -> ValidationResult:
        if spec is None:
            return self.error(messages.FIELD_REQUIRED % field_name, field_name)
        if not isinstance(spec, PageSpec):
            return self.error(messages.PAGE_SPEC_EXPECTED % field_name, field_name)

        errors: List[str] = []
        if spec.page < 0:
            errors.append(messages.PAGE_SPEC_PAGE_NEGATIVE % field_name)
        if spec.size <= 0:
            errors.append(messages.PAGE_SPEC_SIZE_NOT_POSITIVE % field_name)
        elif spec.size > self.config.max_page_size:
            errors.append(messages.PAGE_SPEC_SIZE_EXCEEDS_MAX % (field_name, self.config.max_page_size))
        if spec.is_sorted:
            if not self.config.is_valid_sort_field(spec.sort_field):
                errors.append(self._invalid_sort_field(spec.sort_field))
            if spec.sort_direction not in SORT_DIRECTIONS:
                errors.append(messages.INVALID_SORT_DIRECTION)
        if errors:
            return self.error(errors, field_name)
        return self.success(messages.PAGEABLE_VALIDATED, field_name, spec)

    # ------------------------------------------------------------------
    # Sort field / direction on their own
    # ------------------------------------------------------------------

    def _validate_sort_field(self, value: Any, field_name: str) -> ValidationResult:
        if value is None:
            notice = messages.SORT_FIELD_NOT_SPECIFIED % self.config.default_sort_field
            return self.success(notice, field_name, self.config.default_sort_field, warnings=[notice])
        if not isinstance(value, str):
            return self.error(messages.SORT_FIELD_MUST_BE_STRING, field_name)
        sort_field = value.strip()
        if not self.config.is_valid_sort_field(sort_field):
            return self.error(self._invalid_sort_field(sort_field), field_name)
        return self.success(messages.FIELD_VALIDATED % field_name, field_name, sort_field)

    def _validate_sort_direction(self, value: Any, field_name: str) -> ValidationResult:
        if value is None:
            notice = messages.SORT_DIRECTION_NOT_SPECIFIED % self.config.default_sort_direction
            return self.success(notice, field_name, self.config.default_sort_direction, warnings=[notice])
        if not isinstance(value, str):
            return self.error(messages.SORT_DIRECTION_MUST_BE_STRING, field_name)
        direction = value.strip().upper()
        if direction not in SORT_DIRECTIONS:
            return self.error(messages.INVALID_SORT_DIRECTION, field_name)
        return self.success(messages.FIELD_VALIDATED % field_name, field_name, direction)

    def _invalid_sort_field(self, sort_field: str) -> str:
        return messages.INVALID_SORT_FIELD % (sort_field, ", ".join(self.config.sorted_sort_fields))
