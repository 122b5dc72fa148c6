"""
Validation Chain — orchestrator of the chain-of-responsibility.

Handlers are copied, sorted by ascending priority and linked once, at construction;
afterwards the chain is read-only and can be shared by concurrent callers.

The convenience methods below are the supported entry points: each builds the
ValidationRequest for one ValidationKind and runs it through the chain.

    chain = build_default_chain()
    result = chain.validate_string_not_empty("  ISS  ", "tipoCredito")
    result.processed_value   # "ISS"
"""
import copy
import logging
from typing import Any, Iterable, List, Optional

from src.config import messages
from src.config.constants import PAGEABLE_FIELD
from src.config.validation_config import ValidationConfig
from src.models.page_spec import PageSpec
from src.models.validation import ValidationKind, ValidationRequest, ValidationResult
from src.validation.handlers.base import ValidationHandler
from src.validation.handlers.number_handler import NumberValidationHandler
from src.validation.handlers.pageable_handler import PageableValidationHandler
from src.validation.handlers.string_handler import StringValidationHandler
from src.validation.metrics import record_outcome, record_unhandled, timed_validation

logger = logging.getLogger(__name__)

CHAIN_NAME = "ValidationChain"


class ValidationChain:
    """Ordered, linked list of handlers with one entry point per validation kind."""

    def __init__(self, handlers: Iterable[ValidationHandler]):
        # Linking only touches these shallow copies, never the caller's instances.
        self._handlers: List[ValidationHandler] = sorted((copy.copy(h) for h in handlers), key=lambda h: h.priority)
        for current, following in zip(self._handlers, self._handlers[1:]):
            current.set_next(following)
        if self._handlers:
            self._handlers[-1].set_next(None)
        logger.debug("Validation chain built: %s", self.registered_handlers)

    # ------------------------------------------------------------------
    # Core
    # ------------------------------------------------------------------

    def validate(self, request: ValidationRequest) -> ValidationResult:
        """Run *request* through the chain. Never raises."""
        if not self._handlers:
            logger.error("Validation chain has no handlers (kind=%s)", request.kind.value)
            record_unhandled(request.kind.value)
            return ValidationResult.failure(
                messages.EMPTY_CHAIN,
                field_name=request.field_name,
                handler_name=CHAIN_NAME,
            )

        with timed_validation(request.kind.value):
            result = self._handlers[0].handle(request)
        record_outcome(result.handler_name, request.kind.value, result.valid)
        return result

    # ------------------------------------------------------------------
    # Strings
    # ------------------------------------------------------------------

    def validate_string_not_empty(self, value: Any, field_name: str) -> ValidationResult:
        return self.validate(ValidationRequest(ValidationKind.STRING_NOT_EMPTY, value, field_name))

    def validate_string_optional(self, value: Any, field_name: str) -> ValidationResult:
        return self.validate(ValidationRequest(ValidationKind.STRING_OPTIONAL, value, field_name))

    def validate_string_length(
        self,
        value: Any,
        field_name: str,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
    ) -> ValidationResult:
        parameters = {}
        if min_length is not None:
            parameters["min_length"] = min_length
        if max_length is not None:
            parameters["max_length"] = max_length
        return self.validate(ValidationRequest(ValidationKind.STRING_LENGTH, value, field_name, parameters))

    def validate_pattern(self, value: Any, field_name: str, pattern: str) -> ValidationResult:
        return self.validate(
            ValidationRequest(ValidationKind.REGEX_PATTERN, value, field_name, {"pattern": pattern})
        )

    # ------------------------------------------------------------------
    # Numbers
    # ------------------------------------------------------------------

    def validate_positive_number(self, value: Any, field_name: str) -> ValidationResult:
        return self.validate(ValidationRequest(ValidationKind.NUMBER_POSITIVE, value, field_name))

    def validate_number_range(self, value: Any, field_name: str, min_value: Any, max_value: Any) -> ValidationResult:
        return self.validate(
            ValidationRequest(ValidationKind.NUMBER_RANGE, value, field_name, {"min": min_value, "max": max_value})
        )

    def validate_number_min(self, value: Any, field_name: str, min_value: Any) -> ValidationResult:
        return self.validate(ValidationRequest(ValidationKind.NUMBER_MIN, value, field_name, {"min": min_value}))

    def validate_number_max(self, value: Any, field_name: str, max_value: Any) -> ValidationResult:
        return self.validate(ValidationRequest(ValidationKind.NUMBER_MAX, value, field_name, {"max": max_value}))

    def validate_decimal_precision(
        self,
        value: Any,
        field_name: str,
        precision: Optional[int] = None,
    ) -> ValidationResult:
        parameters = {} if precision is None else {"precision": precision}
        return self.validate(ValidationRequest(ValidationKind.DECIMAL_PRECISION, value, field_name, parameters))

    # ------------------------------------------------------------------
    # Pagination & sorting
    # ------------------------------------------------------------------

    def validate_pageable(
        self,
        page: Any = None,
        size: Any = None,
        sort_by: Any = None,
        sort_direction: Any = None,
    ) -> ValidationResult:
        """Strict: any present-but-invalid parameter fails the whole bundle."""
        return self.validate(
            ValidationRequest(
                ValidationKind.PAGEABLE,
                None,
                PAGEABLE_FIELD,
                _pagination_parameters(page, size, sort_by, sort_direction),
            )
        )

    def create_pageable(
        self,
        page: Any = None,
        size: Any = None,
        sort_by: Any = None,
        sort_direction: Any = None,
    ) -> ValidationResult:
        """Lenient: invalid parameters fall back to defaults and surface as warnings."""
        return self.validate(
            ValidationRequest(
                ValidationKind.PAGEABLE_LENIENT,
                None,
                PAGEABLE_FIELD,
                _pagination_parameters(page, size, sort_by, sort_direction),
            )
        )

    normalize_pageable = create_pageable

    def validate_page_spec(self, spec: Optional[PageSpec], field_name: str = PAGEABLE_FIELD) -> ValidationResult:
        return self.validate(ValidationRequest(ValidationKind.PAGE_SPEC, spec, field_name))

    def validate_sort_field(self, sort_by: Any, field_name: str = "sort_by") -> ValidationResult:
        return self.validate(ValidationRequest(ValidationKind.SORT_FIELD, sort_by, field_name))

    def validate_sort_direction(self, sort_direction: Any, field_name: str = "sort_direction") -> ValidationResult:
        return self.validate(ValidationRequest(ValidationKind.SORT_DIRECTION, sort_direction, field_name))

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def handlers(self) -> List[ValidationHandler]:
        return list(self._handlers)

    @property
    def registered_handlers(self) -> List[str]:
        return [f"{h.name} (priority: {h.priority})" for h in self._handlers]

    @property
    def handler_count(self) -> int:
        return len(self._handlers)

    @property
    def has_handlers(self) -> bool:
        return bool(self._handlers)


def _pagination_parameters(page: Any, size: Any, sort_by: Any, sort_direction: Any) -> dict:
    return {"page": page, "size": size, "sort_by": sort_by, "sort_direction": sort_direction}


def build_default_chain(config: Optional[ValidationConfig] = None) -> ValidationChain:
    """
    Assemble the standard chain (strings → numbers → pagination/sort).

    Args:
        config: Validation configuration. Defaults to ``ValidationConfig.from_settings()``.
    """
    if config is None:
        config = ValidationConfig.from_settings()
    return ValidationChain([
        PageableValidationHandler(config),
        NumberValidationHandler(config),
        StringValidationHandler(config),
    ])
