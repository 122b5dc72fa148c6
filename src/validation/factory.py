"""
Validation Factory — façade for callers holding a generic parameter bag.

Checks that the keys the selected ``type`` needs are present (against
FACTORY_REQUEST_SCHEMA) and then defers entirely to the ValidationChain.
Unknown types fail closed with UnsupportedValidationTypeError.

    factory = ValidationFactory(build_default_chain())
    factory.create({"type": "NUMBER_POSITIVE", "value": "12.5", "fieldName": "aliquota"})
"""
import logging
from typing import Any, Dict, List, Mapping, Optional

from jsonschema import ValidationError, validate

from src.config.schemas import FACTORY_REQUEST_SCHEMA
from src.models.page_spec import PageSpec
from src.models.validation import ValidationKind, ValidationResult
from src.validation.chain import ValidationChain

logger = logging.getLogger(__name__)


class FactoryParameterError(ValueError):
    """Raised when a parameter bag lacks a key its validation type needs."""


class UnsupportedValidationTypeError(ValueError):
    """Raised for a ``type`` that is not a ValidationKind."""

    def __init__(self, validation_type: Any) -> None:
        self.validation_type = validation_type
        supported = ", ".join(kind.value for kind in ValidationKind)
        super().__init__(f"Unsupported validation type '{validation_type}'. Supported: {supported}")


class InvalidPaginationError(ValueError):
    """Raised by ``require_page_spec`` when strict pagination validation fails."""

    def __init__(self, errors: List[str], field_name: Optional[str]) -> None:
        self.errors = errors
        self.field_name = field_name
        super().__init__(f"Invalid pagination parameters: {errors[0] if errors else 'unknown error'}")


SUPPORTED_PARAMETERS: Dict[str, str] = {
    "type": "Validation type (required)",
    "fieldName": "Field name (required)",
    "value": "Value to validate (required for value-based types)",
    "min": "Lower bound (NUMBER_RANGE, NUMBER_MIN)",
    "max": "Upper bound (NUMBER_RANGE, NUMBER_MAX)",
    "minLength": "Minimum length (STRING_LENGTH, optional)",
    "maxLength": "Maximum length (STRING_LENGTH, optional)",
    "pattern": "Regular expression (REGEX_PATTERN)",
    "precision": "Maximum decimal places (DECIMAL_PRECISION, optional)",
    "page": "Page index (PAGEABLE, optional)",
    "size": "Page size (PAGEABLE, optional)",
    "sortBy": "Sort field (PAGEABLE, optional)",
    "sortDirection": "Sort direction (PAGEABLE, optional)",
}


class ValidationFactory:
    """Turns ``{"type": ..., "value": ..., "fieldName": ...}`` bags into chain calls."""

    def __init__(self, chain: ValidationChain):
        self.chain = chain

    # ------------------------------------------------------------------
    # Generic entry point
    # ------------------------------------------------------------------

    def create(self, parameters: Mapping[str, Any]) -> ValidationResult:
        """
        Validate a parameter bag through the chain.

        Raises:
            FactoryParameterError: bag is not a mapping or lacks required keys.
            UnsupportedValidationTypeError: ``type`` is not a known kind.
        """
        kind = self._check_parameters(parameters)
        return self._dispatch(kind, parameters)

    @staticmethod
    def supported_parameters() -> Dict[str, str]:
        return dict(SUPPORTED_PARAMETERS)

    def _check_parameters(self, parameters: Any) -> ValidationKind:
        if not isinstance(parameters, Mapping):
            raise FactoryParameterError("Parameters must be a mapping")

        bag = dict(parameters)
        raw_type = bag.get("type")
        if isinstance(raw_type, str):
            bag["type"] = raw_type.strip().upper()
            if bag["type"] not in ValidationKind.__members__:
                logger.warning("Rejected unsupported validation type %r", raw_type)
                raise UnsupportedValidationTypeError(raw_type)

        try:
            validate(instance=bag, schema=FACTORY_REQUEST_SCHEMA)
        except ValidationError as e:
            raise FactoryParameterError(f"Invalid validation parameters: {e.message}") from e

        return ValidationKind(bag["type"])

    def _dispatch(self, kind: ValidationKind, p: Mapping[str, Any]) -> ValidationResult:
        value = p.get("value")
        field_name = p["fieldName"]

        if kind is ValidationKind.STRING_NOT_EMPTY:
            return self.chain.validate_string_not_empty(value, field_name)
        if kind is ValidationKind.STRING_OPTIONAL:
            return self.chain.validate_string_optional(value, field_name)
        if kind is ValidationKind.STRING_LENGTH:
            return self.chain.validate_string_length(value, field_name, p.get("minLength"), p.get("maxLength"))
        if kind is ValidationKind.REGEX_PATTERN:
            return self.chain.validate_pattern(value, field_name, p["pattern"])
        if kind is ValidationKind.NUMBER_POSITIVE:
            return self.chain.validate_positive_number(value, field_name)
        if kind is ValidationKind.NUMBER_RANGE:
            return self.chain.validate_number_range(value, field_name, p["min"], p["max"])
        if kind is ValidationKind.NUMBER_MIN:
            return self.chain.validate_number_min(value, field_name, p["min"])
        if kind is ValidationKind.NUMBER_MAX:
            return self.chain.validate_number_max(value, field_name, p["max"])
        if kind is ValidationKind.DECIMAL_PRECISION:
            return self.chain.validate_decimal_precision(value, field_name, p.get("precision"))
        if kind is ValidationKind.PAGEABLE:
            return self.chain.validate_pageable(p.get("page"), p.get("size"), p.get("sortBy"), p.get("sortDirection"))
        if kind is ValidationKind.PAGEABLE_LENIENT:
            return self.chain.create_pageable(p.get("page"), p.get("size"), p.get("sortBy"), p.get("sortDirection"))
        if kind is ValidationKind.PAGE_SPEC:
            return self.chain.validate_page_spec(value, field_name)
        if kind is ValidationKind.SORT_FIELD:
            return self.chain.validate_sort_field(value, field_name)
        if kind is ValidationKind.SORT_DIRECTION:
            return self.chain.validate_sort_direction(value, field_name)
        raise UnsupportedValidationTypeError(kind.value)

    # ------------------------------------------------------------------
    # Convenience wrappers
    # ------------------------------------------------------------------

    def string_not_empty(self, value: Any, field_name: str) -> ValidationResult:
        return self.create({"type": "STRING_NOT_EMPTY", "value": value, "fieldName": field_name})

    def string_optional(self, value: Any, field_name: str) -> ValidationResult:
        return self.create({"type": "STRING_OPTIONAL", "value": value, "fieldName": field_name})

    def positive_number(self, value: Any, field_name: str) -> ValidationResult:
        return self.create({"type": "NUMBER_POSITIVE", "value": value, "fieldName": field_name})

    def number_range(self, value: Any, field_name: str, min_value: Any, max_value: Any) -> ValidationResult:
        return self.create({
            "type": "NUMBER_RANGE",
            "value": value,
            "fieldName": field_name,
            "min": min_value,
            "max": max_value,
        })

    def number_min(self, value: Any, field_name: str, min_value: Any) -> ValidationResult:
        return self.create({"type": "NUMBER_MIN", "value": value, "fieldName": field_name, "min": min_value})

    def number_max(self, value: Any, field_name: str, max_value: Any) -> ValidationResult:
        return self.create({"type": "NUMBER_MAX", "value": value, "fieldName": field_name, "max": max_value})

    def sort_field(self, sort_by: Any, field_name: str = "sortBy") -> ValidationResult:
        return self.create({"type": "SORT_FIELD", "value": sort_by, "fieldName": field_name})

    def sort_direction(self, sort_direction: Any, field_name: str = "sortDirection") -> ValidationResult:
        return self.create({"type": "SORT_DIRECTION", "value": sort_direction, "fieldName": field_name})

    def pageable(
        self,
        page: Any = None,
        size: Any = None,
        sort_by: Any = None,
        sort_direction: Any = None,
    ) -> ValidationResult:
        return self.create({
            "type": "PAGEABLE",
            "fieldName": "pageable",
            "page": page,
            "size": size,
            "sortBy": sort_by,
            "sortDirection": sort_direction,
        })

    def create_page_spec(
        self,
        page: Any = None,
        size: Any = None,
        sort_by: Any = None,
        sort_direction: Any = None,
    ) -> PageSpec:
        """Lenient: always returns a bounded PageSpec."""
        result = self.create({
            "type": "PAGEABLE_LENIENT",
            "fieldName": "pageable",
            "page": page,
            "size": size,
            "sortBy": sort_by,
            "sortDirection": sort_direction,
        })
        if result.invalid:
            # Only reachable if the chain is misconfigured.
            raise InvalidPaginationError(list(result.errors), result.field_name)
        return result.processed_value

    def require_page_spec(
        self,
        page: Any = None,
        size: Any = None,
        sort_by: Any = None,
        sort_direction: Any = None,
    ) -> PageSpec:
        """
        Strict: returns the PageSpec or raises.

        Raises:
            InvalidPaginationError: any parameter is present but invalid.
        """
        result = self.pageable(page, size, sort_by, sort_direction)
        if result.invalid:
            raise InvalidPaginationError(list(result.errors), result.field_name)
        return result.processed_value
