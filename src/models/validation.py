"""
Values that flow through the validation chain: ValidationKind, ValidationRequest
and ValidationResult.
"""
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, List, Mapping, Optional, Sequence, Tuple


class ValidationKind(str, Enum):
    """Closed set of validation tasks understood by the chain."""

    STRING_NOT_EMPTY = "STRING_NOT_EMPTY"
    STRING_OPTIONAL = "STRING_OPTIONAL"
    STRING_LENGTH = "STRING_LENGTH"
    REGEX_PATTERN = "REGEX_PATTERN"
    NUMBER_POSITIVE = "NUMBER_POSITIVE"
    NUMBER_RANGE = "NUMBER_RANGE"
    NUMBER_MIN = "NUMBER_MIN"
    NUMBER_MAX = "NUMBER_MAX"
    DECIMAL_PRECISION = "DECIMAL_PRECISION"
    PAGEABLE = "PAGEABLE"
    PAGEABLE_LENIENT = "PAGEABLE_LENIENT"
    PAGE_SPEC = "PAGE_SPEC"
    SORT_FIELD = "SORT_FIELD"
    SORT_DIRECTION = "SORT_DIRECTION"

    @property
    def description(self) -> str:
        return _KIND_DESCRIPTIONS[self]

    def __str__(self) -> str:
        return f"{self.value}: {self.description}"


_KIND_DESCRIPTIONS = {
    ValidationKind.STRING_NOT_EMPTY: "String must be present and not blank",
    ValidationKind.STRING_OPTIONAL: "Optional string",
    ValidationKind.STRING_LENGTH: "String length must be within bounds",
    ValidationKind.REGEX_PATTERN: "String must match a pattern",
    ValidationKind.NUMBER_POSITIVE: "Number must be positive",
    ValidationKind.NUMBER_RANGE: "Number must be within the given range",
    ValidationKind.NUMBER_MIN: "Number must not be below the given minimum",
    ValidationKind.NUMBER_MAX: "Number must not be above the given maximum",
    ValidationKind.DECIMAL_PRECISION: "Number must not exceed the allowed decimal places",
    ValidationKind.PAGEABLE: "Pagination parameters (strict)",
    ValidationKind.PAGEABLE_LENIENT: "Pagination parameters (normalized)",
    ValidationKind.PAGE_SPEC: "Existing page specification",
    ValidationKind.SORT_FIELD: "Sort field",
    ValidationKind.SORT_DIRECTION: "Sort direction",
}


@dataclass(frozen=True)
class ValidationRequest:
    """One validation task: what to validate, under which label, with which knobs."""

    kind: ValidationKind
    value: Any = None
    field_name: Optional[str] = None
    # Read-only view, left out of the hash; requests hash by kind, value and field.
    parameters: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if not isinstance(self.kind, ValidationKind):
            raise TypeError(f"kind must be a ValidationKind, got {type(self.kind).__name__}")
        # Snapshot the caller's mapping so later mutation cannot leak in.
        params = dict(self.parameters) if self.parameters is not None else {}
        object.__setattr__(self, "parameters", MappingProxyType(params))

    def get(self, key: str, default: Any = None) -> Any:
        return self.parameters.get(key, default)

    def has(self, key: str) -> bool:
        return key in self.parameters

    def __repr__(self) -> str:
        return (
            f"ValidationRequest(kind={self.kind.value}, field_name={self.field_name!r}, "
            f"value={self.value!r}, parameters={dict(self.parameters)!r})"
        )


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of a validation task.

    A valid result never carries errors; an invalid one always carries at
    least one error and never a processed value.
    """

    valid: bool
    message: str
    field_name: Optional[str] = None
    errors: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()
    processed_value: Any = None
    handler_name: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "errors", tuple(self.errors))
        object.__setattr__(self, "warnings", tuple(self.warnings))
        if self.valid and self.errors:
            raise ValueError("a valid ValidationResult cannot carry errors")
        if not self.valid:
            if not self.errors:
                raise ValueError("an invalid ValidationResult must carry at least one error")
            if self.processed_value is not None:
                raise ValueError("an invalid ValidationResult cannot carry a processed value")

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def success(
        cls,
        message: str,
        processed_value: Any = None,
        field_name: Optional[str] = None,
        handler_name: Optional[str] = None,
        warnings: Sequence[str] = (),
    ) -> "ValidationResult":
        return cls(
            valid=True,
            message=message,
            field_name=field_name,
            warnings=tuple(warnings),
            processed_value=processed_value,
            handler_name=handler_name,
        )

    @classmethod
    def failure(
        cls,
        errors: "str | Sequence[str]",
        field_name: Optional[str] = None,
        handler_name: Optional[str] = None,
        message: Optional[str] = None,
        warnings: Sequence[str] = (),
    ) -> "ValidationResult":
        error_list: List[str] = [errors] if isinstance(errors, str) else list(errors)
        if not error_list:
            error_list = [message or "Validation failed"]
        return cls(
            valid=False,
            message=message or error_list[0],
            field_name=field_name,
            errors=tuple(error_list),
            warnings=tuple(warnings),
            processed_value=None,
            handler_name=handler_name,
        )

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def invalid(self) -> bool:
        return not self.valid

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @property
    def first_error(self) -> Optional[str]:
        return self.errors[0] if self.errors else None

    @property
    def first_warning(self) -> Optional[str]:
        return self.warnings[0] if self.warnings else None

    def to_dict(self) -> dict:
        value = self.processed_value
        if hasattr(value, "to_dict"):
            value = value.to_dict()
        return {
            "valid": self.valid,
            "message": self.message,
            "field_name": self.field_name,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "processed_value": value,
            "handler_name": self.handler_name,
        }

    def __repr__(self) -> str:
        return (
            f"ValidationResult(valid={self.valid}, field_name={self.field_name!r}, "
            f"message={self.message!r}, handler_name={self.handler_name!r})"
        )
