"""
JSON Schema for the parameter bags accepted by ValidationFactory.

The schema only checks presence and shape of the keys a validation type
needs; the values themselves are judged by the validation chain.
"""
from src.models.validation import ValidationKind

# Kinds that validate a single ``value``.
VALUE_KINDS = [
    ValidationKind.STRING_NOT_EMPTY.value,
    ValidationKind.STRING_OPTIONAL.value,
    ValidationKind.STRING_LENGTH.value,
    ValidationKind.REGEX_PATTERN.value,
    ValidationKind.NUMBER_POSITIVE.value,
    ValidationKind.NUMBER_RANGE.value,
    ValidationKind.NUMBER_MIN.value,
    ValidationKind.NUMBER_MAX.value,
    ValidationKind.DECIMAL_PRECISION.value,
    ValidationKind.PAGE_SPEC.value,
    ValidationKind.SORT_FIELD.value,
    ValidationKind.SORT_DIRECTION.value,
]


def _requires(kinds, keys) -> dict:
    return {
        "if": {
            "properties": {"type": {"enum": list(kinds)}},
            "required": ["type"],
        },
        "then": {"required": list(keys)},
    }


FACTORY_REQUEST_SCHEMA: dict = {
    "type": "object",
    "required": ["type", "fieldName"],
    "properties": {
        "type": {
            "type": "string",
            "enum": [kind.value for kind in ValidationKind],
            "description": "Validation kind to run (case-insensitive on input).",
        },
        "fieldName": {
            "type": "string",
            "minLength": 1,
            "description": "Label used in messages and result attribution.",
        },
        "value": {"description": "Raw value to validate (may be null)."},
        "min": {"description": "Lower bound for NUMBER_RANGE and NUMBER_MIN."},
        "max": {"description": "Upper bound for NUMBER_RANGE and NUMBER_MAX."},
        "minLength": {"type": ["integer", "null"]},
        "maxLength": {"type": ["integer", "null"]},
        "pattern": {"type": "string", "description": "Regular expression for REGEX_PATTERN."},
        "precision": {"type": ["integer", "null"]},
        "page": {"description": "Page index (number, numeric string or null)."},
        "size": {"description": "Page size (number, numeric string or null)."},
        "sortBy": {"description": "Sort field name."},
        "sortDirection": {"description": "ASC or DESC, case-insensitive."},
    },
    "allOf": [
        _requires(VALUE_KINDS, ["value"]),
        _requires([ValidationKind.NUMBER_RANGE.value], ["min", "max"]),
        _requires([ValidationKind.NUMBER_MIN.value], ["min"]),
        _requires([ValidationKind.NUMBER_MAX.value], ["max"]),
        _requires([ValidationKind.REGEX_PATTERN.value], ["pattern"]),
    ],
}
