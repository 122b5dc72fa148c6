"""
Number Handler — positive numbers, inclusive ranges, one-sided bounds and decimal precision.
"""
from src.config import messages
from src.config.constants import NUMBER_HANDLER_PRIORITY
from src.config.validation_config import ValidationConfig
from src.models.validation import ValidationKind, ValidationRequest, ValidationResult
from src.validation.handlers.base import ValidationHandler
from src.validation.parsing import ValueParseError, decimal_places, parse_integer, parse_number


class NumberValidationHandler(ValidationHandler):
    """
    Handles:
        NUMBER_POSITIVE    → parsed number > 0
        NUMBER_RANGE       → parsed number in [min, max]; min > max is its own error
        NUMBER_MIN         → parsed number >= min
        NUMBER_MAX         → parsed number <= max
        DECIMAL_PRECISION  → parsed number with at most ``precision`` decimal places
    """

    kinds = frozenset({
        ValidationKind.NUMBER_POSITIVE,
        ValidationKind.NUMBER_RANGE,
        ValidationKind.NUMBER_MIN,
        ValidationKind.NUMBER_MAX,
        ValidationKind.DECIMAL_PRECISION,
    })

    def __init__(self, config: ValidationConfig, priority: int = NUMBER_HANDLER_PRIORITY) -> None:
        super().__init__("NumberValidationHandler", priority)
        self.config = config

    def _do_handle(self, request: ValidationRequest) -> ValidationResult:
        field_name = request.field_name
        if request.value is None:
            return self.error(messages.FIELD_REQUIRED % field_name, field_name)
        try:
            number = parse_number(request.value, field_name)
        except ValueParseError as exc:
            return self.error(str(exc), field_name)

        if request.kind is ValidationKind.NUMBER_POSITIVE:
            return self._validate_positive(number, field_name)
        if request.kind is ValidationKind.NUMBER_RANGE:
            return self._validate_range(number, field_name, request)
        if request.kind is ValidationKind.NUMBER_MIN:
            return self._validate_min(number, field_name, request)
        if request.kind is ValidationKind.NUMBER_MAX:
            return self._validate_max(number, field_name, request)
        if request.kind is ValidationKind.DECIMAL_PRECISION:
            return self._validate_precision(number, field_name, request)
        return self.unsupported(request)

    def _validate_positive(self, number, field_name: str) -> ValidationResult:
        if number <= 0:
            return self.error(messages.FIELD_MUST_BE_POSITIVE % field_name, field_name)
        return self.success(messages.FIELD_VALIDATED % field_name, field_name, number)

    def _validate_range(self, number, field_name: str, request: ValidationRequest) -> ValidationResult:
        min_param = request.get("min")
        max_param = request.get("max")
        if min_param is None or max_param is None:
            return self.error(messages.RANGE_BOUNDS_REQUIRED % field_name, field_name)
        try:
            minimum = parse_number(min_param, "min")
            maximum = parse_number(max_param, "max")
        except ValueParseError as exc:
            return self.error(str(exc), field_name)

        if minimum > maximum:
            return self.error(messages.MIN_MUST_BE_LESS_OR_EQUAL_MAX, field_name)
        if number < minimum or number > maximum:
            return self.error(messages.FIELD_OUT_OF_RANGE % (field_name, minimum, maximum), field_name)
        return self.success(messages.FIELD_VALIDATED % field_name, field_name, number)

    def _validate_min(self, number, field_name: str, request: ValidationRequest) -> ValidationResult:
        if request.get("min") is None:
            return self.error(messages.BOUND_REQUIRED % ("min", field_name), field_name)
        try:
            minimum = parse_number(request.get("min"), "min")
        except ValueParseError as exc:
            return self.error(str(exc), field_name)
        if number < minimum:
            return self.error(messages.FIELD_BELOW_MIN % (field_name, minimum), field_name)
        return self.success(messages.FIELD_VALIDATED % field_name, field_name, number)

    def _validate_max(self, number, field_name: str, request: ValidationRequest) -> ValidationResult:
        if request.get("max") is None:
            return self.error(messages.BOUND_REQUIRED % ("max", field_name), field_name)
        try:
            maximum = parse_number(request.get("max"), "max")
        except ValueParseError as exc:
            return self.error(str(exc), field_name)
        if number > maximum:
            return self.error(messages.FIELD_ABOVE_MAX % (field_name, maximum), field_name)
        return self.success(messages.FIELD_VALIDATED % field_name, field_name, number)

    def _validate_precision(self, number, field_name: str, request: ValidationRequest) -> ValidationResult:
        try:
            precision = parse_integer(request.get("precision", self.config.default_precision), "precision")
        except ValueParseError as exc:
            return self.error(str(exc), field_name)
        precision = max(0, min(precision, self.config.max_precision))

        if decimal_places(number) > precision:
            return self.error(messages.FIELD_TOO_PRECISE % (field_name, precision), field_name)
        return self.success(messages.FIELD_VALIDATED % field_name, field_name, number)
