"""
String Handler — required/optional strings, length bounds and patterns.
"""
import logging
import re

from src.config import messages
from src.config.constants import STRING_HANDLER_PRIORITY
from src.config.validation_config import ValidationConfig
from src.models.validation import ValidationKind, ValidationRequest, ValidationResult
from src.validation.handlers.base import ValidationHandler
from src.validation.parsing import ValueParseError, parse_integer

logger = logging.getLogger(__name__)


class StringValidationHandler(ValidationHandler):
    """
    Handles:
        STRING_NOT_EMPTY  → trimmed string, or failure when null/non-string/blank
        STRING_OPTIONAL   → trimmed string, or null (with a warning) when absent/blank
        STRING_LENGTH     → trimmed string within min_length/max_length
        REGEX_PATTERN     → trimmed string fully matching ``pattern``
    """

    kinds = frozenset({
        ValidationKind.STRING_NOT_EMPTY,
        ValidationKind.STRING_OPTIONAL,
        ValidationKind.STRING_LENGTH,
        ValidationKind.REGEX_PATTERN,
    })

    def __init__(self, config: ValidationConfig, priority: int = STRING_HANDLER_PRIORITY) -> None:
        super().__init__("StringValidationHandler", priority)
        self.config = config

    def _do_handle(self, request: ValidationRequest) -> ValidationResult:
        if request.kind is ValidationKind.STRING_NOT_EMPTY:
            return self.validate_not_empty(request.value, request.field_name)
        if request.kind is ValidationKind.STRING_OPTIONAL:
            return self.validate_optional(request.value, request.field_name)
        if request.kind is ValidationKind.STRING_LENGTH:
            return self._validate_length(request)
        if request.kind is ValidationKind.REGEX_PATTERN:
            return self._validate_pattern(request)
        return self.unsupported(request)

    # ------------------------------------------------------------------

    def validate_not_empty(self, value, field_name: str) -> ValidationResult:
        if value is None:
            return self.error(messages.FIELD_REQUIRED % field_name, field_name)
        if not isinstance(value, str):
            return self.error(messages.FIELD_MUST_BE_STRING % field_name, field_name)
        trimmed = value.strip()
        if not trimmed:
            return self.error(messages.FIELD_CANNOT_BE_EMPTY % field_name, field_name)
        return self.success(messages.FIELD_VALIDATED % field_name, field_name, trimmed)

    def validate_optional(self, value, field_name: str) -> ValidationResult:
        if value is None:
            notice = messages.FIELD_OPTIONAL_ABSENT % field_name
            return self.success(notice, field_name, None, warnings=[notice])
        if not isinstance(value, str):
            return self.error(messages.FIELD_MUST_BE_STRING % field_name, field_name)
        trimmed = value.strip()
        if not trimmed:
            notice = messages.FIELD_OPTIONAL_BLANK % field_name
            return self.success(notice, field_name, None, warnings=[notice])
        return self.success(messages.FIELD_VALIDATED % field_name, field_name, trimmed)

    def _validate_length(self, request: ValidationRequest) -> ValidationResult:
        field_name = request.field_name
        required = self.validate_not_empty(request.value, field_name)
        if required.invalid:
            return required

        try:
            min_length = parse_integer(request.get("min_length", self.config.default_min_length), "min_length")
            max_length = parse_integer(request.get("max_length", self.config.default_max_length), "max_length")
        except ValueParseError as exc:
            return self.error(str(exc), field_name)
        if min_length > max_length:
            return self.error(messages.LENGTH_BOUNDS_INVALID % field_name, field_name)

        trimmed = required.processed_value
        if len(trimmed) < min_length:
            return self.error(messages.FIELD_TOO_SHORT % (field_name, min_length), field_name)
        if len(trimmed) > max_length:
            return self.error(messages.FIELD_TOO_LONG % (field_name, max_length), field_name)
        return self.success(messages.FIELD_VALIDATED % field_name, field_name, trimmed)

    def _validate_pattern(self, request: ValidationRequest) -> ValidationResult:
        field_name = request.field_name
        pattern = request.get("pattern")
        if not isinstance(pattern, str) or not pattern:
            return self.error(messages.PATTERN_REQUIRED % field_name, field_name)
        try:
            compiled = re.compile(pattern)
        except re.error as exc:
            return self.error(messages.PATTERN_INVALID % (field_name, exc), field_name)

        required = self.validate_not_empty(request.value, field_name)
        if required.invalid:
            return required

        trimmed = required.processed_value
        if compiled.fullmatch(trimmed) is None:
            logger.debug("Field '%s' rejected by pattern %r", field_name, pattern)
            return self.error(messages.FIELD_PATTERN_MISMATCH % field_name, field_name)
        return self.success(messages.FIELD_VALIDATED % field_name, field_name, trimmed)
