"""
Unit tests for StringValidationHandler.
"""
import pytest

from src.models.validation import ValidationKind, ValidationRequest


def _request(kind, value, field_name="tipoCredito", **parameters):
    return ValidationRequest(kind, value, field_name, parameters)


class TestCanHandle:
    def test_accepts_string_kinds_only(self, string_handler):
        for kind in ValidationKind:
            expected = kind.value.startswith("STRING") or kind is ValidationKind.REGEX_PATTERN
            assert string_handler.can_handle(_request(kind, None)) is expected

    def test_identity(self, string_handler):
        assert string_handler.name == "StringValidationHandler"
        assert string_handler.priority == 100


class TestNotEmpty:
    def test_trims_value(self, string_handler):
        result = string_handler.handle(_request(ValidationKind.STRING_NOT_EMPTY, "  ISS  "))
        assert result.valid is True
        assert result.processed_value == "ISS"
        assert result.field_name == "tipoCredito"
        assert result.handler_name == "StringValidationHandler"

    def test_none_is_required(self, string_handler):
        result = string_handler.handle(_request(ValidationKind.STRING_NOT_EMPTY, None, "numeroCredito"))
        assert result.valid is False
        assert result.errors == ("Field 'numeroCredito' is required",)

    def test_blank_is_empty(self, string_handler):
        result = string_handler.handle(_request(ValidationKind.STRING_NOT_EMPTY, "   "))
        assert result.valid is False
        assert "cannot be empty" in result.first_error

    def test_non_string_rejected(self, string_handler):
        result = string_handler.handle(_request(ValidationKind.STRING_NOT_EMPTY, 123))
        assert result.valid is False
        assert "must be a string" in result.first_error

    def test_idempotent(self, string_handler):
        first = string_handler.handle(_request(ValidationKind.STRING_NOT_EMPTY, "  ISSQN "))
        second = string_handler.handle(_request(ValidationKind.STRING_NOT_EMPTY, first.processed_value))
        assert second.processed_value == first.processed_value


class TestOptional:
    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_absent_or_blank_is_null_with_warning(self, string_handler, value):
        result = string_handler.handle(_request(ValidationKind.STRING_OPTIONAL, value, "numeroNfse"))
        assert result.valid is True
        assert result.processed_value is None
        assert result.has_warnings
        assert "numeroNfse" in result.first_warning

    def test_present_value_trimmed(self, string_handler):
        result = string_handler.handle(_request(ValidationKind.STRING_OPTIONAL, " 7891011 ", "numeroNfse"))
        assert result.valid is True
        assert result.processed_value == "7891011"
        assert not result.has_warnings

    def test_wrong_type_is_failure(self, string_handler):
        result = string_handler.handle(_request(ValidationKind.STRING_OPTIONAL, 7891011, "numeroNfse"))
        assert result.valid is False
        assert "must be a string" in result.first_error


class TestLength:
    def test_within_explicit_bounds(self, string_handler):
        result = string_handler.handle(
            _request(ValidationKind.STRING_LENGTH, " ISSQN ", min_length=3, max_length=5)
        )
        assert result.valid is True
        assert result.processed_value == "ISSQN"

    def test_too_short(self, string_handler):
        result = string_handler.handle(_request(ValidationKind.STRING_LENGTH, "IS", min_length=3))
        assert result.valid is False
        assert "at least 3" in result.first_error

    def test_too_long(self, string_handler):
        result = string_handler.handle(_request(ValidationKind.STRING_LENGTH, "ISSQN", max_length=3))
        assert result.valid is False
        assert "at most 3" in result.first_error

    def test_default_bounds_from_config(self, string_handler):
        result = string_handler.handle(_request(ValidationKind.STRING_LENGTH, "x" * 256))
        assert result.valid is False
        assert "at most 255" in result.first_error

    def test_inverted_bounds(self, string_handler):
        result = string_handler.handle(
            _request(ValidationKind.STRING_LENGTH, "ISS", min_length=10, max_length=2)
        )
        assert result.valid is False
        assert "min_length" in result.first_error

    def test_blank_value_fails_before_length(self, string_handler):
        result = string_handler.handle(_request(ValidationKind.STRING_LENGTH, "  ", min_length=0))
        assert "cannot be empty" in result.first_error


class TestPattern:
    def test_full_match_required(self, string_handler):
        ok = string_handler.handle(_request(ValidationKind.REGEX_PATTERN, " 123456 ", pattern=r"\d+"))
        bad = string_handler.handle(_request(ValidationKind.REGEX_PATTERN, "123abc", pattern=r"\d+"))
        assert ok.valid is True
        assert ok.processed_value == "123456"
        assert bad.valid is False
        assert "does not match" in bad.first_error

    def test_missing_pattern(self, string_handler):
        result = string_handler.handle(_request(ValidationKind.REGEX_PATTERN, "123"))
        assert result.valid is False
        assert "pattern" in result.first_error

    def test_broken_pattern_is_failure_not_exception(self, string_handler):
        result = string_handler.handle(_request(ValidationKind.REGEX_PATTERN, "123", pattern="(unclosed"))
        assert result.valid is False
        assert "not a valid regular expression" in result.first_error
