"""
Unit tests for ValidationFactory: parameter-bag checks, dispatch and the
page-spec helpers.
"""
from decimal import Decimal

import pytest

from src.models.page_spec import PageSpec
from src.validation.factory import (
    FactoryParameterError,
    InvalidPaginationError,
    UnsupportedValidationTypeError,
)


class TestParameterChecks:
    def test_not_a_mapping(self, factory):
        with pytest.raises(FactoryParameterError):
            factory.create(["STRING_NOT_EMPTY", "x"])

    def test_missing_field_name(self, factory):
        with pytest.raises(FactoryParameterError, match="fieldName"):
            factory.create({"type": "STRING_NOT_EMPTY", "value": "x"})

    def test_blank_field_name(self, factory):
        with pytest.raises(FactoryParameterError):
            factory.create({"type": "STRING_NOT_EMPTY", "value": "x", "fieldName": ""})

    def test_missing_type(self, factory):
        with pytest.raises(FactoryParameterError, match="type"):
            factory.create({"value": "x", "fieldName": "campo"})

    def test_missing_value_key(self, factory):
        with pytest.raises(FactoryParameterError, match="value"):
            factory.create({"type": "NUMBER_POSITIVE", "fieldName": "aliquota"})

    def test_range_requires_bounds(self, factory):
        with pytest.raises(FactoryParameterError, match="max"):
            factory.create({"type": "NUMBER_RANGE", "value": 5, "fieldName": "aliquota", "min": 1})

    def test_min_requires_min(self, factory):
        with pytest.raises(FactoryParameterError, match="min"):
            factory.create({"type": "NUMBER_MIN", "value": 5, "fieldName": "aliquota", "max": 10})

    def test_max_requires_max(self, factory):
        with pytest.raises(FactoryParameterError, match="max"):
            factory.create({"type": "NUMBER_MAX", "value": 5, "fieldName": "aliquota"})

    def test_pattern_requires_pattern(self, factory):
        with pytest.raises(FactoryParameterError, match="pattern"):
            factory.create({"type": "REGEX_PATTERN", "value": "123", "fieldName": "numeroNfse"})

    def test_unknown_type_fails_closed(self, factory):
        with pytest.raises(UnsupportedValidationTypeError) as exc_info:
            factory.create({"type": "CPF", "value": "x", "fieldName": "documento"})
        assert exc_info.value.validation_type == "CPF"
        assert "STRING_NOT_EMPTY" in str(exc_info.value)

    def test_explicit_null_value_reaches_chain(self, factory):
        result = factory.create({"type": "STRING_NOT_EMPTY", "value": None, "fieldName": "numeroCredito"})
        assert result.valid is False
        assert "required" in result.first_error

    def test_caller_bag_not_mutated(self, factory):
        bag = {"type": "string_not_empty", "value": "x", "fieldName": "campo"}
        factory.create(bag)
        assert bag["type"] == "string_not_empty"


class TestDispatch:
    def test_type_is_case_insensitive(self, factory):
        result = factory.create({"type": " sort_direction ", "value": "desc", "fieldName": "sortDirection"})
        assert result.valid is True
        assert result.processed_value == "DESC"

    def test_string_length_bounds(self, factory):
        result = factory.create({
            "type": "STRING_LENGTH", "value": "ISSQN", "fieldName": "tipoCredito",
            "minLength": 1, "maxLength": 3,
        })
        assert result.valid is False
        assert "at most 3" in result.first_error

    def test_decimal_precision(self, factory):
        result = factory.create({
            "type": "DECIMAL_PRECISION", "value": "0.05", "fieldName": "aliquota", "precision": 2,
        })
        assert result.valid is True
        assert result.processed_value == Decimal("0.05")

    def test_page_spec_kind(self, factory, default_page_spec):
        result = factory.create({"type": "PAGE_SPEC", "value": default_page_spec, "fieldName": "pageable"})
        assert result.valid is True

    def test_pageable_reads_camel_case_keys(self, factory, credit_query_params):
        result = factory.create({"type": "PAGEABLE", "fieldName": "pageable", **credit_query_params})
        assert result.valid is True
        assert result.processed_value == PageSpec(2, 25, "dataConstituicao", "DESC")

    def test_wrappers(self, factory):
        assert factory.string_not_empty(" ISS ", "tipoCredito").processed_value == "ISS"
        assert factory.string_optional(None, "numeroNfse").processed_value is None
        assert factory.positive_number("-5", "aliquota").valid is False
        assert factory.number_range(50, "aliquota", 10, 5).valid is False
        assert factory.number_min("0.5", "aliquota", 1).valid is False
        assert factory.number_max("0.5", "aliquota", 1).processed_value == Decimal("0.5")
        assert factory.sort_field("valorIssqn").processed_value == "valorIssqn"
        assert factory.sort_direction("asc").processed_value == "ASC"
        assert factory.pageable(size=101).valid is False

    def test_supported_parameters(self, factory):
        params = factory.supported_parameters()
        assert {"type", "fieldName", "value", "min", "max", "sortBy", "sortDirection"} <= set(params)
        params["type"] = "changed"
        assert factory.supported_parameters()["type"] != "changed"


class TestPageSpecHelpers:
    def test_create_page_spec_is_lenient(self, factory):
        spec = factory.create_page_spec(page=-1, size=0, sort_by="invalidField", sort_direction="sideways")
        assert spec == PageSpec(0, 10, "id", "ASC")

    def test_create_page_spec_clamps(self, factory):
        assert factory.create_page_spec(size=100000).size == 100

    def test_require_page_spec_success(self, factory):
        spec = factory.require_page_spec(page=1, size=20, sort_by="id", sort_direction="desc")
        assert spec == PageSpec(1, 20, "id", "DESC")

    def test_require_page_spec_raises(self, factory):
        with pytest.raises(InvalidPaginationError) as exc_info:
            factory.require_page_spec(size=0, sort_by="invalidField")
        assert exc_info.value.field_name == "size"
        assert len(exc_info.value.errors) == 2
        assert "must be greater than zero" in str(exc_info.value)

    def test_create_page_spec_clamps_huge_exponent(self, factory):
        assert factory.create_page_spec(page="1e1000000", size="1e5000") == PageSpec(0, 100, "id", "ASC")

    def test_require_page_spec_rejects_huge_exponent(self, factory):
        with pytest.raises(InvalidPaginationError) as exc_info:
            factory.require_page_spec(page="1e100000")
        assert exc_info.value.field_name == "page"
