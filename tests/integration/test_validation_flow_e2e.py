"""
Integration tests — parameter bags through factory, chain and handlers.
"""
import json
from pathlib import Path

import pytest

from src.models.page_spec import PageSpec
from src.validation.factory import UnsupportedValidationTypeError

SAMPLE_REQUESTS = Path(__file__).resolve().parents[2] / "validation_io" / "requests.json"


class TestValidationFlowE2E:
    """Reference scenarios for the credit-query endpoints."""

    def test_required_string_is_trimmed(self, factory):
        result = factory.create({"type": "STRING_NOT_EMPTY", "value": "  ISS  ", "fieldName": "tipoCredito"})
        assert result.valid is True
        assert result.processed_value == "ISS"

    def test_required_string_missing(self, factory):
        result = factory.create({"type": "STRING_NOT_EMPTY", "value": None, "fieldName": "numeroCredito"})
        assert result.valid is False
        assert "numeroCredito" in result.first_error
        assert "required" in result.first_error

    def test_negative_rate_rejected(self, factory):
        result = factory.create({"type": "NUMBER_POSITIVE", "value": -5, "fieldName": "aliquota"})
        assert result.valid is False
        assert "must be a positive number" in result.first_error

    def test_lenient_pagination_recovers_from_garbage(self, factory):
        result = factory.create({
            "type": "PAGEABLE_LENIENT",
            "fieldName": "pageable",
            "page": -1,
            "size": 0,
            "sortBy": "invalidField",
            "sortDirection": "sideways",
        })
        assert result.valid is True
        assert result.processed_value == PageSpec(page=0, size=10, sort_field="id", sort_direction="ASC")
        assert len(result.warnings) == 4

    def test_inverted_range_has_dedicated_message(self, factory):
        result = factory.create({
            "type": "NUMBER_RANGE", "value": 50, "fieldName": "aliquota", "min": 10, "max": 5,
        })
        assert result.valid is False
        assert result.errors == ("Parameter 'min' must be less than or equal to 'max'",)

    def test_sort_direction_case_insensitive(self, factory):
        result = factory.create({"type": "SORT_DIRECTION", "value": "desc", "fieldName": "sortDirection"})
        assert result.valid is True
        assert result.processed_value == "DESC"


class TestPaginationProperties:
    @pytest.mark.parametrize("size,lenient_size,strict_valid", [
        (0, 10, False),
        (-5, 10, False),
        (100, 100, True),
        (101, 100, False),
        (100000, 100, False),
    ])
    def test_size_boundaries_both_policies(self, chain, size, lenient_size, strict_valid):
        assert chain.create_pageable(size=size).processed_value.size == lenient_size
        assert chain.validate_pageable(size=size).valid is strict_valid

    @pytest.mark.parametrize("sort_by", ["invalidField", "password", "id; DROP TABLE creditos", "VALORISSQN"])
    def test_allow_list_enforced(self, chain, config, sort_by):
        lenient = chain.create_pageable(sort_by=sort_by)
        strict = chain.validate_pageable(sort_by=sort_by)
        assert lenient.processed_value.sort_field == config.default_sort_field
        assert strict.valid is False
        assert sort_by in strict.first_error
        for allowed in config.sorted_sort_fields:
            assert allowed in strict.first_error

    def test_normalized_spec_passes_revalidation(self, chain):
        spec = chain.create_pageable(page="-4", size="5000", sort_by="numeroNfse", sort_direction="Desc").processed_value
        again = chain.validate_page_spec(spec)
        assert again.valid is True
        assert again.processed_value == spec

    def test_strict_accepts_lenient_output(self, chain):
        spec = chain.create_pageable(size=777).processed_value
        strict = chain.validate_pageable(spec.page, spec.size, spec.sort_field, spec.sort_direction)
        assert strict.processed_value == spec

    def test_huge_exponent_inputs_stay_bounded(self, chain, factory):
        lenient = chain.create_pageable(page="1e1000000", size="1e5000")
        assert lenient.valid is True
        assert lenient.processed_value == PageSpec(0, 100, "id", "ASC")
        json.dumps(lenient.to_dict())
        assert factory.create_page_spec(size="1e5000").size == 100
        assert chain.validate_pageable(page="1e100000").valid is False
        assert chain.validate_pageable(size=10 ** 5000).valid is False


class TestRangeProperty:
    @pytest.mark.parametrize("low,high", [(0, 0), (0, 10), (-5, 5), (10, 20)])
    @pytest.mark.parametrize("value", [-6, -5, 0, 5, 10, 15, 20, 21])
    def test_passes_iff_within_bounds(self, chain, low, high, value):
        result = chain.validate_number_range(value, "aliquota", low, high)
        assert result.valid is (low <= value <= high)

    @pytest.mark.parametrize("value", [-6, 0, 7, 21])
    def test_inverted_bounds_always_fail(self, chain, value):
        assert chain.validate_number_range(value, "aliquota", 10, 5).valid is False


class TestSampleRequests:
    def test_sample_bags_run_end_to_end(self, factory):
        bags = json.loads(SAMPLE_REQUESTS.read_text(encoding="utf-8"))
        outcomes = []
        for bag in bags:
            try:
                outcomes.append(factory.create(bag).to_dict())
            except UnsupportedValidationTypeError:
                outcomes.append(None)
        assert len(outcomes) == len(bags)
        assert None in outcomes
        assert any(o and o["valid"] for o in outcomes)
        assert any(o and not o["valid"] for o in outcomes)
        json.dumps(outcomes, default=str)
