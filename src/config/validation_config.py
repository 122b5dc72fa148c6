"""
Typed, self-checking configuration for the validation chain.

Built once at startup (usually via ``ValidationConfig.from_settings()``) and
shared read-only by every handler.
"""
from __future__ import annotations

from typing import FrozenSet, List

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from src.config import constants, settings


class ValidationConfig(BaseModel):
    """Allow-list, page-size bounds and defaults consumed by the handlers."""

    model_config = ConfigDict(frozen=True)

    valid_sort_fields: FrozenSet[str] = Field(
        default=frozenset(constants.VALID_SORT_FIELDS),
        description="Record fields a client may sort by.",
    )
    default_page: int = Field(constants.DEFAULT_PAGE, ge=0)
    default_page_size: int = Field(constants.DEFAULT_PAGE_SIZE, ge=1)
    min_page_size: int = Field(constants.MIN_PAGE_SIZE, ge=1)
    max_page_size: int = Field(constants.MAX_PAGE_SIZE, ge=1)
    default_sort_field: str = constants.DEFAULT_SORT_FIELD
    default_sort_direction: str = constants.DEFAULT_SORT_DIRECTION
    default_min_length: int = Field(constants.DEFAULT_MIN_LENGTH, ge=0)
    default_max_length: int = Field(constants.DEFAULT_MAX_LENGTH, ge=1)
    default_precision: int = Field(constants.DEFAULT_PRECISION, ge=0)
    max_precision: int = Field(constants.MAX_PRECISION, ge=0)

    @field_validator("valid_sort_fields")
    @classmethod
    def validate_sort_fields(cls, v: FrozenSet[str]) -> FrozenSet[str]:
        if not v:
            raise ValueError("valid_sort_fields must not be empty")
        return v

    @field_validator("default_sort_direction")
    @classmethod
    def validate_direction(cls, v: str) -> str:
        direction = v.strip().upper()
        if direction not in constants.SORT_DIRECTIONS:
            raise ValueError(f"default_sort_direction must be one of {constants.SORT_DIRECTIONS}, got '{v}'")
        return direction

    @model_validator(mode="after")
    def check_consistency(self) -> "ValidationConfig":
        if self.default_sort_field not in self.valid_sort_fields:
            raise ValueError(
                f"default_sort_field '{self.default_sort_field}' is not in valid_sort_fields"
            )
        if not self.min_page_size <= self.default_page_size <= self.max_page_size:
            raise ValueError("page sizes must satisfy min_page_size <= default_page_size <= max_page_size")
        if self.default_min_length > self.default_max_length:
            raise ValueError("default_min_length must be <= default_max_length")
        if self.default_precision > self.max_precision:
            raise ValueError("default_precision must be <= max_precision")
        return self

    @property
    def sorted_sort_fields(self) -> List[str]:
        """Allow-list in a stable order, for messages."""
        return sorted(self.valid_sort_fields)

    def is_valid_sort_field(self, field_name: str) -> bool:
        return field_name in self.valid_sort_fields

    @classmethod
    def from_settings(cls) -> "ValidationConfig":
        """Build the configuration from environment-backed settings."""
        return cls(
            valid_sort_fields=frozenset(settings.SORT_FIELDS),
            default_page=settings.DEFAULT_PAGE_SETTING,
            default_page_size=settings.DEFAULT_PAGE_SIZE_SETTING,
            min_page_size=settings.MIN_PAGE_SIZE_SETTING,
            max_page_size=settings.MAX_PAGE_SIZE_SETTING,
            default_sort_field=settings.DEFAULT_SORT_FIELD_SETTING,
            default_sort_direction=settings.DEFAULT_SORT_DIRECTION_SETTING,
            default_min_length=settings.DEFAULT_MIN_LENGTH_SETTING,
            default_max_length=settings.DEFAULT_MAX_LENGTH_SETTING,
            default_precision=settings.DEFAULT_PRECISION_SETTING,
            max_precision=settings.MAX_PRECISION_SETTING,
        )
