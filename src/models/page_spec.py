"""
Frozen pagination specification handed to the data-access layer.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PageSpec:
    """Bounded slice request: page index, page size and sort order."""

    page: int
    size: int
    sort_field: Optional[str] = None        # None for an unsorted spec
    sort_direction: Optional[str] = None    # "ASC" | "DESC" | None

    @property
    def is_sorted(self) -> bool:
        return self.sort_field is not None

    @property
    def offset(self) -> int:
        return self.page * self.size

    def to_dict(self) -> dict:
        return {
            "page": self.page,
            "size": self.size,
            "sort_field": self.sort_field,
            "sort_direction": self.sort_direction,
        }

    def __repr__(self) -> str:
        order = f"{self.sort_field} {self.sort_direction}" if self.is_sorted else "unsorted"
        return f"PageSpec(page={self.page}, size={self.size}, {order})"
