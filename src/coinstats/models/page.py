"""Paginated result data model."""

from __future__ import annotations

from dataclasses import dataclass

from coinstats.models.stats import Stats


@dataclass(frozen=True)
class Page:
    """One slice of a sorted stats listing plus pagination metadata.

    Attributes:
        items: Stats on this page, in sorted order.
        page: Zero-based page index.
        size: Requested page size.
        total_elements: Number of stats across all pages.
        total_pages: ``ceil(total_elements / size)``, or 0 when size is 0.
    """

    items: tuple[Stats, ...]
    page: int
    size: int
    total_elements: int
    total_pages: int

    def __post_init__(self) -> None:
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))
        for name in ("page", "size", "total_elements", "total_pages"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")
        if len(self.items) > self.size:
            raise ValueError("Page holds more items than its size")
