"""Data quality validation for fetched price histories."""

from __future__ import annotations

from dataclasses import dataclass, field

from coinstats.models.price_point import PricePoint


@dataclass
class ValidationCheck:
    """Single validation check result."""

    name: str
    passed: bool
    message: str = ""


@dataclass
class ValidationResult:
    """Aggregate validation result."""

    checks: list[ValidationCheck] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(c.passed for c in self.checks)

    @property
    def failed_checks(self) -> list[ValidationCheck]:
        return [c for c in self.checks if not c.passed]


def validate_series(points: list[PricePoint]) -> ValidationResult:
    """Run all quality checks on a price history in source order.

    Negative prices never reach this point; ``PricePoint`` rejects them.

    Checks:
        1. Not empty
        2. Timestamp ordering (non-decreasing as delivered by the source)
        3. Duplicate timestamps (reported, never fails)
    """
    result = ValidationResult()

    # 1. Not empty
    if not points:
        result.checks.append(ValidationCheck("not_empty", False, "No price points"))
        return result
    result.checks.append(ValidationCheck("not_empty", True, f"{len(points)} points"))

    # 2. Timestamp ordering
    out_of_order = 0
    duplicates = 0
    for i in range(1, len(points)):
        if points[i].timestamp < points[i - 1].timestamp:
            out_of_order += 1
        elif points[i].timestamp == points[i - 1].timestamp:
            duplicates += 1
    if out_of_order:
        result.checks.append(
            ValidationCheck("timestamp_order", False, f"{out_of_order} out of order")
        )
    else:
        result.checks.append(ValidationCheck("timestamp_order", True))

    # 3. Duplicates are legal (two quotes in the same millisecond)
    result.checks.append(ValidationCheck(
        "duplicate_timestamps",
        True,
        f"{duplicates} duplicate timestamps" if duplicates else "",
    ))

    return result
