# MIT License (see LICENSE)
"""
Builders for CalculationResult rows.

Every scenario's *_results() function goes through create_result so the
display formatting is identical across panels.
"""
from __future__ import annotations

from ..types import CalculationResult
from ..util import format_number


def create_result(
    value: float,
    unit: str,
    label: str,
    description: str | None = None,
    is_primary: bool = False,
) -> CalculationResult:
    """
    Create a formatted result row.

    Args:
        value: Numeric value in SI units.
        unit: Unit string appended to the formatted value.
        label: Short display label.
        description: Longer explanation (defaults to the label).
        is_primary: Whether this is the headline quantity.
    """
    return CalculationResult(
        value=float(value),
        unit=unit,
        label=label,
        formatted=f"{format_number(value)} {unit}".rstrip(),
        is_primary=is_primary,
        description=description or label,
    )


def primary(results: list[CalculationResult]) -> CalculationResult | None:
    """Return the primary row of a result list, if any."""
    for r in results:
        if r.is_primary:
            return r
    return None
