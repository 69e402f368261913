"""Canvas contract — fixed constants every path check compares against."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LintConfig:
    """Geometric and stylistic limits for a single icon."""

    # Square canvas, user units
    icon_size: int = 24
    # Decimals used when comparing computed sizes and centers
    float_precision: int = 3
    # Most decimals any path operand may carry
    max_float_precision: int = 5
    # Allowed center deviation per axis
    tolerance: float = 0.001

    @property
    def center(self) -> float:
        return self.icon_size / 2
