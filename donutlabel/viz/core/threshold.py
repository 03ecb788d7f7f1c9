"""Small-slice suppression for donut labels."""
from __future__ import annotations

from typing import AbstractSet

DEFAULT_THRESHOLD_PERCENT = 3.0


def should_suppress(
    percent: float,
    name: str,
    always_show: AbstractSet[str] = frozenset(),
    threshold: float = DEFAULT_THRESHOLD_PERCENT,
) -> bool:
    """Return ``True`` when a slice is too thin to carry a label.

    Names in ``always_show`` are never suppressed, whatever their share.
    """

    return percent < threshold and name not in always_show
