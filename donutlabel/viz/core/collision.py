"""Per-side vertical collision tracking for donut labels."""
from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from .geometry import Side

LOG = logging.getLogger(__name__)

MAX_DISPLACEMENT_STEPS = 60


class CollisionStack:
    """Vertical positions claimed by labels during one render pass.

    Each chart instance owns exactly one stack; left and right labels are
    tracked independently because they never share a text column.
    """

    def __init__(self, max_steps: int = MAX_DISPLACEMENT_STEPS) -> None:
        if max_steps < 0:
            raise ValueError("max_steps must be non-negative")
        self.max_steps = max_steps
        self._used: Dict[Side, List[float]] = {"left": [], "right": []}

    def reset(self) -> None:
        self._used["left"].clear()
        self._used["right"].clear()

    def entries(self, side: Side) -> Tuple[float, ...]:
        return tuple(self._used[side])

    def __len__(self) -> int:
        return len(self._used["left"]) + len(self._used["right"])

    def place(
        self,
        candidate_y: float,
        side: Side,
        min_gap: float,
        *,
        center_y: float,
        y_limit: Optional[float] = None,
    ) -> float:
        """Return a y at least ``min_gap`` away from every y already on ``side``.

        The search walks away from the chart center one ``min_gap`` at a time
        and gives up after ``max_steps`` displacements, keeping the last
        candidate. The unclamped result is recorded; the returned value is
        clamped to ``center_y ± y_limit`` when a limit is supplied.
        """

        try:
            used = self._used[side]
        except KeyError as exc:
            raise ValueError(f"Unknown label side '{side}'") from exc

        direction = 1.0 if candidate_y >= center_y else -1.0
        y = candidate_y
        for _ in range(self.max_steps):
            if _clears(y, used, min_gap):
                break
            y += direction * min_gap
        else:
            if not _clears(y, used, min_gap):
                LOG.debug(
                    "Displacement cap reached on %s side at y=%.2f (%d labels)",
                    side,
                    y,
                    len(used),
                )
        used.append(y)

        if y_limit is not None:
            y = min(max(y, center_y - y_limit), center_y + y_limit)
        return y


def _clears(y: float, used: List[float], min_gap: float) -> bool:
    return all(abs(existing - y) >= min_gap for existing in used)
