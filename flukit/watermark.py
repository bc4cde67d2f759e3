"""Layout of a repeated, rotated text watermark."""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = ["Watermark"]


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


@dataclass
class Watermark:
    """Watermark settings; ``offset`` defaults to half the gap."""

    text: str = ""
    gap: tuple[int, int] = (100, 100)
    offset: tuple[int, int] | None = None
    text_color: tuple[int, int, int, int] = (222, 222, 222, 222)
    rotate: int = 22
    text_size: int = 16
    z: int = 9999

    def __post_init__(self) -> None:
        if self.offset is None:
            self.offset = (int(self.gap[0] / 2), int(self.gap[1] / 2))

    def tile_centers(
        self, width: float, height: float, text_width: float, text_height: float
    ) -> list[tuple[float, float]]:
        """Centres of the text tiles covering an area, column by column."""
        step_x = _round_half_up(text_width + self.gap[0])
        step_y = _round_half_up(text_height + self.gap[1])
        if step_x <= 0 or step_y <= 0:
            raise ValueError("tile step must be positive")
        columns = _round_half_up(width / step_x + 1)
        rows = _round_half_up(height / step_y + 1)
        offset_x, offset_y = self.offset
        return [
            (
                step_x * c + offset_x + text_width / 2.0,
                step_y * r + offset_y + text_height / 2.0,
            )
            for c in range(columns)
            for r in range(rows)
        ]