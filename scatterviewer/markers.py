"""
Per-point marker styling shared by the 2D and 3D plots.

Every point always has an outline (the highlight). When a point is not
selected its outline color equals its fill color, so the outline is invisible.
The lists below are handed to both the 2D and 3D trace data without copying,
so a change made through one view shows up in the other.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

from scatterviewer.dataset import Series

DEFAULT_SIZE = 8
SELECTED_SIZE = 18
LINE_WIDTH = 4


@dataclass
class MarkerStyle:
    size: List[int]
    base_color: List[str]
    highlight_color: List[str]
    opacity: float = 1.0
    line_width: int = LINE_WIDTH

    @classmethod
    def for_series(cls, series: Series, default_size: int = DEFAULT_SIZE) -> "MarkerStyle":
        n = len(series)
        return cls(
            size=[default_size] * n,
            base_color=[series.color] * n,
            highlight_color=[series.color] * n,
        )

    def __len__(self) -> int:
        return len(self.size)

    def highlight(self, point_index: int, color: str, size: int = SELECTED_SIZE) -> None:
        self._check(point_index)
        self.highlight_color[point_index] = color
        self.size[point_index] = size

    def restore(self, point_index: int, size: int = DEFAULT_SIZE) -> None:
        self._check(point_index)
        self.highlight_color[point_index] = self.base_color[point_index]
        self.size[point_index] = size

    def is_highlighted(self, point_index: int) -> bool:
        return self.highlight_color[point_index] != self.base_color[point_index]

    def as_marker(self) -> Dict[str, Any]:
        """Plotly ``marker`` dict; the lists inside are the live ones, not copies."""
        return {
            "size": self.size,
            "color": self.base_color,
            "opacity": self.opacity,
            "line": {"color": self.highlight_color, "width": self.line_width},
        }

    def _check(self, point_index: int) -> None:
        if point_index < 0 or point_index >= len(self.size):
            raise IndexError(f"Point {point_index} out of range ({len(self.size)} points)")


def build_marker_styles(dataset: Sequence[Series], default_size: int = DEFAULT_SIZE) -> List[MarkerStyle]:
    return [MarkerStyle.for_series(s, default_size=default_size) for s in dataset]
