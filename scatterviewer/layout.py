"""
Layout builders for the 2D and 3D plots.

Plotly only redraws when ``datarevision`` changes, so callers bump the
revision whenever marker data has been edited in place.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional, Sequence

PLOT_WIDTH = 750
PLOT_HEIGHT = 750

DEFAULT_CAMERA = dict(
    center=dict(x=0, y=0, z=0),
    eye=dict(x=0, y=0.1, z=-2.5),
    up=dict(x=0, y=1, z=0),
)

PLOT_CONFIG = dict(displayModeBar=False, responsive=True)


def default_camera() -> Dict[str, Dict[str, float]]:
    return copy.deepcopy(DEFAULT_CAMERA)


def reverse_range(axis_range: Optional[Sequence[float]]) -> Optional[List[float]]:
    if axis_range is None:
        return None
    return list(axis_range)[::-1]


def _as_range(axis_range: Optional[Sequence[float]]) -> Optional[List[float]]:
    return None if axis_range is None else list(axis_range)


def build_2d_layout(x_range, y_range, revision: int) -> Dict[str, Any]:
    """
    Layout of the 2D plot.

    x_range, y_range: [min, max] or None for autorange.
    revision: data revision number used by Plotly to decide on a redraw.
    """
    return dict(
        width=PLOT_WIDTH,
        height=PLOT_HEIGHT,
        title="2D Plot",
        hovermode="closest",
        datarevision=revision,
        xaxis=dict(range=_as_range(x_range)),
        yaxis=dict(range=_as_range(y_range)),
    )


def build_3d_layout(x_range, y_range, revision: int, camera=None) -> Dict[str, Any]:
    """
    Layout of the 3D plot.

    x_range must already be reversed ([max, min]) so the 3D view keeps the same
    left/right orientation as the 2D plot when seen from the default camera.
    camera: current camera to keep; None means the default orientation.
    """
    camera = default_camera() if camera is None else copy.deepcopy(camera)
    return dict(
        width=PLOT_WIDTH,
        height=PLOT_HEIGHT,
        title="3D Plot",
        hovermode="closest",
        datarevision=revision,
        scene=dict(
            aspectmode="auto",
            xaxis=dict(range=_as_range(x_range)),
            yaxis=dict(range=_as_range(y_range)),
            zaxis=dict(range=None),
            camera=camera,
        ),
    )
