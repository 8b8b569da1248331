from __future__ import annotations

from typing import Any, Dict, List, Sequence

import plotly.graph_objects as go

from scatterviewer.dataset import Series
from scatterviewer.layout import PLOT_CONFIG
from scatterviewer.markers import MarkerStyle
from scatterviewer.selection import AppState


# ---------- Trace data ----------

def trace_data(dataset: Sequence[Series], markers: Sequence[MarkerStyle], three_d: bool = False) -> List[Dict[str, Any]]:
    """
    Plotly trace dicts for every series.

    The 2D and 3D variants get the same marker lists, so highlighting a point
    is visible in both without copying anything.
    """
    data = []
    for series, style in zip(dataset, markers):
        trace = dict(
            x=series.x,
            y=series.y,
            name=series.name,
            marker=style.as_marker(),
            mode="markers",
            customdata=list(series.image_files),
        )
        if three_d:
            trace.update(type="scatter3d", z=series.z, hoverinfo="x+y+z")
        else:
            trace.update(type="scatter", hoverinfo="x+y")
        data.append(trace)
    return data


def plot_config() -> Dict[str, Any]:
    return dict(PLOT_CONFIG)


# ---------- Figures ----------

def make_2d_figure(state: AppState) -> go.Figure:
    fig = go.Figure(data=trace_data(state.dataset, state.markers), layout=state.layout_2d)
    # zoom only through the range sliders; plotly_events never reports a browser zoom
    fig.update_layout(
        template="plotly_white",
        dragmode=False,
        xaxis_fixedrange=True,
        yaxis_fixedrange=True,
    )
    return fig


def make_3d_figure(state: AppState) -> go.Figure:
    fig = go.Figure(data=trace_data(state.dataset, state.markers, three_d=True), layout=state.layout_3d)
    # a new uirevision makes the browser drop the user's rotation and use scene.camera
    fig.update_layout(
        template="plotly_white",
        uirevision=f"camera_{state.camera_resets}",
        margin=dict(l=0, r=0, t=40, b=0),
    )
    return fig
