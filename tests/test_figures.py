from __future__ import annotations

import plotly.graph_objects as go

from scatterviewer.figures import make_2d_figure, make_3d_figure, plot_config, trace_data
from scatterviewer.selection import click_point, reset_orientation


def test_trace_types(two_series_dataset, multi_state) -> None:
    data_2d = trace_data(two_series_dataset, multi_state.markers)
    data_3d = trace_data(two_series_dataset, multi_state.markers, three_d=True)
    assert [t["type"] for t in data_2d] == ["scatter", "scatter"]
    assert [t["type"] for t in data_3d] == ["scatter3d", "scatter3d"]
    assert "z" not in data_2d[0]
    assert list(data_3d[1]["z"]) == [1.0, 1.0]
    assert data_2d[0]["customdata"] == ["0.png", "1.png", "2.png"]
    assert data_2d[1]["name"] == "second"


def test_plot_config() -> None:
    config = plot_config()
    assert config == {"displayModeBar": False, "responsive": True}
    config["displayModeBar"] = True
    assert plot_config()["displayModeBar"] is False


def test_make_figures(multi_state) -> None:
    click_point(multi_state, 0, 1)
    fig_2d = make_2d_figure(multi_state)
    fig_3d = make_3d_figure(multi_state)

    assert isinstance(fig_2d, go.Figure)
    assert len(fig_2d.data) == 2
    assert fig_2d.layout.datarevision == 1
    assert tuple(fig_2d.layout.xaxis.range) == tuple(multi_state.x_range_2d)
    assert fig_2d.data[0].marker.size[1] == 18

    assert len(fig_3d.data) == 2
    assert fig_3d.layout.datarevision == 1
    assert tuple(fig_3d.layout.scene.xaxis.range) == tuple(multi_state.x_range_2d[::-1])
    assert fig_3d.layout.scene.camera.eye.z == -2.5
    assert fig_3d.data[0].marker.line.color[1] == "#1496BB"


def test_3d_uirevision_changes_on_reset(multi_state) -> None:
    before = make_3d_figure(multi_state).layout.uirevision
    click_point(multi_state, 1, 0)
    assert make_3d_figure(multi_state).layout.uirevision == before
    reset_orientation(multi_state)
    assert make_3d_figure(multi_state).layout.uirevision != before


def test_2d_figure_cannot_be_zoomed_in_browser(multi_state) -> None:
    fig = make_2d_figure(multi_state)
    assert fig.layout.dragmode is False
    assert fig.layout.xaxis.fixedrange is True
    assert fig.layout.yaxis.fixedrange is True
    assert fig.layout.uirevision is None
