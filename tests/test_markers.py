from __future__ import annotations

import pytest

from scatterviewer.figures import trace_data
from scatterviewer.markers import DEFAULT_SIZE, SELECTED_SIZE, MarkerStyle, build_marker_styles


def test_marker_style_matches_series(two_series_dataset) -> None:
    styles = build_marker_styles(two_series_dataset)
    assert [len(s) for s in styles] == [3, 2]
    assert styles[0].size == [DEFAULT_SIZE] * 3
    assert styles[1].base_color == ["#32CD32", "#32CD32"]
    assert styles[1].highlight_color == styles[1].base_color
    assert styles[1].highlight_color is not styles[1].base_color


def test_highlight_and_restore() -> None:
    style = MarkerStyle(size=[8, 8], base_color=["red", "red"], highlight_color=["red", "red"])
    style.highlight(1, "#1496BB")
    assert style.size == [8, SELECTED_SIZE]
    assert style.is_highlighted(1)
    assert not style.is_highlighted(0)

    style.restore(1)
    assert style.size == [8, 8]
    assert style.highlight_color == ["red", "red"]

    with pytest.raises(IndexError):
        style.highlight(2, "#000000")


def test_2d_and_3d_traces_share_marker_lists(two_series_dataset) -> None:
    styles = build_marker_styles(two_series_dataset)
    data_2d = trace_data(two_series_dataset, styles)
    data_3d = trace_data(two_series_dataset, styles, three_d=True)

    for t2, t3 in zip(data_2d, data_3d):
        assert t2["marker"]["size"] is t3["marker"]["size"]
        assert t2["marker"]["line"]["color"] is t3["marker"]["line"]["color"]

    styles[0].highlight(2, "#000000")
    assert data_2d[0]["marker"]["size"][2] == SELECTED_SIZE
    assert data_3d[0]["marker"]["line"]["color"][2] == "#000000"
