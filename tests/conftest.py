from __future__ import annotations

import pytest

from scatterviewer.config import ViewerConfig
from scatterviewer.dataset import Series
from scatterviewer.selection import new_state


@pytest.fixture
def two_point_dataset():
    return (
        Series(name="only", x=[0.0, 1.0], y=[0.0, 1.0], z=[0.0, 0.5], image_files=("a.png", "b.png"), color="#FF002B"),
    )


@pytest.fixture
def two_series_dataset():
    return (
        Series(name="first", x=[0.0, 1.0, 2.0], y=[0.0, 1.0, 4.0], z=[0, 0, 0], image_files=("0.png", "1.png", "2.png"), color="#FF002B"),
        Series(name="second", x=[-1.0, 3.0], y=[2.0, -2.0], z=[1, 1], image_files=("3.png", "4.png"), color="#32CD32"),
    )


@pytest.fixture
def config():
    return ViewerConfig(static_base_path="/static")


@pytest.fixture
def state(two_point_dataset, config):
    return new_state(two_point_dataset, config)


@pytest.fixture
def multi_state(two_series_dataset, config):
    return new_state(two_series_dataset, config)
