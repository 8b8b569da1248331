"""Linked 2D/3D scatter viewer with two click-to-load image slots."""

from scatterviewer.config import ViewerConfig
from scatterviewer.dataset import Series, load_dataset, sample_dataset
from scatterviewer.errors import DatasetError, InvalidSlotError, ScatterViewerError
from scatterviewer.selection import (
    AppState,
    Slot,
    click_point,
    handle_relayout,
    new_state,
    reset_orientation,
    select_slot,
)

__all__ = [
    "AppState",
    "DatasetError",
    "InvalidSlotError",
    "ScatterViewerError",
    "Series",
    "Slot",
    "ViewerConfig",
    "click_point",
    "handle_relayout",
    "load_dataset",
    "new_state",
    "reset_orientation",
    "sample_dataset",
    "select_slot",
]

__version__ = "0.1.0"
