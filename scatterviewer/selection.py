"""
Selection state and the transitions that act on it.

``AppState`` is the single state struct of a viewer session. The page keeps
the only long-lived reference to it (in ``st.session_state``) and routes every
user action through the functions below, which validate first and then mutate
the state in place. Marker lists are edited only here, which keeps at most one
highlighted point per slot.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from scatterviewer.config import ViewerConfig
from scatterviewer.dataset import Dataset, data_ranges
from scatterviewer.errors import DatasetError, InvalidSlotError
from scatterviewer.events import AxisRanges
from scatterviewer.layout import build_2d_layout, build_3d_layout, reverse_range
from scatterviewer.markers import MarkerStyle, build_marker_styles

logger = logging.getLogger(__name__)

NO_SELECTION = -1


class Slot(str, Enum):
    LEFT = "left"
    RIGHT = "right"


def coerce_slot(value: Any) -> Slot:
    try:
        return Slot(value)
    except ValueError as exc:
        valid = ", ".join(s.value for s in Slot)
        raise InvalidSlotError(f"Unsupported slot '{value}'. Expected one of: {valid}") from exc


def image_url(static_base_path: str, filename: str) -> str:
    base = static_base_path.rstrip("/")
    return f"{base}/img/{filename}"


@dataclass
class SlotState:
    image_url: str
    series_index: int = NO_SELECTION
    point_index: int = NO_SELECTION

    @property
    def has_selection(self) -> bool:
        return self.series_index != NO_SELECTION and self.point_index != NO_SELECTION

    def holds(self, series_index: int, point_index: int) -> bool:
        return self.has_selection and self.series_index == series_index and self.point_index == point_index


@dataclass
class AppState:
    dataset: Dataset
    config: ViewerConfig
    markers: List[MarkerStyle]
    slots: Dict[Slot, SlotState]
    layout_2d: Dict[str, Any]
    layout_3d: Dict[str, Any]
    home_x_range: List[float]
    home_y_range: List[float]
    active_slot: Slot = Slot.LEFT
    camera_resets: int = 0

    @property
    def revision_2d(self) -> int:
        return self.layout_2d["datarevision"]

    @property
    def revision_3d(self) -> int:
        return self.layout_3d["datarevision"]

    @property
    def x_range_2d(self) -> Optional[List[float]]:
        return self.layout_2d["xaxis"]["range"]

    @property
    def y_range_2d(self) -> Optional[List[float]]:
        return self.layout_2d["yaxis"]["range"]

    @property
    def camera(self) -> Dict[str, Any]:
        return self.layout_3d["scene"]["camera"]


def check_series_colors(dataset: Dataset, config: ViewerConfig) -> None:
    """A series drawn in a slot colour would hide that slot's highlight."""
    reserved = {config.left_highlight.lower(), config.right_highlight.lower()}
    for series in dataset:
        if series.color.lower() in reserved:
            raise DatasetError(
                f"Series '{series.name}' uses colour {series.color}, which is reserved for slot highlights"
            )


def new_state(dataset: Dataset, config: Optional[ViewerConfig] = None) -> AppState:
    config = config or ViewerConfig()
    check_series_colors(dataset, config)
    x_home, y_home = data_ranges(dataset)
    state = AppState(
        dataset=dataset,
        config=config,
        markers=build_marker_styles(dataset, default_size=config.default_size),
        slots={slot: SlotState(image_url=config.placeholder_url) for slot in Slot},
        layout_2d=build_2d_layout(x_home, y_home, 0),
        layout_3d=build_3d_layout(reverse_range(x_home), y_home, 0),
        home_x_range=x_home,
        home_y_range=y_home,
    )
    logger.debug("New viewer state: %d series, x=%s y=%s", len(dataset), x_home, y_home)
    return state


def highlight_color(state: AppState, slot: Slot) -> str:
    return state.config.left_highlight if slot is Slot.LEFT else state.config.right_highlight


def slot_for_point(state: AppState, series_index: int, point_index: int) -> Optional[Slot]:
    for slot, slot_state in state.slots.items():
        if slot_state.holds(series_index, point_index):
            return slot
    return None


def selected_points(state: AppState) -> Dict[Slot, Optional[Tuple[int, int]]]:
    return {
        slot: (s.series_index, s.point_index) if s.has_selection else None
        for slot, s in state.slots.items()
    }


# ---------- Transitions ----------

def select_slot(state: AppState, slot: Any) -> AppState:
    """Make ``slot`` the target of the next point click. No marker or layout change."""
    state.active_slot = coerce_slot(slot)
    logger.debug("Active slot -> %s", state.active_slot.value)
    return state


def _clear_slot(state: AppState, slot: Slot) -> None:
    current = state.slots[slot]
    if not current.has_selection:
        return
    state.markers[current.series_index].restore(current.point_index, size=state.config.default_size)


def _sync_layouts_after_click(state: AppState) -> None:
    x_range = state.x_range_2d
    y_range = state.y_range_2d
    state.layout_2d = build_2d_layout(x_range, y_range, state.revision_2d + 1)
    # keep whatever orientation the 3D view has
    state.layout_3d = build_3d_layout(
        reverse_range(x_range), y_range, state.revision_3d + 1, camera=state.camera
    )


def click_point(state: AppState, series_index: int, point_index: int) -> bool:
    """
    Assign the clicked point to the active slot.

    Returns False (and changes nothing) if the point is already shown in either
    slot, whatever the active slot is. Otherwise raises IndexError for a point
    outside the dataset and InvalidSlotError if the active slot is not
    left/right; both before any mutation.
    """
    holder = slot_for_point(state, series_index, point_index)
    if holder is not None:
        logger.debug("Point (%d, %d) already shown in %s slot; ignored", series_index, point_index, holder.value)
        return False

    if series_index < 0 or series_index >= len(state.dataset):
        raise IndexError(f"Series {series_index} out of range ({len(state.dataset)} series)")
    filename = state.dataset[series_index].image_file(point_index)

    slot = coerce_slot(state.active_slot)
    _clear_slot(state, slot)

    slot_state = state.slots[slot]
    slot_state.series_index = series_index
    slot_state.point_index = point_index
    state.markers[series_index].highlight(
        point_index, highlight_color(state, slot), size=state.config.selected_size
    )
    slot_state.image_url = image_url(state.config.static_base_path, filename)

    _sync_layouts_after_click(state)
    logger.info("%s slot <- series %d point %d (%s)", slot.value, series_index, point_index, filename)
    return True


def handle_relayout(state: AppState, ranges: Optional[AxisRanges] = None) -> AppState:
    """
    Mirror the 2D axes onto the 3D plot and reset the 3D camera.

    Each axis is resolved on its own: an explicit range from the event wins, an
    autorange flag restores the home range, otherwise the range already stored
    in the 2D layout is kept.
    """
    x_range = state.x_range_2d
    y_range = state.y_range_2d
    if ranges is not None:
        if ranges.x is not None:
            x_range = list(ranges.x)
        elif ranges.x_autorange:
            x_range = list(state.home_x_range)
        if ranges.y is not None:
            y_range = list(ranges.y)
        elif ranges.y_autorange:
            y_range = list(state.home_y_range)

    state.layout_2d = build_2d_layout(x_range, y_range, state.revision_2d)
    state.layout_3d = build_3d_layout(reverse_range(x_range), y_range, state.revision_3d + 1)
    state.camera_resets += 1
    logger.debug("Relayout: x=%s y=%s (3D revision %d)", x_range, y_range, state.revision_3d)
    return state


def reset_orientation(state: AppState) -> AppState:
    """Put the 3D plot back to the default camera using the current 2D ranges."""
    return handle_relayout(state, None)
