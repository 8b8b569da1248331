"""Normalisation of Plotly event payloads (clicks and relayouts)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Tuple


@dataclass(frozen=True)
class AxisRanges:
    """Axis ranges carried by a 2D relayout event. None means "not in the event"."""
    x: Optional[Tuple[float, float]] = None
    y: Optional[Tuple[float, float]] = None
    x_autorange: bool = False
    y_autorange: bool = False

    def is_empty(self) -> bool:
        return self.x is None and self.y is None and not self.x_autorange and not self.y_autorange


@dataclass(frozen=True)
class PointClick:
    series_index: int
    point_index: int


# ---------- Clicks ----------

def parse_click(events: Optional[Iterable[Any]]) -> Optional[PointClick]:
    """First usable point from a ``plotly_events`` result, or None."""
    if not events:
        return None
    for e in events:
        if not isinstance(e, Mapping):
            continue
        curve = e.get("curveNumber")
        point = e.get("pointNumber", e.get("pointIndex"))
        if curve is None or point is None:
            continue
        try:
            return PointClick(int(curve), int(point))
        except (TypeError, ValueError):
            continue
    return None


# ---------- Relayout ----------

def _axis_from_event(event: Mapping[str, Any], axis: str) -> Optional[Tuple[float, float]]:
    lo = event.get(f"{axis}.range[0]")
    hi = event.get(f"{axis}.range[1]")
    if lo is None or hi is None:
        whole = event.get(f"{axis}.range")
        if isinstance(whole, (list, tuple)) and len(whole) == 2:
            lo, hi = whole
    if lo is None or hi is None:
        return None
    try:
        return float(lo), float(hi)
    except (TypeError, ValueError):
        return None


def parse_relayout(event: Optional[Mapping[str, Any]]) -> Optional[AxisRanges]:
    """
    Turn a Plotly relayout dict into AxisRanges.

    Understands both ``xaxis.range[0]``/``xaxis.range[1]`` and ``xaxis.range``
    keys, plus ``xaxis.autorange`` (sent on double-click). Returns None when the
    event has nothing about the axes (e.g. the initial mount).
    """
    if not event:
        return None
    ranges = AxisRanges(
        x=_axis_from_event(event, "xaxis"),
        y=_axis_from_event(event, "yaxis"),
        x_autorange=bool(event.get("xaxis.autorange", False)),
        y_autorange=bool(event.get("yaxis.autorange", False)),
    )
    return None if ranges.is_empty() else ranges


def relayout_event(x_range=None, y_range=None) -> dict:
    """Build the relayout dict Plotly would send for a zoom to the given ranges."""
    event: dict = {}
    if x_range is not None:
        event["xaxis.range[0]"], event["xaxis.range[1]"] = x_range
    if y_range is not None:
        event["yaxis.range[0]"], event["yaxis.range[1]"] = y_range
    return event


AUTORANGE_EVENT = {"xaxis.autorange": True, "yaxis.autorange": True}


def changed_ranges(previous: Optional[List[float]], current) -> bool:
    if previous is None:
        return current is not None
    if current is None:
        return True
    return any(abs(float(a) - float(b)) > 1e-12 for a, b in zip(previous, current))


def zoom_ranges(current_x, current_y, x_zoom, y_zoom) -> Optional[AxisRanges]:
    """
    AxisRanges for a slider move, carrying only the axes that actually moved.

    Returns None when neither slider differs from the stored 2D ranges.
    """
    event = relayout_event(
        x_zoom if changed_ranges(current_x, x_zoom) else None,
        y_zoom if changed_ranges(current_y, y_zoom) else None,
    )
    return parse_relayout(event)
