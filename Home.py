# -*- coding: utf-8 -*-
"""
Linked Scatter Viewer

Run with:  streamlit run Home.py

A 2D and a 3D scatter plot of the same dataset. Pick the left or right image
panel with its button, then click a point in either plot to load the image
that belongs to that point.
"""

import logging
from pathlib import Path

import streamlit as st
from pydantic import ValidationError
from streamlit_plotly_events import plotly_events

from scatterviewer.config import ViewerConfig
from scatterviewer.dataset import load_dataset, sample_dataset
from scatterviewer.errors import DatasetError, InvalidSlotError
from scatterviewer.events import AUTORANGE_EVENT, parse_click, parse_relayout, zoom_ranges
from scatterviewer.figures import make_2d_figure, make_3d_figure
from scatterviewer.layout import PLOT_HEIGHT
from scatterviewer.logging_config import setup_logging
from scatterviewer.selection import (
    Slot,
    click_point,
    handle_relayout,
    new_state,
    reset_orientation,
    select_slot,
)

logger = logging.getLogger("scatterviewer.app")

INSTRUCTIONS = [
    "Click on a button and click on any point on the plot to load its corresponding image.",
    "Use the range sliders under the 2D plot to zoom in, **Reset zoom to zoom back out.**",
    "Switch between 2D and 3D plots with the tabs in the upper left.",
    "Click on the legend to toggle which data curves are visible.",
]


# ---------- Cached resources ----------

@st.cache_resource(show_spinner=False)
def init_app() -> ViewerConfig:
    config = ViewerConfig.from_env()
    setup_logging(config.log_level)
    logger.info("Viewer config: %s", config.as_summary())
    return config


@st.cache_resource(show_spinner=False)
def load_series(path_str, file_mtime):
    """
    Dataset shared by all sessions. file_mtime is only part of the cache key so
    an edited JSON file gets reloaded.
    """
    if path_str is None:
        return sample_dataset()
    return load_dataset(path_str)


# ---------- Session state ----------

def get_state():
    return st.session_state.viewer_state


def init_session_state(config):
    if "viewer_state" in st.session_state:
        return

    path = config.dataset_path
    try:
        dataset = load_series(
            str(path) if path else None,
            path.stat().st_mtime if path else 0.0,
        )
        state = new_state(dataset, config)
    except DatasetError as e:
        st.error(f"Could not load dataset. Error: {e}")
        st.stop()

    st.session_state.viewer_state = state
    st.session_state.event_nonce = 0
    st.session_state.x_zoom = tuple(state.home_x_range)
    st.session_state.y_zoom = tuple(state.home_y_range)


# ---------- Callbacks ----------

def on_slot_button(slot):
    try:
        select_slot(get_state(), slot)
    except InvalidSlotError as e:
        logger.warning("Slot selection rejected: %s", e)
        st.session_state.slot_error = str(e)


def on_zoom_change():
    state = get_state()
    ranges = zoom_ranges(state.x_range_2d, state.y_range_2d, st.session_state.x_zoom, st.session_state.y_zoom)
    if ranges is not None:
        handle_relayout(state, ranges)


def on_zoom_reset():
    state = get_state()
    handle_relayout(state, parse_relayout(AUTORANGE_EVENT))
    st.session_state.x_zoom = tuple(state.x_range_2d)
    st.session_state.y_zoom = tuple(state.y_range_2d)


def on_reset_orientation():
    reset_orientation(get_state())


def process_click(events, session):
    """
    Apply a click reported by plotly_events. Returns True if a rerun is needed.

    session: st.session_state, or any mapping holding viewer_state and event_nonce.
    """
    click = parse_click(events)
    if click is None:
        return False

    # A fresh component key drops the click the component would keep re-reporting
    session["event_nonce"] += 1
    try:
        click_point(session["viewer_state"], click.series_index, click.point_index)
    except InvalidSlotError as e:
        logger.warning("Click rejected: %s", e)
        session["slot_error"] = "Could not select a point!"
    except IndexError as e:
        logger.warning("Click outside the dataset ignored: %s", e)
    return True


# ---------- Widgets ----------

def image_panel(url):
    if url.startswith(("http://", "https://")) or Path(url).is_file():
        st.image(url, width="stretch")
    else:
        st.warning(f"Image not found: {url}")


def slot_column(state, slot, label):
    is_active = state.active_slot == slot
    st.button(
        label,
        key=f"slot_button_{slot.value}",
        type="primary" if is_active else "secondary",
        on_click=on_slot_button,
        args=(slot,),
        width="stretch",
    )
    image_panel(state.slots[slot].image_url)


def zoom_controls(state):
    x_lo, x_hi = state.home_x_range
    y_lo, y_hi = state.home_y_range
    st.slider("x range", min_value=float(x_lo), max_value=float(x_hi), key="x_zoom", on_change=on_zoom_change)
    st.slider("y range", min_value=float(y_lo), max_value=float(y_hi), key="y_zoom", on_change=on_zoom_change)
    st.button("Reset zoom", on_click=on_zoom_reset)


# ---------- Streamlit app ----------

def main():
    st.set_page_config(
        page_title="Linked Scatter Viewer",
        layout="wide"
    )

    config = init_app()
    init_session_state(config)
    state = get_state()
    nonce = st.session_state.event_nonce

    st.title("Data Visualization with Streamlit and Plotly")
    st.markdown("---")

    slot_error = st.session_state.pop("slot_error", None)
    if slot_error:
        st.error(slot_error)

    col_plot, col_side = st.columns([3, 2])

    with col_plot:
        tab_2d, tab_3d = st.tabs(["2D Plot", "3D Plot"])

        with tab_2d:
            events_2d = plotly_events(
                make_2d_figure(state),
                click_event=True,
                select_event=False,
                hover_event=False,
                override_height=PLOT_HEIGHT,
                key=f"plotly_events_2d_{nonce}",
            )
            zoom_controls(state)

        with tab_3d:
            events_3d = plotly_events(
                make_3d_figure(state),
                click_event=True,
                select_event=False,
                hover_event=False,
                override_height=PLOT_HEIGHT,
                key=f"plotly_events_3d_{nonce}",
            )

    with col_side:
        with st.container(border=True):
            st.markdown("\n".join(f"- {line}" for line in INSTRUCTIONS))
            st.button("Reset 3D Plot Orientation", on_click=on_reset_orientation)

        left, right = st.columns(2)
        with left:
            slot_column(state, Slot.LEFT, "Click, then select a point")
        with right:
            slot_column(state, Slot.RIGHT, "Click, then select a point")

    if process_click(events_2d, st.session_state) or process_click(events_3d, st.session_state):
        st.rerun()


if __name__ == "__main__":
    try:
        main()
    except ValidationError as e:
        st.error(f"Invalid viewer configuration. Error: {e}")
