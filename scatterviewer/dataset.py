"""
Static point series shown in both the 2D and 3D plots.

Each series carries parallel x/y/z coordinate arrays and one image filename per
point. The built-in sample is generated from fixed seeds so every session sees
the same points; a local JSON file with the same record layout can replace it.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Sequence, Tuple

import numpy as np

from scatterviewer.errors import DatasetError

logger = logging.getLogger(__name__)

# One color per series; cycled when there are more series than colors
SERIES_COLORS = ("#FF002B", "#32CD32", "#FFCB47")


# -----------------------------
# Series
# -----------------------------
@dataclass(frozen=True, eq=False)
class Series:
    name: str
    x: np.ndarray
    y: np.ndarray
    z: np.ndarray
    image_files: Tuple[str, ...]
    color: str = SERIES_COLORS[0]
    _n: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not str(self.name).strip():
            raise DatasetError("Series name must not be empty")

        coords = []
        for axis in ("x", "y", "z"):
            arr = np.array(getattr(self, axis), dtype=float)
            if arr.ndim != 1:
                raise DatasetError(f"Series '{self.name}': {axis} must be 1D, got shape {arr.shape}")
            arr.setflags(write=False)
            object.__setattr__(self, axis, arr)
            coords.append(arr)

        files = tuple(str(f) for f in self.image_files)
        object.__setattr__(self, "image_files", files)

        lengths = {len(coords[0]), len(coords[1]), len(coords[2]), len(files)}
        if len(lengths) != 1:
            raise DatasetError(
                f"Series '{self.name}': x/y/z/image_files lengths differ "
                f"({len(coords[0])}, {len(coords[1])}, {len(coords[2])}, {len(files)})"
            )
        object.__setattr__(self, "_n", len(files))

    def __len__(self) -> int:
        return self._n

    def image_file(self, point_index: int) -> str:
        if point_index < 0 or point_index >= self._n:
            raise IndexError(f"Point {point_index} out of range for series '{self.name}' ({self._n} points)")
        return self.image_files[point_index]


Dataset = Tuple[Series, ...]


def series_color(index: int) -> str:
    return SERIES_COLORS[index % len(SERIES_COLORS)]


# -----------------------------
# Building datasets
# -----------------------------
def series_from_records(records: Iterable[Mapping[str, Any]]) -> Dataset:
    """Build a dataset from dicts with name, x, y, z and imgURLs (or image_files)."""
    out: List[Series] = []
    for i, rec in enumerate(records):
        if not isinstance(rec, Mapping):
            raise DatasetError(f"Series record {i} is not an object")
        missing = [k for k in ("name", "x", "y", "z") if k not in rec]
        if missing:
            raise DatasetError(f"Series record {i} is missing keys: {', '.join(missing)}")
        files = rec.get("imgURLs", rec.get("image_files"))
        if files is None:
            raise DatasetError(f"Series record {i} has no imgURLs/image_files")
        try:
            out.append(Series(
                name=str(rec["name"]),
                x=rec["x"],
                y=rec["y"],
                z=rec["z"],
                image_files=tuple(files),
                color=str(rec.get("color", series_color(i))),
            ))
        except DatasetError:
            raise
        except (TypeError, ValueError) as exc:
            raise DatasetError(f"Series record {i} has non-numeric coordinates") from exc

    if not out:
        raise DatasetError("Dataset contains no series")
    return tuple(out)


def load_dataset(path: str | Path) -> Dataset:
    path = Path(path)
    if not path.is_file():
        raise DatasetError(f"Dataset file not found: {path}")
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise DatasetError(f"Dataset file is not valid JSON: {path} ({exc})") from exc

    if isinstance(payload, Mapping):
        payload = payload.get("series", payload.get("plots"))
    if not isinstance(payload, list):
        raise DatasetError(f"Dataset file must hold a list of series: {path}")

    dataset = series_from_records(payload)
    logger.info("Loaded %d series (%d points) from %s",
                len(dataset), sum(len(s) for s in dataset), path)
    return dataset


def generate_cluster(n_points=40, mean=(0.0, 0.0, 0.0), cov=None, seed=0):
    if cov is None:
        cov = np.array([
            [1.0, 0.4, 0.2],
            [0.4, 1.2, 0.3],
            [0.2, 0.3, 0.8],
        ])
    rng = np.random.default_rng(seed)
    return rng.multivariate_normal(mean, cov, size=n_points)  # (n_points, 3)


def sample_dataset(n_points: int = 40) -> Dataset:
    """The built-in three-series dataset; image names are running indices like '17.png'."""
    centers = [(-2.5, 0.0, -1.0), (2.0, 2.0, 0.5), (0.5, -2.5, 1.5)]
    names = ["Cluster A", "Cluster B", "Cluster C"]

    series = []
    offset = 0
    for i, (name, center) in enumerate(zip(names, centers)):
        pts = np.round(generate_cluster(n_points, mean=center, seed=i), 3)
        files = tuple(f"{offset + j}.png" for j in range(n_points))
        offset += n_points
        series.append(Series(
            name=name,
            x=pts[:, 0],
            y=pts[:, 1],
            z=pts[:, 2],
            image_files=files,
            color=series_color(i),
        ))
    return tuple(series)


# -----------------------------
# Bounds
# -----------------------------
def data_ranges(dataset: Sequence[Series], margin_factor: float = 1.1) -> Tuple[List[float], List[float]]:
    """Padded [min, max] x and y ranges over every point in the dataset."""
    xs = np.concatenate([s.x for s in dataset]) if dataset else np.empty(0)
    ys = np.concatenate([s.y for s in dataset]) if dataset else np.empty(0)
    if xs.size == 0:
        return [-1.0, 1.0], [-1.0, 1.0]

    def padded(values):
        lo, hi = float(values.min()), float(values.max())
        center = 0.5 * (lo + hi)
        half = 0.5 * (hi - lo) * margin_factor
        if half < 1e-12:
            half = 1.0
        return [center - half, center + half]

    return padded(xs), padded(ys)
