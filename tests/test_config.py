from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from scatterviewer.config import DEFAULT_PLACEHOLDER_URL, ViewerConfig
from scatterviewer.selection import image_url


def test_defaults() -> None:
    config = ViewerConfig()
    assert config.default_size == 8
    assert config.selected_size == 18
    assert config.left_highlight == "#1496BB"
    assert config.right_highlight == "#000000"
    assert config.placeholder_url == DEFAULT_PLACEHOLDER_URL
    assert config.dataset_path is None
    assert config.as_summary()["dataset_path"] == "(built-in sample)"


def test_validation_errors(tmp_path: Path) -> None:
    with pytest.raises(ValidationError):
        ViewerConfig(dataset_path=tmp_path / "missing.json")
    with pytest.raises(ValidationError):
        ViewerConfig(dataset_path=tmp_path)
    with pytest.raises(ValidationError):
        ViewerConfig(log_level="chatty")
    with pytest.raises(ValidationError):
        ViewerConfig(default_size=18, selected_size=8)


def test_from_env(tmp_path: Path) -> None:
    dataset = tmp_path / "plots.json"
    dataset.write_text("[]", encoding="utf-8")
    config = ViewerConfig.from_env(
        {
            "SCATTERVIEWER_STATIC_BASE": "/assets",
            "SCATTERVIEWER_DATASET": str(dataset),
            "SCATTERVIEWER_LOG_LEVEL": "debug",
            "UNRELATED": "x",
        }
    )
    assert config.static_base_path == "/assets"
    assert config.dataset_path == dataset
    assert config.log_level == "DEBUG"

    assert ViewerConfig.from_env({}) == ViewerConfig()


def test_image_url() -> None:
    assert image_url("/static", "a.png") == "/static/img/a.png"
    assert image_url("/static/", "b.png") == "/static/img/b.png"
    assert image_url("static", "234.png") == "static/img/234.png"
