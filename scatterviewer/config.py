from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

ENV_PREFIX = "SCATTERVIEWER_"
DEFAULT_PLACEHOLDER_URL = "https://placehold.co/337x335/png?text=START"


class ViewerConfig(BaseModel):
    static_base_path: str = Field(default="static", description="Base path that holds the img/ folder")
    placeholder_url: str = Field(
        default=DEFAULT_PLACEHOLDER_URL,
        description="Image shown in a slot before any point is selected",
    )
    dataset_path: Optional[Path] = Field(default=None, description="Optional JSON dataset file")
    default_size: int = Field(default=8, gt=0)
    selected_size: int = Field(default=18, gt=0)
    left_highlight: str = "#1496BB"
    right_highlight: str = "#000000"
    log_level: str = "INFO"

    @field_validator("dataset_path")
    @classmethod
    def validate_dataset_path(cls, value: Optional[Path]) -> Optional[Path]:
        if value is None:
            return value
        if not value.exists():
            raise ValueError(f"Dataset file does not exist: {value}")
        if not value.is_file():
            raise ValueError(f"Dataset path is not a file: {value}")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @model_validator(mode="after")
    def check_sizes(self) -> "ViewerConfig":
        if self.selected_size <= self.default_size:
            raise ValueError(
                f"selected_size ({self.selected_size}) must be larger than default_size ({self.default_size})"
            )
        return self

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ViewerConfig":
        """Build a config from ``SCATTERVIEWER_*`` environment variables."""
        env = os.environ if environ is None else environ
        values: dict[str, str] = {}
        mapping = {
            "STATIC_BASE": "static_base_path",
            "PLACEHOLDER_URL": "placeholder_url",
            "DATASET": "dataset_path",
            "LOG_LEVEL": "log_level",
        }
        for suffix, field in mapping.items():
            raw = env.get(ENV_PREFIX + suffix)
            if raw:
                values[field] = raw
        return cls(**values)

    def as_summary(self) -> dict[str, str]:
        return {
            "static_base_path": self.static_base_path,
            "dataset_path": str(self.dataset_path) if self.dataset_path else "(built-in sample)",
            "log_level": self.log_level,
        }
