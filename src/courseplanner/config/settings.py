"""Configuration model for the course planner."""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

DEFAULT_CATALOG = "CS 300 ABCU_Advising_Program_Input.csv"


class Settings(BaseModel):
    catalog_path: Path = Path(DEFAULT_CATALOG)
    delimiter: str = ","
    key_length: int = Field(default=7, gt=0)
    reference_set_capacity: int = Field(default=27, gt=0)
    log_level: str = "WARNING"
    log_format: str = "text"
    data_dir: Path = Path.home() / ".courseplanner"

    @field_validator("delimiter")
    @classmethod
    def single_character(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError("delimiter must be exactly one character")
        return v

    @field_validator("log_format")
    @classmethod
    def known_format(cls, v: str) -> str:
        if v not in ("text", "json"):
            raise ValueError("log_format must be 'text' or 'json'")
        return v

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Settings":
        config_path = config_path or (Path.home() / ".courseplanner" / "config.yaml")
        data: dict = {}
        if config_path.exists():
            with open(config_path) as f:
                data = yaml.safe_load(f) or {}

        # Environment wins over the config file
        if os.environ.get("COURSEPLANNER_CATALOG"):
            data["catalog_path"] = os.environ["COURSEPLANNER_CATALOG"]
        if os.environ.get("COURSEPLANNER_LOG_LEVEL"):
            data["log_level"] = os.environ["COURSEPLANNER_LOG_LEVEL"]
        return cls(**data)

    def save(self) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        config_path = self.data_dir / "config.yaml"
        with open(config_path, "w") as f:
            yaml.dump(self.model_dump(mode="json"), f, default_flow_style=False)
