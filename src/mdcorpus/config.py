"""Application configuration: settings schema and mdcorpus.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "mdcorpus.yaml"


class Settings(BaseModel):
    content_dir:    str  = Field(default=".",    description="Corpus root holding posts and drafts")
    default_layout: str  = Field(default="post", min_length=1, description="Layout for documents that name none")
    strict:         bool = Field(default=True,   description="Abort a load on the first invalid record")
    index_file:     Optional[str] = Field(default=None, description="Index JSON destination; stdout when unset")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from mdcorpus.yaml, then MDCORPUS_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"MDCORPUS_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
