"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    blog_dir:           str = Field(default="client/public/blog",          description="Directory of blog post markdown files")
    projects_dir:       str = Field(default="client/public/projects",      description="Directory of project markdown files")
    blog_output:        str = Field(default="client/public/blog.json",     description="Posts manifest output path")
    projects_output:    str = Field(default="client/public/projects.json", description="Projects manifest output path")
    excerpt_length:     int = Field(default=150, ge=1, description="Max characters of a derived post excerpt")
    description_length: int = Field(default=160, ge=1, description="Max characters of a derived project description")
    words_per_minute:   int = Field(default=200, ge=1, description="Reading speed used for reading time estimates")
    template_name:      str = Field(default="template.md", description="Authoring template file name, never published")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDFOLIO_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"MDFOLIO_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
