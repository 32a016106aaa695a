"""Unified configuration file (critpath_config.yaml).

The file has two optional sections:

    scheduler:
      backward_strategy: relaxation
      deadline: 30
    report:
      format: markdown
      show_chains: true
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from . import context
from .scheduler.config import SchedulingConfig

CONFIG_FILENAME = "critpath_config.yaml"


class ReportFormat(str, Enum):
    """Available report output formats."""

    TEXT = "text"
    MARKDOWN = "markdown"
    JSON = "json"


class ReportConfig(BaseModel):
    """Configuration for report rendering."""

    format: ReportFormat = ReportFormat.TEXT
    show_chains: bool = True


class UnifiedConfig(BaseModel):
    """Top-level configuration."""

    scheduler: SchedulingConfig = Field(default_factory=SchedulingConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)


def load_unified_config(config_path: Path | str) -> UnifiedConfig:
    """Load unified configuration from a YAML file.

    Args:
        config_path: Path to critpath_config.yaml

    Returns:
        Parsed UnifiedConfig

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config is invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with config_path.open(encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse config YAML: {e}") from e

    if data is None:
        raise ValueError("Empty configuration file")
    if not isinstance(data, dict):
        raise ValueError("Config must contain a mapping at the root level")

    unknown = set(data) - set(UnifiedConfig.model_fields)  # type: ignore[arg-type]
    if unknown:
        raise ValueError(f"Unknown config sections: {', '.join(sorted(unknown))}")

    try:
        return UnifiedConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e


def discover_config(project_path: Path | None = None) -> UnifiedConfig:
    """Find and load the config that applies to a run.

    Search order:
    1. Global context (set via CLI --config)
    2. Project file directory / critpath_config.yaml
    3. Current directory / critpath_config.yaml

    Falls back to defaults when nothing is found. An explicit --config path
    that does not exist is an error.
    """
    cached = context.get_loaded_config()
    if cached is not None:
        return cached

    config: UnifiedConfig | None = None
    ctx_path = context.get_config_path()
    if ctx_path is not None:
        config = load_unified_config(ctx_path)
    else:
        candidates = [Path(CONFIG_FILENAME)]
        if project_path is not None:
            candidates.insert(0, Path(project_path).parent / CONFIG_FILENAME)
        for candidate in candidates:
            if candidate.exists():
                config = load_unified_config(candidate)
                break

    config = config or UnifiedConfig()
    context.cache_loaded_config(config)
    return config
