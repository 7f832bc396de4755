"""Configuration loading with YAML parsing and validation."""

from pathlib import Path
from typing import Any

import pydantic_yaml

from .schema import ReportConfig


def load_config(config_path: Path | str) -> ReportConfig:
    """
    Load and validate report configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated ReportConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        pydantic.ValidationError: If config is invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        yaml_content = f.read()

    # An empty document means "all defaults"
    if not yaml_content.strip():
        return ReportConfig()

    config = pydantic_yaml.parse_yaml_raw_as(ReportConfig, yaml_content)

    return config


def load_config_with_overrides(
    config_path: Path | str | None,
    overrides: dict[str, Any],
) -> ReportConfig:
    """
    Load config from YAML (or defaults) and apply dictionary overrides.

    Useful for CLI flags that override config file values. Overrides whose
    value is None are ignored so unset options keep the file's value.

    Args:
        config_path: Path to YAML configuration file, or None for defaults
        overrides: Dictionary of values to override (nested keys supported)

    Returns:
        Validated ReportConfig with overrides applied

    Raises:
        FileNotFoundError: If config file doesn't exist
        pydantic.ValidationError: If final config is invalid
    """
    if config_path is None:
        config = ReportConfig()
    else:
        config = load_config(config_path)

    config_dict = config.model_dump()

    for key, value in overrides.items():
        if value is None:
            continue
        if "." in key:
            # Handle nested keys like "report.output_mode"
            parts = key.split(".")
            target = config_dict
            for part in parts[:-1]:
                target = target[part]
            target[parts[-1]] = value
        else:
            config_dict[key] = value

    config = ReportConfig.model_validate(config_dict)

    return config
