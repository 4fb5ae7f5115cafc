"""Converter configuration loading.

Settings live under the ``converter:`` key of ``config/forge2eagler.yaml``
at the project root. A missing file means defaults. The path can be
overridden with the ``FORGE2EAGLER_CONFIG`` environment variable.
"""

import logging
import os
from pathlib import Path
from typing import List, Literal, Union

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "FORGE2EAGLER_CONFIG"
CONFIG_FILE_NAME = "forge2eagler.yaml"


class ConverterSettings(BaseModel):
    """Tunable converter behavior."""

    accumulate_required_modules: bool = Field(
        True,
        description="Union required modules across convert() calls on one converter instance",
    )
    qualified_name_order: Literal["table", "longest_first"] = Field(
        "table",
        description="Order in which fully-qualified class names are substituted",
    )
    guard_objects: List[str] = Field(
        default_factory=lambda: ["ModAPI.minecraft", "ModAPI.player"],
        description="Runtime objects every listener checks before running",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO",
        description="Default log level for the CLI",
    )


def get_config_path() -> Path:
    """Return the directory holding forge2eagler.yaml."""
    return Path(__file__).parent.parent.parent.parent / "config"


def load_settings(path: Union[str, Path, None] = None) -> ConverterSettings:
    """Load converter settings from YAML.

    Args:
        path: Explicit config file. When None, ``$FORGE2EAGLER_CONFIG``
            and then ``config/forge2eagler.yaml`` are tried.

    Returns:
        Validated ConverterSettings (defaults when no file exists)

    Raises:
        pydantic.ValidationError: If the file holds invalid values
    """
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        config_file = Path(env_path) if env_path else get_config_path() / CONFIG_FILE_NAME
    else:
        config_file = Path(path)

    if not config_file.exists():
        logger.debug("No converter config at %s, using defaults", config_file)
        return ConverterSettings()

    with open(config_file, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    section = config.get("converter", {}) or {}
    settings = ConverterSettings(**section)
    logger.debug("Loaded converter settings from %s: %s", config_file, settings)
    return settings
