"""Configuration schema and loading system for screen plans.

This package provides JSON-based configuration loading and validation.
It includes Pydantic models for schema validation, a configuration loader
with error handling, CLI override merging and an adapter to command DTOs.

Public API:
    - PlannerConfiguration: Root configuration model
    - ScreenConfig: Screen selection model
    - RoomConfig: Room dimensions model
    - CanvasConfig: Drawing area model
    - OutputConfig: Output format configuration model
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - ConfigErrorType: Why a configuration could not be loaded
    - merge_config_with_cli: Apply CLI overrides to a configuration
    - config_to_inputs: Convert a configuration to command DTOs

Example:
    >>> from pathlib import Path
    >>> from screenfit.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("living-room.json"))
    ...     print(f"Room height: {config.room.height} m")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from screenfit.application.config.adapter import (
    config_to_diagram_engine,
    config_to_exporter_options,
    config_to_inputs,
)
from screenfit.application.config.loader import (
    ConfigError,
    ConfigErrorType,
    load_config,
    load_config_from_dict,
)
from screenfit.application.config.merger import merge_config_with_cli
from screenfit.application.config.schema import (
    SUPPORTED_VERSIONS,
    VALID_FORMATS,
    CanvasConfig,
    JsonOutputConfigSchema,
    OutputConfig,
    PlannerConfiguration,
    RoomConfig,
    ScreenConfig,
    SvgOutputConfigSchema,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "VALID_FORMATS",
    "CanvasConfig",
    "ConfigError",
    "ConfigErrorType",
    "JsonOutputConfigSchema",
    "OutputConfig",
    "PlannerConfiguration",
    "RoomConfig",
    "ScreenConfig",
    "SvgOutputConfigSchema",
    "config_to_diagram_engine",
    "config_to_exporter_options",
    "config_to_inputs",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
]
