"""Planner configuration loading.

A configuration file goes through two stages: reading the JSON document and
validating it against PlannerConfiguration. Every failure surfaces as a
ConfigError whose ``error_type`` says which stage failed. Schema problems
that users hit most often, an unsupported schema version and an ambiguously
sized screen, get a type of their own.
"""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from screenfit.application.config.schema import SUPPORTED_VERSIONS, PlannerConfiguration

logger = logging.getLogger(__name__)

_VALUE_ERROR_PREFIX = "Value error, "


class ConfigErrorType(str, Enum):
    """Why a configuration could not be loaded."""

    FILE_NOT_FOUND = "file_not_found"
    UNREADABLE = "unreadable"
    JSON_PARSE = "json_parse"
    UNSUPPORTED_VERSION = "unsupported_version"
    SCREEN_DRIVER = "screen_driver"
    VALIDATION = "validation"


class ConfigError(Exception):
    """A configuration file or dictionary that cannot be planned from.

    Attributes:
        message: Human readable summary.
        error_type: A ConfigErrorType. It compares equal to its string value.
        path: The configuration file, or None for in-memory data.
        details: One dict per problem. JSON errors carry line, column and
            message; schema errors carry path, message, value and error_type.
    """

    def __init__(
        self,
        message: str,
        error_type: ConfigErrorType = ConfigErrorType.VALIDATION,
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic location as a dotted path with list indices.

    Examples:
        >>> _format_json_path(("room", "width"))
        'room.width'
        >>> _format_json_path(("output", "formats", 0))
        'output.formats[0]'
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        else:
            path = f"{path}.{segment}" if path else str(segment)
    return path


def _schema_problems(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": _format_json_path(err["loc"]),
            "message": err["msg"].removeprefix(_VALUE_ERROR_PREFIX),
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _classify(problems: list[dict[str, Any]]) -> ConfigErrorType:
    """Pick the error type for a set of schema problems.

    A version mismatch or an ambiguous screen gets its own type only when it
    is the sole problem in the file.
    """
    if len(problems) == 1:
        only = problems[0]
        if only["path"] == "schema_version" and only["error_type"] != "missing":
            return ConfigErrorType.UNSUPPORTED_VERSION
        if only["path"] == "screen" and only["error_type"] == "value_error":
            return ConfigErrorType.SCREEN_DRIVER
    return ConfigErrorType.VALIDATION


def _describe(error_type: ConfigErrorType, problems: list[dict[str, Any]]) -> str:
    if error_type is ConfigErrorType.UNSUPPORTED_VERSION:
        return (
            f"Unsupported schema version {problems[0]['value']!r}; "
            f"this planner reads {', '.join(sorted(SUPPORTED_VERSIONS))}"
        )
    if error_type is ConfigErrorType.SCREEN_DRIVER:
        return f"Ambiguous screen size: {problems[0]['message']}"

    lines = ["Configuration validation failed:"]
    for problem in problems:
        entry = f"  - {problem['path'] or '(root)'}: {problem['message']}"
        value = problem["value"]
        if value is not None and not isinstance(value, dict):
            entry += f" (got: {value!r})"
        lines.append(entry)
    return "\n".join(lines)


def _validate(data: Any, path: Path | None) -> PlannerConfiguration:
    try:
        return PlannerConfiguration.model_validate(data)
    except PydanticValidationError as e:
        problems = _schema_problems(e)
        error_type = _classify(problems)
        logger.debug(f"Config {path or '<dict>'} rejected as {error_type.value}")
        raise ConfigError(
            _describe(error_type, problems), error_type, path, problems
        ) from e


def _read_json(path: Path) -> Any:
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(
            f"Config file not found: {path}", ConfigErrorType.FILE_NOT_FOUND, path
        )
    except OSError as e:
        raise ConfigError(
            f"Cannot read config file {path}: {e.strerror or e}",
            ConfigErrorType.UNREADABLE,
            path,
        )

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in config file {path} at line {e.lineno}, column {e.colno}: {e.msg}",
            ConfigErrorType.JSON_PARSE,
            path,
            [{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )


def load_config(path: Path) -> PlannerConfiguration:
    """Load a planner configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file.

    Returns:
        The validated configuration.

    Raises:
        ConfigError: With ``error_type`` set to the ConfigErrorType that
            explains the failure.
    """
    return _validate(_read_json(path), path)


def load_config_from_dict(data: dict[str, Any]) -> PlannerConfiguration:
    """Validate an in-memory planner configuration.

    Raises:
        ConfigError: If the data fails validation. ``path`` is None.
    """
    return _validate(data, None)
