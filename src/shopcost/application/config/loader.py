"""JSON loaders for rates files and part input files.

Both file kinds go through the same steps: existence check, read, JSON
decode, then pydantic validation. Every failure is reported as a
ConfigError whose ``error_type`` says which step failed.
"""

import json
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from shopcost.application.config.schemas import CostingConfiguration, PartInputSchema

ModelT = TypeVar("ModelT", bound=BaseModel)


class ConfigError(Exception):
    """A rates or part file could not be loaded.

    Attributes:
        message: Human-readable summary
        error_type: One of file_not_found, permission_denied,
            file_read_error, json_parse, validation
        path: File that failed, when loading from disk
        details: Per-field problems (path, message, value, error_type) for
            validation errors, or line/column for JSON errors
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
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
    """Join a pydantic error location into a dotted path.

    Examples:
        >>> _format_json_path(("pricing", "carbon_steel"))
        'pricing.carbon_steel'
        >>> _format_json_path(("laser", "speeds", "stainless", 2, "thickness"))
        'laser.speeds.stainless[2].thickness'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _extract_validation_errors(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": _format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _format_validation_error_message(details: list[dict[str, Any]], what: str) -> str:
    lines = [f"{what} validation failed:"]
    for detail in details:
        value = detail.get("value")
        if value is not None and not isinstance(value, dict):
            lines.append(f"  - {detail['path']}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {detail['path']}: {detail['message']}")
    return "\n".join(lines)


def _read_json(path: Path, what: str) -> Any:
    """Read and decode a JSON file, mapping failures to ConfigError."""
    if not path.exists():
        raise ConfigError(
            message=f"{what} file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading {what.lower()} file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading {what.lower()} file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Invalid JSON in {what.lower()} file: {path} "
                f"(line {e.lineno}, column {e.colno}): {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )


def _validate(model: type[ModelT], data: Any, what: str, path: Path | None = None) -> ModelT:
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details, what),
            error_type="validation",
            path=path,
            details=details,
        )


def load_config(path: Path) -> CostingConfiguration:
    """Load and validate a rates file.

    Args:
        path: Path to the JSON rates file

    Returns:
        A validated CostingConfiguration

    Raises:
        ConfigError: If the file is missing, unreadable, not JSON, or does
            not match the schema.

    Example:
        >>> try:
        ...     config = load_config(Path("rates.json"))
        ... except ConfigError as e:
        ...     for detail in e.details:
        ...         print(f"{detail['path']}: {detail['message']}")
    """
    return _validate(CostingConfiguration, _read_json(path, "Config"), "Configuration", path)


def load_config_from_dict(data: dict[str, Any]) -> CostingConfiguration:
    """Validate a rates configuration held in memory.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(CostingConfiguration, data, "Configuration")


def load_part(path: Path) -> PartInputSchema:
    """Load and validate a part input file.

    Raises:
        ConfigError: Same error types as load_config.
    """
    return _validate(PartInputSchema, _read_json(path, "Part"), "Part", path)


def load_part_from_dict(data: dict[str, Any]) -> PartInputSchema:
    return _validate(PartInputSchema, data, "Part")
