"""Validation result types shared by the rates file validators."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ValidationError:
    """A problem that makes the rates file unusable.

    Attributes:
        path: JSON path of the field, e.g. "rates.F115"
        message: What is wrong
        value: The offending value
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A value that loads but is probably a typo.

    Attributes:
        path: JSON path of the field
        message: What looks wrong
        suggestion: How to fix it, when there is an obvious fix
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Errors and warnings collected from one or more validators."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @property
    def exit_code(self) -> int:
        """CLI exit code: 1 for errors, 2 for warnings only, else 0."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(self, path: str, message: str, value: Any = None) -> ValidationResult:
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> ValidationResult:
        self.warnings.append(ValidationWarning(path=path, message=message, suggestion=suggestion))
        return self

    def merge(self, other: ValidationResult) -> ValidationResult:
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self
