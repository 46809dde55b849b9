"""Infrastructure layer - report output."""

from .formatters import CostReportFormatter, JsonExporter

__all__ = [
    "CostReportFormatter",
    "JsonExporter",
]
