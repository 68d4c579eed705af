"""Data models for react-testgen."""

from .data_models import (
    DEFAULT_ROOT_DIR,
    CliOptions,
    ComponentExportInfo,
    ExportKind,
    GenerationSummary,
)

__all__ = [
    "DEFAULT_ROOT_DIR",
    "CliOptions",
    "ComponentExportInfo",
    "ExportKind",
    "GenerationSummary",
]
