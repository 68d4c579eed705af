"""Component source analysis."""

from .export_inference import (
    EXPORT_RULES,
    fallback_name,
    infer_export_info,
    infer_export_info_from_source,
    match_export,
)

__all__ = [
    "EXPORT_RULES",
    "fallback_name",
    "infer_export_info",
    "infer_export_info_from_source",
    "match_export",
]
