"""Missing reference search actions."""

from .missing_references import (
    PROJECT_CONTEXT,
    find_missing_references_in_all_scenes,
    find_missing_references_in_assets,
    find_missing_references_in_current_scene,
)

__all__ = [
    "PROJECT_CONTEXT",
    "find_missing_references_in_all_scenes",
    "find_missing_references_in_assets",
    "find_missing_references_in_current_scene",
]
