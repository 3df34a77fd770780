"""Missing reference scanner: tree walk, classification and diagnostics."""

from .data_classes import (
    AuxiliaryMarkerUnavailable,
    Finding,
    FindingKind,
    PropertyType,
    ScannerConfig,
)
from .diagnostics import ConsoleSink, DiagnosticSink, format_finding
from .names import nicify_variable_name
from .path_builder import full_path
from .reference_scanner import ReferenceScanner

__all__ = [
    "AuxiliaryMarkerUnavailable",
    "ConsoleSink",
    "DiagnosticSink",
    "Finding",
    "FindingKind",
    "PropertyType",
    "ReferenceScanner",
    "ScannerConfig",
    "format_finding",
    "full_path",
    "nicify_variable_name",
]
