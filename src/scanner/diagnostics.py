"""Diagnostic emission for scan findings."""

import logging
import sys
from typing import TextIO

from .data_classes import Finding

logger = logging.getLogger(__name__)

MISSING_REF_TEMPLATE = "Missing Ref in: [{context}]{path}. Component: {component}, Property: {property}"
MISSING_COMPONENT_TEMPLATE = "Missing Component in GO: [{context}]{path}"


def format_finding(finding: Finding) -> str:
    """Format a finding as a single human-readable line."""
    if finding.is_component_level:
        return MISSING_COMPONENT_TEMPLATE.format(context=finding.context, path=finding.path)
    return MISSING_REF_TEMPLATE.format(
        context=finding.context,
        path=finding.path,
        component=finding.component,
        property=finding.property,
    )


class DiagnosticSink:
    """Pushes findings to the log at ERROR level, tagged with the originating node."""

    def __init__(self, log: logging.Logger = None):
        self.log = log or logger

    def emit(self, finding: Finding) -> None:
        self.log.error(format_finding(finding), extra={"source_object": finding.node})


class ConsoleSink(DiagnosticSink):
    """Prints one line per finding, for command line output."""

    def __init__(self, stream: TextIO = None):
        super().__init__()
        self.stream = stream

    def emit(self, finding: Finding) -> None:
        print(format_finding(finding), file=self.stream or sys.stdout)
