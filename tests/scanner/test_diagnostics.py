"""Tests for diagnostic formatting and sinks."""

import io
import logging

from src.object_model import MemoryNode
from src.scanner import ConsoleSink, DiagnosticSink, Finding, FindingKind, format_finding


class TestFormatFinding:
    """Test cases for format_finding."""

    def test_missing_reference_line(self):
        """Test the property-level message format."""
        finding = Finding("Assets/Scenes/Main.unity", "Root/Child", "Renderer", "Material")

        assert format_finding(finding) == (
            "Missing Ref in: [Assets/Scenes/Main.unity]Root/Child. Component: Renderer, Property: Material"
        )

    def test_missing_component_line(self):
        """Test the component-level message names the owning path."""
        finding = Finding("Project", "Enemy/Gun", "Missing Component", None, kind=FindingKind.MISSING_COMPONENT)

        assert format_finding(finding) == "Missing Component in GO: [Project]Enemy/Gun"


class TestDiagnosticSink:
    """Test cases for DiagnosticSink and ConsoleSink."""

    def test_emit_logs_error_with_source_object(self, caplog):
        """Test findings are logged at ERROR and carry the originating node."""
        node = MemoryNode(name="Child")
        finding = Finding("Main", "Root/Child", "Renderer", "Material", node=node)

        with caplog.at_level(logging.ERROR, logger="src.scanner.diagnostics"):
            DiagnosticSink().emit(finding)

        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.levelno == logging.ERROR
        assert record.getMessage() == format_finding(finding)
        assert record.source_object is node

    def test_console_sink_prints_one_line(self):
        """Test the console sink writes the formatted line to its stream."""
        stream = io.StringIO()
        finding = Finding("Main", "Root", "Missing Component", None, kind=FindingKind.MISSING_COMPONENT)

        ConsoleSink(stream).emit(finding)

        assert stream.getvalue() == "Missing Component in GO: [Main]Root\n"

    def test_finding_equality_ignores_node(self):
        """Test two findings at the same location compare equal whatever node they carry."""
        first = Finding("Main", "Root", "X", "Y", node=MemoryNode(name="Root"))
        second = Finding("Main", "Root", "X", "Y", node=MemoryNode(name="Root"))

        assert first == second
