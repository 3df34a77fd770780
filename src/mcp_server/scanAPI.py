"""Scan tool implementations for MCP server."""

from typing import List

from src.actions import (
    find_missing_references_in_all_scenes,
    find_missing_references_in_assets,
    find_missing_references_in_current_scene,
)
from src.scanner import DiagnosticSink, Finding, format_finding
from src.unity_project import BuildSettingsError, SceneLoadError

from .shared_resources import get_shared_resources

NOT_INITIALIZED = """Error: Server not properly initialized.

The MCP server needs to be started with 'missing-refs serve' pointing at a Unity project.

---
Status: not initialized"""


def format_response(findings: List[Finding], context: str) -> str:
    """One line per finding followed by a summary footer."""
    if not findings:
        return f"No missing references found in {context}.\n\n---\nFindings: 0"

    lines = [format_finding(finding) for finding in findings]
    components = sum(1 for finding in findings if finding.is_component_level)
    lines.append("")
    lines.append("---")
    lines.append(f"Findings: {len(findings)} ({components} missing components, {len(findings) - components} missing references)")
    return "\n".join(lines)


async def scanScene(scene_path: str) -> str:
    """
    Open a scene and search it for missing references.

    Args:
        scene_path: Project-relative scene path, e.g. "Assets/Scenes/Main.unity"

    Returns:
        Formatted findings for the scene
    """
    resources = get_shared_resources()
    if not resources.is_ready():
        return NOT_INITIALIZED

    try:
        resources.session.open_scene(scene_path)
    except SceneLoadError as e:
        return f"Error: {e}"

    findings = find_missing_references_in_current_scene(
        resources.session,
        sink=DiagnosticSink(),
        scanner=resources.scanner,
        enumerator_config=resources.enumerator_config,
    )
    return format_response(findings, scene_path)


async def scanAllScenes() -> str:
    """Search every enabled build settings scene. Scenes are opened one at a time."""
    resources = get_shared_resources()
    if not resources.is_ready():
        return NOT_INITIALIZED

    try:
        findings = find_missing_references_in_all_scenes(
            resources.session,
            sink=DiagnosticSink(),
            scanner=resources.scanner,
            enumerator_config=resources.enumerator_config,
        )
    except BuildSettingsError as e:
        return f"Error: {e}"
    return format_response(findings, "enabled scenes")


async def scanAssets() -> str:
    """Search the root object of every prefab asset."""
    resources = get_shared_resources()
    if not resources.is_ready():
        return NOT_INITIALIZED

    findings = find_missing_references_in_assets(
        resources.session,
        sink=DiagnosticSink(),
        scanner=resources.scanner,
        enumerator_config=resources.enumerator_config,
        context=resources.config.assets_context,
    )
    return format_response(findings, "project assets")
