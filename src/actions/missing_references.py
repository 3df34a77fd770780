"""Search actions: current scene, every enabled scene, and project assets."""

import logging
from typing import List

from src.scanner import DiagnosticSink, Finding, ReferenceScanner
from src.unity_project import EditorSession, EnumeratorConfig, ObjectEnumerator, SceneLoadError

logger = logging.getLogger(__name__)

PROJECT_CONTEXT = "Project"


def _report(scanner: ReferenceScanner, sink: DiagnosticSink, context: str, roots) -> List[Finding]:
    findings = []
    for finding in scanner.scan(context, roots):
        sink.emit(finding)
        findings.append(finding)
    return findings


def find_missing_references_in_current_scene(
    session: EditorSession,
    sink: DiagnosticSink = None,
    scanner: ReferenceScanner = None,
    enumerator_config: EnumeratorConfig = None,
) -> List[Finding]:
    """Find missing references among all objects of the open scene."""
    sink = sink or DiagnosticSink()
    scanner = scanner or ReferenceScanner()
    enumerator = ObjectEnumerator(session, enumerator_config)

    objects = enumerator.scene_objects()
    logger.info(f"🔍 Searching {len(objects)} objects in {session.current_scene_path}")
    return _report(scanner, sink, session.current_scene_path, objects)


def find_missing_references_in_all_scenes(
    session: EditorSession,
    sink: DiagnosticSink = None,
    scanner: ReferenceScanner = None,
    enumerator_config: EnumeratorConfig = None,
) -> List[Finding]:
    """
    Find missing references in every enabled scene of the build settings.

    Scenes are opened one at a time, each replacing the previous one.
    """
    findings = []
    for scene_path in session.enabled_scenes():
        try:
            session.open_scene(scene_path)
        except SceneLoadError as e:
            logger.warning(f"⚠️ {e}")
            continue
        findings.extend(find_missing_references_in_current_scene(session, sink, scanner, enumerator_config))
    return findings


def find_missing_references_in_assets(
    session: EditorSession,
    sink: DiagnosticSink = None,
    scanner: ReferenceScanner = None,
    enumerator_config: EnumeratorConfig = None,
    context: str = PROJECT_CONTEXT,
) -> List[Finding]:
    """Find missing references in prefab assets under the asset root."""
    sink = sink or DiagnosticSink()
    scanner = scanner or ReferenceScanner()
    enumerator = ObjectEnumerator(session, enumerator_config)

    objects = enumerator.asset_objects()
    logger.info(f"🔍 Searching {len(objects)} assets")
    return _report(scanner, sink, context, objects)
