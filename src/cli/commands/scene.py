"""Scene command - search the given scene for missing references."""

import logging
import sys
from pathlib import Path
from typing import Optional

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent.parent
sys.path.insert(0, str(project_root))

from src.actions import find_missing_references_in_current_scene
from src.cli.commands.common import build_enumerator_config, build_scanner, finish, open_session
from src.cli.config import Config
from src.scanner import ConsoleSink
from src.unity_project import SceneLoadError

logger = logging.getLogger(__name__)


def scene_command(
    config: Config,
    scene_path: str,
    project_dir: Optional[str] = None,
    fail_on_findings: bool = False,
):
    """Open one scene and search all of its objects for missing references."""
    session = open_session(config, project_dir)

    try:
        session.open_scene(scene_path)
    except SceneLoadError as e:
        logger.error(f"❌ {e}")
        sys.exit(1)

    findings = find_missing_references_in_current_scene(
        session,
        sink=ConsoleSink(),
        scanner=build_scanner(config),
        enumerator_config=build_enumerator_config(config),
    )
    finish(findings, fail_on_findings)
