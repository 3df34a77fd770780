"""All-scenes command - search every enabled build settings scene for missing references."""

import logging
import sys
from pathlib import Path
from typing import Optional

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent.parent
sys.path.insert(0, str(project_root))

from src.actions import find_missing_references_in_all_scenes
from src.cli.commands.common import build_enumerator_config, build_scanner, finish, open_session
from src.cli.config import Config
from src.scanner import ConsoleSink
from src.unity_project import BuildSettingsError

logger = logging.getLogger(__name__)


def all_scenes_command(config: Config, project_dir: Optional[str] = None, fail_on_findings: bool = False):
    """Open each enabled scene in turn and search it for missing references."""
    session = open_session(config, project_dir)

    try:
        findings = find_missing_references_in_all_scenes(
            session,
            sink=ConsoleSink(),
            scanner=build_scanner(config),
            enumerator_config=build_enumerator_config(config),
        )
    except BuildSettingsError as e:
        logger.error(f"❌ {e}")
        sys.exit(1)

    finish(findings, fail_on_findings)
