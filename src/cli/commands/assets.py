"""Assets command - search prefab assets for missing references."""

import logging
import sys
from pathlib import Path
from typing import Optional

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent.parent
sys.path.insert(0, str(project_root))

from src.actions import find_missing_references_in_assets
from src.cli.commands.common import build_enumerator_config, build_scanner, finish, open_session
from src.cli.config import Config
from src.scanner import ConsoleSink

logger = logging.getLogger(__name__)


def assets_command(config: Config, project_dir: Optional[str] = None, fail_on_findings: bool = False):
    """Search the root object of every prefab under the asset root."""
    session = open_session(config, project_dir)
    logger.info(f"📦 Asset root: {config.asset_root}")

    findings = find_missing_references_in_assets(
        session,
        sink=ConsoleSink(),
        scanner=build_scanner(config),
        enumerator_config=build_enumerator_config(config),
        context=config.assets_context,
    )
    finish(findings, fail_on_findings)
