"""Helpers shared by the scan commands."""

import logging
import sys
from pathlib import Path
from typing import List, Optional

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent.parent
sys.path.insert(0, str(project_root))

from src.cli.config import Config
from src.scanner import Finding, ReferenceScanner, ScannerConfig
from src.unity_project import BuildSettingsReader, EditorSession, EnumeratorConfig

logger = logging.getLogger(__name__)


def open_session(config: Config, project_dir: Optional[str] = None) -> EditorSession:
    """Open an editor session on the project, exiting when the project is absent."""
    project_dir = project_dir or config.project_dir
    logger.info(f"📁 Unity project: {project_dir}")

    if not Path(project_dir).is_dir():
        logger.error(f"❌ Project directory not found: {project_dir}")
        sys.exit(1)

    return EditorSession(
        project_dir,
        build_settings=BuildSettingsReader(config.build_settings_path),
        known_guids=config.known_script_guids,
    )


def build_scanner(config: Config) -> ReferenceScanner:
    return ReferenceScanner(ScannerConfig.from_config(config))


def build_enumerator_config(config: Config) -> EnumeratorConfig:
    return EnumeratorConfig.from_config(config)


def finish(findings: List[Finding], fail_on_findings: bool = False):
    """Log a summary and exit non-zero when findings should fail the run."""
    if findings:
        logger.info(f"❗ Found {len(findings)} missing references")
    else:
        logger.info("✅ No missing references found")

    if fail_on_findings and findings:
        sys.exit(1)
