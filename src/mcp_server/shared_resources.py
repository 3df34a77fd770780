"""Shared resources for MCP server - the editor session reused across tool calls."""

from typing import Optional

from src.cli.config import Config
from src.scanner import ReferenceScanner, ScannerConfig
from src.unity_project import BuildSettingsReader, EditorSession, EnumeratorConfig


class SharedResources:
    """Holds the session, scanner and enumeration settings built from configuration."""

    def __init__(self):
        self.session: Optional[EditorSession] = None
        self.scanner: Optional[ReferenceScanner] = None
        self.enumerator_config: Optional[EnumeratorConfig] = None
        self.config: Optional[Config] = None

    def load_from_config(self, config: Config):
        """Load all shared resources from configuration."""
        self.config = config
        self.session = EditorSession(
            config.project_dir,
            build_settings=BuildSettingsReader(config.build_settings_path),
            known_guids=config.known_script_guids,
        )
        self.scanner = ReferenceScanner(ScannerConfig.from_config(config))
        self.enumerator_config = EnumeratorConfig.from_config(config)

    def is_ready(self) -> bool:
        """Check if all resources are loaded and ready."""
        return self.session is not None and self.scanner is not None


# Global shared resources instance
_shared_resources = SharedResources()


def get_shared_resources() -> SharedResources:
    """Get the global shared resources instance."""
    return _shared_resources


def initialize_shared_resources(config: Config):
    """Initialize shared resources from configuration."""
    _shared_resources.load_from_config(config)
