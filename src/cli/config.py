"""Configuration management for the missing references CLI."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


class Config:
    """Configuration loaded from .env file."""

    def __init__(self, env_file: Optional[str] = None):
        """Load configuration from .env file."""
        if env_file:
            load_dotenv(env_file)
        else:
            # Load from project root .env
            project_root = Path(__file__).parent.parent.parent
            env_path = project_root / ".env"
            if env_path.exists():
                load_dotenv(env_path)

        # Project layout
        self.project_dir = os.getenv("UNITY_PROJECT_DIR", ".")
        self.asset_root = os.getenv("ASSET_ROOT", "Assets/")
        self.build_settings_path = os.getenv("BUILD_SETTINGS_PATH", "ProjectSettings/EditorBuildSettings.asset")

        # Scanning
        self.assets_context = os.getenv("ASSETS_CONTEXT", "Project")
        self.skip_hidden_objects = os.getenv("SKIP_HIDDEN_OBJECTS", "true").lower() == "true"
        self.missing_marker = os.getenv("MISSING_MARKER", "Missing")
        # Comma-separated script GUIDs that resolve without a .meta file (editor-installed DLLs)
        self.known_script_guids = [
            guid.strip()
            for guid in os.getenv("KNOWN_SCRIPT_GUIDS", "f70555f144d8491a825f0804e09c671c").split(",")
            if guid.strip()
        ]

        # MCP Server
        self.mcp_server_name = os.getenv("MCP_SERVER_NAME", "Missing References Finder")

    def project_exists(self) -> bool:
        return Path(self.project_dir).is_dir()
