"""Serve command - starts the MCP server exposing the search actions."""

import logging
import sys
from pathlib import Path
from typing import Optional

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent.parent
sys.path.insert(0, str(project_root))

from src.cli.config import Config

logger = logging.getLogger(__name__)


def serve_command(config: Config, project_dir: Optional[str] = None, verbose: bool = False):
    """Start MCP server for the configured project."""
    if project_dir:
        config.project_dir = project_dir

    if verbose:
        logger.info(f"🚀 Starting {config.mcp_server_name}...")
        logger.info(f"📁 Unity project: {config.project_dir}")

    if not config.project_exists():
        logger.error(f"Project directory not found at {config.project_dir}")
        logger.error("Set UNITY_PROJECT_DIR or pass --project")
        sys.exit(1)

    # Import and start MCP server
    try:
        from src.mcp_server.server import start_server

        start_server(config)
    except ImportError as e:
        logger.error(f"Failed to import MCP server: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to start MCP server: {e}")
        sys.exit(1)
