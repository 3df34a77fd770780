"""FastMCP server exposing missing reference searches to editor agents."""

from mcp.server.fastmcp import FastMCP

from src.cli.config import Config
from src.utils.logging_config import setup_logging

from .scanAPI import scanAllScenes, scanAssets, scanScene
from .shared_resources import initialize_shared_resources

# Setup logging for MCP (silent mode - ERROR level only)
setup_logging(verbose=False)

DEFAULT_SERVER_NAME = "Missing References Finder"


async def scan_scene(scene_path: str) -> str:
    """
    Search one scene for missing components and missing object references.

    The scene is opened (replacing any previously opened scene) and every
    GameObject in it is inspected, including inactive ones.

    Args:
        scene_path: Project-relative scene path, e.g. "Assets/Scenes/Main.unity"

    Returns:
        One line per finding:
        "Missing Ref in: [<scene>]<path>. Component: <component>, Property: <property>"
        or "Missing Component in GO: [<scene>]<path>"
    """
    return await scanScene(scene_path)


async def scan_all_scenes() -> str:
    """
    Search every enabled scene listed in the build settings, in listed order.

    Returns:
        Findings of all scenes, each prefixed with its scene path
    """
    return await scanAllScenes()


async def scan_assets() -> str:
    """
    Search the root GameObject of every prefab under the asset root.

    Returns:
        Findings prefixed with the "Project" context
    """
    return await scanAssets()


def create_server(name: str = DEFAULT_SERVER_NAME) -> FastMCP:
    """Create the MCP server with the scan tools registered."""
    server = FastMCP(name)
    for tool in (scan_scene, scan_all_scenes, scan_assets):
        server.tool()(tool)
    return server


def start_server(config: Config):
    """Start MCP server for the configured Unity project."""
    # Initialize shared resources silently (no stdout prints for MCP)
    initialize_shared_resources(config)

    # Start the MCP server
    create_server(config.mcp_server_name).run()


if __name__ == "__main__":
    # Load config for standalone execution
    config = Config()
    start_server(config)
