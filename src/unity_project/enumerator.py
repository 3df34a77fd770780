"""Object Enumerator: supplies the root objects for each scan context."""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, List

from src.object_model import MemoryNode

from .scanner import AssetScanner, AssetScannerConfig
from .session import EditorSession

if TYPE_CHECKING:
    from ..cli.config import Config

logger = logging.getLogger(__name__)


@dataclass
class EnumeratorConfig:
    """Configuration for object enumeration."""

    asset_root: str = "Assets/"
    skip_hidden_objects: bool = True
    asset_extensions: List[str] = None

    def __post_init__(self):
        if self.asset_extensions is None:
            self.asset_extensions = [".prefab"]

    @classmethod
    def from_config(cls, config: "Config") -> "EnumeratorConfig":
        """Create config from Config object."""
        return cls(asset_root=config.asset_root, skip_hidden_objects=config.skip_hidden_objects)


class ObjectEnumerator:
    """Lists the objects to scan in the open scene or in project assets."""

    def __init__(self, session: EditorSession, config: EnumeratorConfig = None):
        self.session = session
        self.config = config or EnumeratorConfig()
        self.asset_scanner = AssetScanner(AssetScannerConfig(supported_extensions=self.config.asset_extensions))

    def scene_objects(self) -> List[MemoryNode]:
        """
        Every GameObject of the open scene, including inactive ones.

        Hidden objects are skipped when configured; stripped prefab
        placeholders are never part of the graph's nodes.
        """
        graph = self.session.current_scene
        if graph is None:
            logger.warning("⚠️ No scene is open")
            return []

        if not self.config.skip_hidden_objects:
            return list(graph.nodes)
        return [node for node in graph.nodes if node.hide_flags == 0]

    def asset_objects(self) -> List[MemoryNode]:
        """The root GameObject of every prefab under the asset root, in path order."""
        asset_root = self.config.asset_root.rstrip("/")
        try:
            relative_paths = list(self.asset_scanner.scan_for_assets(str(self.session.project_dir / asset_root)))
        except (FileNotFoundError, NotADirectoryError) as e:
            logger.warning(f"⚠️ Asset scan error: {e}")
            return []

        roots = []
        for relative_path in relative_paths:
            asset_path = f"{asset_root}/{relative_path}"
            graph = self.session.load_graph(asset_path)
            if graph is None:
                continue

            root_nodes = graph.root_nodes
            if not root_nodes:
                # Prefab variants keep their root inside a PrefabInstance
                logger.warning(f"⚠️ No root GameObject in {asset_path}")
                continue
            roots.append(root_nodes[0])

        logger.info(f"📦 Loaded {len(roots)} prefab assets")
        return roots
