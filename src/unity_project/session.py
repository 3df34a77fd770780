"""Editor session: the project being inspected and the currently open scene."""

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from .build_settings import BuildSettingsReader
from .guid_index import KNOWN_SCRIPT_GUIDS, GuidIndex
from .object_graph import ObjectGraph, ObjectGraphBuilder
from .parser import UnityYAMLParser

logger = logging.getLogger(__name__)


class SceneLoadError(Exception):
    """Raised when a scene can't be opened."""


class EditorSession:
    """Holds project-wide state shared by scans: GUID index and the open scene."""

    def __init__(
        self,
        project_dir: Union[str, Path],
        guid_index: GuidIndex = None,
        build_settings: BuildSettingsReader = None,
        known_guids: Iterable[str] = KNOWN_SCRIPT_GUIDS,
    ):
        self.project_dir = Path(project_dir)
        if not self.project_dir.is_dir():
            raise NotADirectoryError(f"Project directory not found: {project_dir}")

        if guid_index is None:
            guid_index = GuidIndex.build(self.project_dir, known_guids=known_guids)
        self.guid_index = guid_index
        self.build_settings = build_settings or BuildSettingsReader()
        self.parser = UnityYAMLParser()
        self.graph_builder = ObjectGraphBuilder(self.guid_index)

        self.current_scene_path: Optional[str] = None
        self.current_scene: Optional[ObjectGraph] = None

    def open_scene(self, scene_path: str) -> ObjectGraph:
        """
        Open a scene, replacing the currently open one.

        Args:
            scene_path: Project-relative path, e.g. "Assets/Scenes/Main.unity"

        Raises:
            SceneLoadError: if the scene file is absent or can't be parsed
        """
        graph = self.load_graph(scene_path)
        if graph is None:
            raise SceneLoadError(f"Unable to open scene: {scene_path}")

        self.current_scene_path = scene_path
        self.current_scene = graph
        logger.info(f"📂 Opened scene {scene_path} ({len(graph.nodes)} objects)")
        return graph

    def load_graph(self, asset_path: str) -> Optional[ObjectGraph]:
        """Parse a scene or prefab into an object graph; None (with a warning) on failure."""
        result = self.parser.parse_file(self.project_dir / asset_path)
        if not result.success:
            logger.warning(f"⚠️ Skipping {asset_path}: {result.error}")
            return None
        return self.graph_builder.build(result, source=asset_path)

    def enabled_scenes(self):
        return self.build_settings.enabled_scenes(self.project_dir)
