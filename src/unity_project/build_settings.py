"""Reader for the scene list in EditorBuildSettings.asset."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

from .parser import UnityYAMLParser

logger = logging.getLogger(__name__)

DEFAULT_BUILD_SETTINGS_PATH = "ProjectSettings/EditorBuildSettings.asset"


@dataclass
class SceneEntry:
    """One scene row of the build settings."""

    path: str
    enabled: bool
    guid: str = ""


class BuildSettingsError(Exception):
    """Raised when the build settings asset is absent or unreadable."""


class BuildSettingsReader:
    """Reads the scene list from a project's build settings."""

    def __init__(self, settings_path: str = DEFAULT_BUILD_SETTINGS_PATH):
        self.settings_path = settings_path
        self.parser = UnityYAMLParser()

    def scenes(self, project_dir: Union[str, Path]) -> List[SceneEntry]:
        """
        Read every scene entry in listed order.

        Raises:
            BuildSettingsError: if the settings file can't be parsed
        """
        path = Path(project_dir) / self.settings_path
        result = self.parser.parse_file(path)
        if not result.success:
            raise BuildSettingsError(f"Unable to read build settings {path}: {result.error}")

        entries = []
        for doc in result.documents:
            for scene in doc.body.get("m_Scenes") or []:
                if not isinstance(scene, dict) or not scene.get("path"):
                    continue
                entries.append(
                    SceneEntry(
                        path=str(scene["path"]),
                        enabled=bool(scene.get("enabled")),
                        guid=str(scene.get("guid") or ""),
                    )
                )
        return entries

    def enabled_scenes(self, project_dir: Union[str, Path]) -> List[str]:
        """Paths of enabled scenes, in listed order."""
        enabled = [entry.path for entry in self.scenes(project_dir) if entry.enabled]
        logger.info(f"🎬 {len(enabled)} enabled scenes in build settings")
        return enabled
