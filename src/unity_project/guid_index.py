"""GUID index built from .meta files, used to resolve cross-asset references."""

import logging
import re
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

from .scanner import AssetScanner, AssetScannerConfig

logger = logging.getLogger(__name__)

META_GUID = re.compile(r"^guid:[ \t]*([0-9a-fA-F]{32})[ \t]*$", re.MULTILINE)

# Built-in resources, default resources and extra resources
BUILTIN_GUIDS = frozenset(
    {
        "0000000000000000d000000000000000",
        "0000000000000000e000000000000000",
        "0000000000000000f000000000000000",
    }
)

# Script assemblies shipped with the editor install (UnityEngine.UI before 2019.2)
KNOWN_SCRIPT_GUIDS = frozenset({"f70555f144d8491a825f0804e09c671c"})

DEFAULT_SEARCH_FOLDERS = ("Assets", "Packages", "Library/PackageCache")


class GuidIndex:
    """Maps asset GUIDs to project-relative asset paths."""

    def __init__(self, paths_by_guid: Dict[str, str] = None, known_guids: Iterable[str] = KNOWN_SCRIPT_GUIDS):
        self.paths_by_guid: Dict[str, str] = {}
        self.known_guids = BUILTIN_GUIDS | {guid.lower() for guid in known_guids}
        for guid, path in (paths_by_guid or {}).items():
            self.paths_by_guid[guid.lower()] = path

    @classmethod
    def build(
        cls,
        project_dir: Union[str, Path],
        folders: Iterable[str] = DEFAULT_SEARCH_FOLDERS,
        known_guids: Iterable[str] = KNOWN_SCRIPT_GUIDS,
    ) -> "GuidIndex":
        """
        Index every .meta file under the given project folders.

        known_guids always resolve even though no .meta file describes them,
        e.g. script DLLs that live in the editor install.
        """
        project_dir = Path(project_dir)
        scanner = AssetScanner(AssetScannerConfig(supported_extensions=[".meta"]))
        index = cls(known_guids=known_guids)

        for folder in folders:
            folder_path = project_dir / folder
            if not folder_path.is_dir():
                continue

            for relative_meta in scanner.scan_for_assets(str(folder_path)):
                guid = cls._read_guid(folder_path / relative_meta)
                if guid:
                    # "Assets/Foo/Bar.prefab.meta" describes "Assets/Foo/Bar.prefab"
                    index.paths_by_guid[guid] = f"{folder}/{relative_meta[: -len('.meta')]}"

        logger.info(f"🔑 Indexed {len(index.paths_by_guid)} asset GUIDs")
        return index

    @staticmethod
    def _read_guid(meta_path: Path) -> Optional[str]:
        try:
            content = meta_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"⚠️ Unable to read {meta_path}: {e}")
            return None

        match = META_GUID.search(content)
        if not match:
            logger.warning(f"⚠️ No guid in {meta_path}")
            return None
        return match.group(1).lower()

    def contains(self, guid: str) -> bool:
        """True for built-in and known GUIDs and GUIDs of assets present in the project."""
        guid = (guid or "").lower()
        return guid in self.known_guids or guid in self.paths_by_guid

    def path_for(self, guid: str) -> Optional[str]:
        return self.paths_by_guid.get((guid or "").lower())

    def __len__(self) -> int:
        return len(self.paths_by_guid)
