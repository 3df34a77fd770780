"""Directory Scanner for Unity asset files."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List

logger = logging.getLogger(__name__)


@dataclass
class AssetScannerConfig:
    """Configuration for the asset directory scanner."""

    skip_hidden_files: bool = True
    supported_extensions: List[str] = None

    def __post_init__(self):
        if self.supported_extensions is None:
            self.supported_extensions = [".prefab"]


class AssetScanner:
    """Scans a Unity project folder for asset files."""

    def __init__(self, config: AssetScannerConfig = None):
        self.config = config or AssetScannerConfig()

    def scan_for_assets(self, root_dir: str) -> Iterator[str]:
        """
        Recursively scan for asset files.

        Args:
            root_dir: Root directory path to scan

        Yields:
            Paths relative to root_dir with "/" separators, in sorted order
        """
        root_path = Path(root_dir)

        if not root_path.exists():
            raise FileNotFoundError(f"Directory not found: {root_dir}")

        if not root_path.is_dir():
            raise NotADirectoryError(f"Path is not a directory: {root_dir}")

        for file_path in self._walk_directory(root_path):
            yield file_path.relative_to(root_path).as_posix()

    def _walk_directory(self, path: Path) -> Iterator[Path]:
        """Recursively walk directory tree and yield matching files."""
        try:
            items = sorted(path.iterdir())
        except PermissionError:
            logger.warning(f"⚠️ Skipping unreadable directory: {path}")
            return

        for item in items:
            # Hidden entries and "name~" folders are ignored by the asset database too
            if self.config.skip_hidden_files and (item.name.startswith(".") or item.name.endswith("~")):
                continue

            if item.is_file():
                if self._is_supported_file(item):
                    yield item
            elif item.is_dir():
                yield from self._walk_directory(item)

    def _is_supported_file(self, file_path: Path) -> bool:
        """Check if file has a supported extension."""
        return file_path.suffix.lower() in self.config.supported_extensions
