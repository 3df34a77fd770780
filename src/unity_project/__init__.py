"""Host binding for Unity projects with text-serialized scenes and prefabs."""

from .build_settings import BuildSettingsError, BuildSettingsReader, SceneEntry
from .enumerator import EnumeratorConfig, ObjectEnumerator
from .guid_index import KNOWN_SCRIPT_GUIDS, GuidIndex
from .object_graph import ObjectGraph, ObjectGraphBuilder, YAMLComponent
from .parser import ParseResult, UnityObject, UnityYAMLParser
from .scanner import AssetScanner, AssetScannerConfig
from .session import EditorSession, SceneLoadError

__all__ = [
    "AssetScanner",
    "AssetScannerConfig",
    "BuildSettingsError",
    "BuildSettingsReader",
    "EditorSession",
    "EnumeratorConfig",
    "GuidIndex",
    "KNOWN_SCRIPT_GUIDS",
    "ObjectEnumerator",
    "ObjectGraph",
    "ObjectGraphBuilder",
    "ParseResult",
    "SceneEntry",
    "SceneLoadError",
    "UnityObject",
    "UnityYAMLParser",
    "YAMLComponent",
]
