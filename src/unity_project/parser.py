"""Parser for Unity text-serialized (YAML) scenes, prefabs and settings assets."""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from .class_ids import class_name

# "--- !u!1 &1234567" or "--- !u!4 &-8812 stripped"
DOCUMENT_HEADER = re.compile(r"^--- !u!(\d+) &(-?\d+)( stripped)?[ \t]*$", re.MULTILINE)

# GUIDs are 32 hex digits; all-digit ones would otherwise load as integers
GUID_VALUE = re.compile(r"(\bguid:[ \t]*)([0-9a-fA-F]{32})\b")

# YAML 1.1 reads on/off/yes/no as booleans, null/~ as None and 010 as octal.
# Unity writes field names and object names unquoted and stores booleans as 0/1.
DROPPED_RESOLVERS = frozenset(
    {
        "tag:yaml.org,2002:bool",
        "tag:yaml.org,2002:null",
        "tag:yaml.org,2002:int",
        "tag:yaml.org,2002:timestamp",
    }
)

DECIMAL_INT = re.compile(r"^[-+]?[0-9]+$")


class UnityLoader(yaml.SafeLoader):
    """SafeLoader that keeps every plain scalar a string except decimal integers and floats."""

    yaml_implicit_resolvers = {
        first: [(tag, regexp) for tag, regexp in resolvers if tag not in DROPPED_RESOLVERS]
        for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
    }

    def construct_decimal_int(self, node):
        return int(self.construct_scalar(node))


UnityLoader.add_implicit_resolver("tag:yaml.org,2002:int", DECIMAL_INT, list("-+0123456789"))
UnityLoader.add_constructor("tag:yaml.org,2002:int", UnityLoader.construct_decimal_int)


@dataclass
class UnityObject:
    """One serialized object from a Unity YAML file."""

    class_id: int
    file_id: int
    stripped: bool = False
    data: Dict[str, Any] = field(default_factory=dict)

    @property
    def type_name(self) -> str:
        # The body is a single-key mapping named after the type; fall back to the class table
        if len(self.data) == 1:
            return next(iter(self.data))
        return class_name(self.class_id)

    @property
    def body(self) -> Dict[str, Any]:
        """Field mapping under the type key."""
        if len(self.data) == 1:
            value = next(iter(self.data.values()))
            return value if isinstance(value, dict) else {}
        return self.data


@dataclass
class ParseResult:
    """Result of parsing a Unity YAML file."""

    success: bool
    documents: List[UnityObject] = None
    error: str = None
    file_path: str = None

    def __post_init__(self):
        if self.documents is None:
            self.documents = []

    def by_file_id(self) -> Dict[int, UnityObject]:
        return {doc.file_id: doc for doc in self.documents}


class UnityYAMLParser:
    """Parses Unity text-serialized asset files into UnityObject documents."""

    def parse_file(self, file_path: Union[str, Path]) -> ParseResult:
        """
        Parse a Unity YAML file (.unity, .prefab, .asset).

        Args:
            file_path: Path to the file

        Returns:
            ParseResult with parsed documents or error information
        """
        file_path = Path(file_path)

        if not file_path.exists():
            return ParseResult(success=False, error=f"File not found: {file_path}", file_path=str(file_path))

        if not file_path.is_file():
            return ParseResult(success=False, error=f"Path is not a file: {file_path}", file_path=str(file_path))

        try:
            content = file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            return ParseResult(
                success=False,
                error=f"Unable to read file as UTF-8 (binary serialization?): {e}",
                file_path=str(file_path),
            )
        except OSError as e:
            return ParseResult(success=False, error=f"Error reading file: {e}", file_path=str(file_path))

        result = self.parse_text(content)
        result.file_path = str(file_path)
        return result

    def parse_text(self, content: str) -> ParseResult:
        """Parse the text of a Unity YAML file."""
        if not content.startswith("%YAML"):
            return ParseResult(success=False, error="Not a Unity text-serialized file (missing %YAML header)")

        headers = list(DOCUMENT_HEADER.finditer(content))
        documents = []

        for index, header in enumerate(headers):
            body_end = headers[index + 1].start() if index + 1 < len(headers) else len(content)
            body = content[header.end():body_end]

            data = self._parse_body(body)
            if isinstance(data, ParseResult):
                return data

            documents.append(
                UnityObject(
                    class_id=int(header.group(1)),
                    file_id=int(header.group(2)),
                    stripped=header.group(3) is not None,
                    data=data,
                )
            )

        return ParseResult(success=True, documents=documents)

    def _parse_body(self, body: str) -> Union[Dict[str, Any], ParseResult]:
        """Parse one document body; returns a failed ParseResult on invalid YAML."""
        try:
            data = yaml.load(GUID_VALUE.sub(r'\1"\2"', body), Loader=UnityLoader)
        except yaml.YAMLError as e:
            return ParseResult(success=False, error=f"Invalid YAML format: {e}")

        if data is None:
            return {}
        if not isinstance(data, dict):
            return ParseResult(success=False, error=f"Unexpected document body type: {type(data).__name__}")
        return data


def reference_parts(value: Any) -> Optional[Dict[str, Any]]:
    """Return the {fileID, guid, type} mapping if ``value`` is an object reference, else None."""
    if isinstance(value, dict) and "fileID" in value:
        return value
    return None


def parse_reference(value: Any) -> tuple:
    """Split an object reference into (file_id, guid). guid is "" for local references."""
    ref = reference_parts(value) or {}
    try:
        file_id = int(ref.get("fileID") or 0)
    except (TypeError, ValueError):
        file_id = 0
    guid = ref.get("guid") or ""
    return file_id, str(guid)
