"""Data classes and host capabilities for the missing reference scanner."""

from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional, Protocol


class PropertyType:
    """Type tags a host attaches to serialized properties."""

    GENERIC = "generic"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    FLOAT = "float"
    STRING = "string"
    OBJECT_REFERENCE = "object_reference"


class FindingKind:
    """Kinds of anomaly the scanner reports."""

    MISSING_REFERENCE = "missing_reference"
    MISSING_COMPONENT = "missing_component"


MISSING_COMPONENT_LABEL = "Missing Component"


class AuxiliaryMarkerUnavailable(Exception):
    """Raised by a host when the raw reference string cannot be read for a property."""


class Property(Protocol):
    """A named, typed serialized field on a component."""

    name: str
    property_type: str
    object_reference_value: Any
    instance_id: int


class PropertyIterable(Protocol):
    """Host capability: lazy iteration over a component's serialized properties."""

    def iterate_properties(self, include_nested: bool = True) -> Iterator[Property]: ...


class Component(PropertyIterable, Protocol):
    type_name: str


class Node(Protocol):
    """An object in the host graph. Parents form an acyclic tree."""

    name: str
    parent: Optional["Node"]

    def get_components(self) -> List[Optional[Component]]: ...


@dataclass
class Finding:
    """One reported anomaly with its location."""

    context: str
    path: str
    component: str
    property: Optional[str]
    kind: str = FindingKind.MISSING_REFERENCE
    node: Any = field(default=None, compare=False, repr=False)

    @property
    def is_component_level(self) -> bool:
        return self.kind == FindingKind.MISSING_COMPONENT


@dataclass
class ScannerConfig:
    """Configuration for the reference scanner."""

    missing_marker: str = "Missing"
    include_nested: bool = True

    @classmethod
    def from_config(cls, config) -> "ScannerConfig":
        """Create scanner config from the CLI Config object."""
        return cls(missing_marker=config.missing_marker)
