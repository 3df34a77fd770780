"""In-memory object graph implementing the scanner's host capabilities."""

from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional

from src.scanner.data_classes import AuxiliaryMarkerUnavailable, PropertyType


@dataclass
class MemoryProperty:
    """A serialized property. Children are visited only when nested iteration is requested."""

    name: str
    property_type: str = PropertyType.GENERIC
    object_reference_value: Any = None
    instance_id: int = 0
    property_path: str = ""
    raw_string: Optional[str] = None
    children: List["MemoryProperty"] = field(default_factory=list)

    def __post_init__(self):
        if not self.property_path:
            self.property_path = self.name

    @property
    def supports_auxiliary_missing_marker(self) -> bool:
        return self.raw_string is not None

    def raw_reference_string(self) -> str:
        if self.raw_string is None:
            raise AuxiliaryMarkerUnavailable(f"No raw reference string for {self.property_path}")
        return self.raw_string


@dataclass
class MemoryComponent:
    """A component holding an ordered list of top-level properties."""

    type_name: str
    properties: List[MemoryProperty] = field(default_factory=list)

    def iterate_properties(self, include_nested: bool = True) -> Iterator[MemoryProperty]:
        """Yield properties in declaration order, depth first when include_nested is set."""
        for prop in self.properties:
            yield from self._walk(prop, include_nested)

    def _walk(self, prop: MemoryProperty, include_nested: bool) -> Iterator[MemoryProperty]:
        yield prop
        if include_nested:
            for child in prop.children:
                yield from self._walk(child, include_nested)


@dataclass(eq=False)
class MemoryNode:
    """
    A node in the object graph.

    ``components`` may contain None entries for slots whose component
    could not be resolved.
    """

    name: str
    parent: Optional["MemoryNode"] = None
    components: List[Optional[MemoryComponent]] = field(default_factory=list)
    children: List["MemoryNode"] = field(default_factory=list, repr=False)
    file_id: int = 0
    hide_flags: int = 0

    def get_components(self) -> List[Optional[MemoryComponent]]:
        return list(self.components)

    def add_child(self, child: "MemoryNode") -> "MemoryNode":
        child.parent = self
        self.children.append(child)
        return child

    def walk(self) -> Iterator["MemoryNode"]:
        """Yield this node and all descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()
