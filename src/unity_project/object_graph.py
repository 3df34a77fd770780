"""Builds scannable object graphs from parsed Unity YAML documents."""

import logging
from pathlib import PurePosixPath
from typing import Any, Dict, Iterator, List, Optional

from src.object_model import MemoryNode, MemoryProperty
from src.scanner.data_classes import PropertyType

from .class_ids import GAME_OBJECT, MONO_BEHAVIOUR, PREFAB_INSTANCE
from .guid_index import GuidIndex
from .parser import ParseResult, UnityObject, parse_reference, reference_parts

logger = logging.getLogger(__name__)

# Bookkeeping fields the inspector never shows
HIDDEN_FIELDS = frozenset(
    {
        "m_ObjectHideFlags",
        "m_CorrespondingSourceObject",
        "m_PrefabInstance",
        "m_PrefabAsset",
        "m_GameObject",
        "m_EditorHideFlags",
        "m_EditorClassIdentifier",
        "serializedVersion",
    }
)

ARRAY_ELEMENT_NAME = "data"


class YAMLComponent:
    """A component backed by its YAML body; properties are produced lazily."""

    def __init__(self, type_name: str, source: UnityObject, graph: "ObjectGraph"):
        self.type_name = type_name
        self.source = source
        self._graph = graph

    def iterate_properties(self, include_nested: bool = True) -> Iterator[MemoryProperty]:
        for key, value in self.source.body.items():
            if key in HIDDEN_FIELDS:
                continue
            yield from self._walk(str(key), str(key), value, include_nested)

    def _walk(self, name: str, path: str, value: Any, include_nested: bool) -> Iterator[MemoryProperty]:
        if reference_parts(value) is not None:
            file_id, _ = parse_reference(value)
            yield MemoryProperty(
                name=name,
                property_type=PropertyType.OBJECT_REFERENCE,
                object_reference_value=self._graph.resolve(value),
                instance_id=file_id,
                property_path=path,
            )
            return

        yield MemoryProperty(name=name, property_type=_scalar_type(value), property_path=path)
        if not include_nested:
            return

        if isinstance(value, dict):
            for key, child in value.items():
                yield from self._walk(str(key), f"{path}.{key}", child, include_nested)
        elif isinstance(value, list):
            for index, child in enumerate(value):
                yield from self._walk(ARRAY_ELEMENT_NAME, f"{path}.Array.data[{index}]", child, include_nested)

    def __repr__(self) -> str:
        return f"YAMLComponent({self.type_name!r}, file_id={self.source.file_id})"


def _object_name(body: Dict[str, Any]) -> str:
    name = body.get("m_Name")
    return "" if name is None else str(name)


def _scalar_type(value: Any) -> str:
    if isinstance(value, bool):
        return PropertyType.BOOLEAN
    if isinstance(value, int):
        return PropertyType.INTEGER
    if isinstance(value, float):
        return PropertyType.FLOAT
    if isinstance(value, str):
        return PropertyType.STRING
    return PropertyType.GENERIC


class ObjectGraph:
    """GameObject nodes of a single scene or prefab file."""

    def __init__(self, source: str, objects: Dict[int, UnityObject], guid_index: GuidIndex):
        self.source = source
        self.objects = objects
        self.guid_index = guid_index
        self.nodes: List[MemoryNode] = []
        self._nodes_by_file_id: Dict[int, MemoryNode] = {}
        self.instance_nodes: Dict[int, MemoryNode] = {}

    def resolve(self, reference: Any) -> Any:
        """
        Resolve an object reference to its target.

        Returns the referenced UnityObject for local references, the asset path
        (or GUID for built-in resources) for external ones, and None when the
        slot is empty or the target no longer exists.
        """
        file_id, guid = parse_reference(reference)
        if file_id == 0:
            return None
        if not guid:
            return self.objects.get(file_id)
        if not self.guid_index.contains(guid):
            return None
        return self.guid_index.path_for(guid) or guid

    @property
    def root_nodes(self) -> List[MemoryNode]:
        return [node for node in self.nodes if node.parent is None]

    def add_node(self, node: MemoryNode) -> None:
        self.nodes.append(node)
        self._nodes_by_file_id[node.file_id] = node

    def node_for(self, game_object_id: int) -> Optional[MemoryNode]:
        return self._nodes_by_file_id.get(game_object_id)


class ObjectGraphBuilder:
    """Turns parsed documents into MemoryNode trees with YAML-backed components."""

    def __init__(self, guid_index: GuidIndex = None):
        self.guid_index = guid_index or GuidIndex()

    def build(self, parse_result: ParseResult, source: str = "") -> ObjectGraph:
        """
        Build the object graph of one file.

        Args:
            parse_result: Successful parse of a scene or prefab file
            source: Label for log messages (usually the asset path)

        Returns:
            ObjectGraph with one node per non-stripped GameObject, in file order
        """
        graph = ObjectGraph(source, parse_result.by_file_id(), self.guid_index)

        for doc in parse_result.documents:
            if doc.class_id != GAME_OBJECT or doc.stripped:
                continue
            body = doc.body
            node = MemoryNode(
                name=_object_name(body),
                file_id=doc.file_id,
                hide_flags=int(body.get("m_ObjectHideFlags") or 0),
            )
            graph.add_node(node)

        for node in graph.nodes:
            node.components = self._build_components(graph, graph.objects[node.file_id])

        for node in list(graph.nodes):
            self._attach(self._find_parent(graph, graph.objects[node.file_id]), node)

        logger.debug(f"Built {len(graph.nodes)} nodes from {source}")
        return graph

    def _build_components(self, graph: ObjectGraph, game_object: UnityObject) -> List[Optional[YAMLComponent]]:
        components = []
        for entry in game_object.body.get("m_Component") or []:
            component_doc = graph.objects.get(self._component_file_id(entry))
            if component_doc is None:
                components.append(None)
                continue

            if component_doc.class_id == MONO_BEHAVIOUR:
                type_name = self._script_type_name(graph, component_doc)
                if type_name is None:
                    components.append(None)
                    continue
            else:
                type_name = component_doc.type_name

            components.append(YAMLComponent(type_name, component_doc, graph))
        return components

    @staticmethod
    def _component_file_id(entry: Any) -> int:
        # Current format: {component: {fileID: X}}; legacy format: {<classID>: {fileID: X}}
        if not isinstance(entry, dict) or not entry:
            return 0
        ref = entry.get("component", next(iter(entry.values())))
        file_id, _ = parse_reference(ref)
        return file_id

    def _script_type_name(self, graph: ObjectGraph, behaviour: UnityObject) -> Optional[str]:
        """Class name of a MonoBehaviour's script, or None when the script is missing."""
        script = behaviour.body.get("m_Script")
        target = graph.resolve(script)
        if target is None:
            return None

        _, guid = parse_reference(script)
        script_path = self.guid_index.path_for(guid) if guid else None
        if script_path and script_path.endswith(".cs"):
            return PurePosixPath(script_path).stem
        return behaviour.type_name

    def _find_parent(self, graph: ObjectGraph, game_object: UnityObject) -> Optional[MemoryNode]:
        transform = self._transform_of(graph, game_object)
        if transform is None:
            return None
        return self._node_for_transform_ref(graph, transform.body.get("m_Father"))

    def _transform_of(self, graph: ObjectGraph, game_object: UnityObject) -> Optional[UnityObject]:
        """The Transform or RectTransform is the component that carries m_Father."""
        for entry in game_object.body.get("m_Component") or []:
            doc = graph.objects.get(self._component_file_id(entry))
            if doc is not None and "m_Father" in doc.body:
                return doc
        return None

    def _node_for_transform_ref(self, graph: ObjectGraph, reference: Any) -> Optional[MemoryNode]:
        father_id, _ = parse_reference(reference)
        father = graph.objects.get(father_id)
        if father is None:
            return None

        if father.stripped:
            instance_id, _ = parse_reference(father.body.get("m_PrefabInstance"))
            return self._prefab_instance_node(graph, instance_id)

        owner_id, _ = parse_reference(father.body.get("m_GameObject"))
        return graph.node_for(owner_id)

    def _prefab_instance_node(self, graph: ObjectGraph, instance_id: int) -> Optional[MemoryNode]:
        """Placeholder node naming a nested prefab instance, so paths stay readable."""
        if instance_id in graph.instance_nodes:
            return graph.instance_nodes[instance_id]

        instance = graph.objects.get(instance_id)
        if instance is None or instance.class_id != PREFAB_INSTANCE:
            return None
        modification = instance.body.get("m_Modification") or {}
        node = MemoryNode(name=self._prefab_instance_name(instance, modification), file_id=instance_id)
        graph.instance_nodes[instance_id] = node

        self._attach(self._node_for_transform_ref(graph, modification.get("m_TransformParent")), node)
        return node

    @staticmethod
    def _attach(parent: Optional[MemoryNode], node: MemoryNode) -> None:
        """Parent node under parent unless that would close a cycle in a corrupt file."""
        if parent is None:
            return
        ancestor = parent
        while ancestor is not None:
            if ancestor is node:
                logger.warning(f"⚠️ Ignoring cyclic parent link for '{node.name}'")
                return
            ancestor = ancestor.parent
        parent.add_child(node)

    def _prefab_instance_name(self, instance: UnityObject, modification: Dict[str, Any]) -> str:
        for change in modification.get("m_Modifications") or []:
            if isinstance(change, dict) and change.get("propertyPath") == "m_Name":
                return str(change.get("value"))

        _, guid = parse_reference(instance.body.get("m_SourcePrefab"))
        source_path = self.guid_index.path_for(guid) if guid else None
        if source_path:
            return PurePosixPath(source_path).stem
        return "Missing Prefab"
