"""Reference Scanner for finding missing components and missing object references."""

import logging
from typing import Iterable, Iterator, Optional

from .data_classes import (
    MISSING_COMPONENT_LABEL,
    AuxiliaryMarkerUnavailable,
    Finding,
    FindingKind,
    PropertyType,
    ScannerConfig,
)
from .names import nicify_variable_name
from .path_builder import full_path

logger = logging.getLogger(__name__)


class ReferenceScanner:
    """Walks root nodes and reports broken component slots and object references."""

    def __init__(self, config: ScannerConfig = None):
        self.config = config or ScannerConfig()

    def scan(self, context: str, roots: Optional[Iterable]) -> Iterator[Finding]:
        """
        Scan root nodes for missing references.

        Args:
            context: Label for where the roots came from (scene path, "Project", ...)
            roots: Nodes to inspect, in order. None or empty yields nothing.

        Yields:
            Finding for every missing component and missing object reference,
            in traversal order
        """
        if roots is None:
            return
        if isinstance(roots, (str, bytes)) or not isinstance(roots, Iterable):
            raise TypeError(f"roots must be an iterable of nodes, got {type(roots).__name__}")

        for node in roots:
            yield from self._scan_node(context, node)

    def _scan_node(self, context: str, node) -> Iterator[Finding]:
        """Scan every component attached to a single node."""
        for component in node.get_components():
            # Missing components have no type and no readable properties
            if component is None:
                yield Finding(
                    context=context,
                    path=full_path(node),
                    component=MISSING_COMPONENT_LABEL,
                    property=None,
                    kind=FindingKind.MISSING_COMPONENT,
                    node=node,
                )
                continue

            for prop in component.iterate_properties(include_nested=self.config.include_nested):
                if prop.property_type != PropertyType.OBJECT_REFERENCE:
                    continue
                if self.is_missing_reference(prop):
                    yield Finding(
                        context=context,
                        path=full_path(node),
                        component=component.type_name,
                        property=nicify_variable_name(prop.name),
                        kind=FindingKind.MISSING_REFERENCE,
                        node=node,
                    )

    def is_missing_reference(self, prop) -> bool:
        """
        Classify an object-reference property.

        A reference is missing when its resolved value is absent but the slot
        still shows it was assigned: a non-zero raw identifier, or a raw
        reference string starting with the missing marker.
        """
        if prop.object_reference_value is not None:
            return False
        if prop.instance_id:
            return True
        return self._has_missing_marker(prop)

    def _has_missing_marker(self, prop) -> bool:
        """Best-effort check of the raw reference string. No signal when the host can't provide it."""
        if not getattr(prop, "supports_auxiliary_missing_marker", False):
            return False

        try:
            raw = prop.raw_reference_string()
        except (AuxiliaryMarkerUnavailable, AttributeError, NotImplementedError) as e:
            logger.debug(f"Raw reference string unavailable for '{prop.name}': {e}")
            return False

        return isinstance(raw, str) and raw.startswith(self.config.missing_marker)
