"""Hierarchy path formatting for scanned nodes."""

from typing import List

PATH_SEPARATOR = "/"


def full_path(node) -> str:
    """
    Build the full hierarchy path of a node.

    Args:
        node: Any object with ``name`` and ``parent`` attributes

    Returns:
        Ancestor names from the topmost ancestor down to ``node``, joined by "/"
    """
    names: List[str] = []
    current = node
    while current is not None:
        names.append(current.name)
        current = current.parent
    return PATH_SEPARATOR.join(reversed(names))
