"""In-memory host object model."""

from .memory import MemoryComponent, MemoryNode, MemoryProperty

__all__ = ["MemoryComponent", "MemoryNode", "MemoryProperty"]
