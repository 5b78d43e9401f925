"""Description of how vertex attributes are packed into a vertex buffer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ElementType(Enum):
    """Attribute component types, valued by their OpenGL enum codes."""

    FLOAT = 0x1406
    UNSIGNED_INT = 0x1405
    UNSIGNED_BYTE = 0x1401

    @property
    def size(self) -> int:
        """Size of one component in bytes."""
        return _SIZES[self]


_SIZES = {
    ElementType.FLOAT: 4,
    ElementType.UNSIGNED_INT: 4,
    ElementType.UNSIGNED_BYTE: 1,
}


@dataclass(frozen=True)
class VertexElement:
    """One vertex attribute: how many components and of which type."""

    count: int
    element_type: ElementType
    normalized: bool = False

    @property
    def size(self) -> int:
        return self.count * self.element_type.size


class VertexBufferLayout:
    """An ordered list of vertex attributes and the stride they add up to."""

    def __init__(self):
        self.elements: list[VertexElement] = []
        self.stride = 0

    def push(self, element_type, count: int) -> None:
        """Append an attribute of `count` components of the given type."""
        kind = ElementType(element_type)
        if count < 0:
            raise ValueError("attribute component count must not be negative")
        element = VertexElement(count, kind)
        self.elements.append(element)
        self.stride += element.size

    def offsets(self) -> list[int]:
        """Byte offset of each attribute within one vertex."""
        result = []
        offset = 0
        for element in self.elements:
            result.append(offset)
            offset += element.size
        return result