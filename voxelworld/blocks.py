"""Per-block state of a chunk: activity, visible faces and mesher visit marks."""

from __future__ import annotations

from enum import IntFlag

import numpy as np

CHUNK_SIZE = 16
CHUNK_HEIGHT = 64


class BlockFlag(IntFlag):
    """Bits stored for each block."""

    FRONT = 1 << 0
    BACK = 1 << 1
    RIGHT = 1 << 2
    LEFT = 1 << 3
    TOP = 1 << 4
    BOTTOM = 1 << 5
    FIRST_VISITED = 1 << 6
    SECOND_VISITED = 1 << 7
    ACTIVE = 1 << 8


FACE_FLAGS = (
    BlockFlag.FRONT
    | BlockFlag.BACK
    | BlockFlag.RIGHT
    | BlockFlag.LEFT
    | BlockFlag.TOP
    | BlockFlag.BOTTOM
)
VISITED_FLAGS = BlockFlag.FIRST_VISITED | BlockFlag.SECOND_VISITED

_ALL_BITS = 0xFFFF


class BlockGrid:
    """A size x height x size grid of block flags, indexed as [x, y, z]."""

    def __init__(self, size: int = CHUNK_SIZE, height: int = CHUNK_HEIGHT):
        if size <= 0 or height <= 0:
            raise ValueError("grid dimensions must be positive")
        self.size = size
        self.height = height
        self.data = np.zeros((size, height, size), dtype=np.uint16)

    def _index(self, x: int, y: int, z: int) -> tuple[int, int, int]:
        if not (0 <= x < self.size and 0 <= y < self.height and 0 <= z < self.size):
            raise IndexError(f"block ({x}, {y}, {z}) is outside the grid")
        return x, y, z

    def is_active(self, x: int, y: int, z: int) -> bool:
        """True if the block at the position is solid."""
        return bool(int(self.data[self._index(x, y, z)]) & BlockFlag.ACTIVE)

    def set_active(self, x: int, y: int, z: int, active: bool) -> None:
        """Make the block at the position solid or empty."""
        index = self._index(x, y, z)
        if active:
            self.data[index] |= np.uint16(BlockFlag.ACTIVE)
        else:
            self.data[index] &= np.uint16(_ALL_BITS ^ BlockFlag.ACTIVE)

    def has_flag(self, x: int, y: int, z: int, flag: BlockFlag) -> bool:
        """True if any bit of `flag` is set for the block."""
        return bool(int(self.data[self._index(x, y, z)]) & int(flag))

    def mark(self, x: int, y: int, z: int, flag: BlockFlag) -> None:
        """Set the bits of `flag` for the block."""
        self.data[self._index(x, y, z)] |= np.uint16(int(flag))

    def generate_faces(self) -> None:
        """Recompute which faces of each solid block are exposed."""
        self.data &= np.uint16(_ALL_BITS ^ int(FACE_FLAGS))
        active = (self.data & np.uint16(BlockFlag.ACTIVE)) != 0
        empty = ~active

        below = np.ones_like(active)
        below[:, 1:, :] = empty[:, :-1, :]
        above = np.zeros_like(active)
        above[:, :-1, :] = empty[:, 1:, :]
        left = np.ones_like(active)
        left[1:, :, :] = empty[:-1, :, :]
        right = np.ones_like(active)
        right[:-1, :, :] = empty[1:, :, :]
        back = np.ones_like(active)
        back[:, :, 1:] = empty[:, :, :-1]
        front = np.ones_like(active)
        front[:, :, :-1] = empty[:, :, 1:]

        for flag, open_side in (
            (BlockFlag.BOTTOM, below),
            (BlockFlag.TOP, above),
            (BlockFlag.LEFT, left),
            (BlockFlag.RIGHT, right),
            (BlockFlag.BACK, back),
            (BlockFlag.FRONT, front),
        ):
            self.data[active & open_side] |= np.uint16(int(flag))

    def clear_visited(self) -> None:
        """Reset the mesher's visit marks on every block."""
        self.data &= np.uint16(_ALL_BITS ^ int(VISITED_FLAGS))