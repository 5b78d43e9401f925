"""A column of blocks whose terrain comes from a noise height map."""

from __future__ import annotations

from collections.abc import Callable

from voxelworld.blocks import CHUNK_HEIGHT, CHUNK_SIZE, BlockFlag, BlockGrid
from voxelworld.layout import ElementType, VertexBufferLayout
from voxelworld.mesher import build_mesh

NoiseFunction = Callable[[int, int], float]


def vertex_layout() -> VertexBufferLayout:
    """Layout of one mesh vertex: three position floats, then two texture floats."""
    layout = VertexBufferLayout()
    layout.push(ElementType.FLOAT, 3)
    layout.push(ElementType.FLOAT, 2)
    return layout


def height_map(noise: NoiseFunction, x: int, z: int, chunk_x: int, chunk_z: int) -> int:
    """Terrain height of column (x, z) in a chunk at (chunk_x, chunk_z).

    `noise(x, z)` is expected to return values in [-1, 1]. Columns outside the
    chunk have height 0.
    """
    if not (0 <= x < CHUNK_SIZE and 0 <= z < CHUNK_SIZE):
        return 0

    wx = x + chunk_x
    wz = z + chunk_z
    elev = noise(wx, wz) + 0.5 * noise(2 * wx, 2 * wz) + 0.25 * noise(4 * wx, 4 * wz)
    elev /= 1.75
    elev += 1.0
    elev /= 2.0
    elev = elev * elev * elev
    return int((CHUNK_HEIGHT - 2) * elev) + 1


class Chunk:
    """Blocks of one chunk, filled from a height map, and their mesh."""

    layout = vertex_layout()

    def __init__(self, x: int, z: int, noise: NoiseFunction):
        self.position = (x, z)
        self.noise = noise
        self.grid = BlockGrid(CHUNK_SIZE, CHUNK_HEIGHT)
        self.vertices: list[float] = []

        active = int(BlockFlag.ACTIVE)
        for bx in range(CHUNK_SIZE):
            for bz in range(CHUNK_SIZE):
                height = height_map(noise, bx, bz, x, z)
                top = max(0, min(height, self.grid.height))
                self.grid.data[bx, :top, bz] |= active

        self.grid.generate_faces()

    def update_block(self, x: int, y: int, z: int, active: bool) -> None:
        """Add or remove the block at a position and recompute exposed faces."""
        self.grid.set_active(x, y, z, active)
        self.grid.generate_faces()

    def is_active(self, x: int, y: int, z: int) -> bool:
        """True if the block at the position is solid."""
        return self.grid.is_active(x, y, z)

    def generate_mesh(self) -> list[float]:
        """Rebuild and return the chunk's vertex data (x, y, z, u, v per vertex)."""
        self.vertices = build_mesh(self.grid, self.position)
        return self.vertices

    def num_floats(self) -> int:
        """Number of floats in the last generated mesh."""
        return len(self.vertices)