"""Keeps the set of chunks around the camera loaded."""

from __future__ import annotations

import math

from voxelworld.blocks import CHUNK_SIZE
from voxelworld.chunk import Chunk, NoiseFunction

DEFAULT_RADIUS = 16 * CHUNK_SIZE


def round_up(num: int, mult: int) -> int:
    """Round `num` towards positive infinity to a multiple of `mult`; 0 leaves it as is."""
    if mult == 0:
        return num
    rem = abs(num) % abs(mult)
    if rem == 0:
        return num
    if num < 0:
        return -(abs(num) - rem)
    return num + mult - rem


class ChunkManager:
    """Creates chunks on demand and tracks those within a radius of the camera."""

    def __init__(self, noise: NoiseFunction, radius: int = DEFAULT_RADIUS):
        if radius < 0:
            raise ValueError("radius must not be negative")
        self.noise = noise
        self.radius = radius
        self.chunks: dict[tuple[int, int], Chunk] = {}
        self.loaded: dict[tuple[int, int], Chunk] = {}

    def clear_loaded_chunks(self) -> None:
        """Forget which chunks are loaded; created chunks are kept."""
        self.loaded.clear()

    def update_loaded_chunks(self, position) -> None:
        """Load every chunk within the radius of a world position (x, y, z)."""
        self.clear_loaded_chunks()

        cam_x = int(position[0])
        cam_z = int(position[2])
        radius = self.radius

        for iz in range(-radius, radius, CHUNK_SIZE):
            dx = int(math.sqrt(radius * radius - iz * iz))
            j = round_up(cam_z + iz, CHUNK_SIZE)
            for ix in range(-dx, dx, CHUNK_SIZE):
                i = round_up(cam_x + ix, CHUNK_SIZE)
                key = (i, j)
                chunk = self.chunks.get(key)
                if chunk is None:
                    chunk = Chunk(i, j, self.noise)
                    self.chunks[key] = chunk
                    chunk.generate_mesh()
                self.loaded.setdefault(key, chunk)

    def loaded_positions(self) -> list[tuple[int, int]]:
        """Origins (x, z) of the loaded chunks, in load order."""
        return list(self.loaded)