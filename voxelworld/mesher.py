"""Greedy meshing of exposed block faces into textured quads.

Each quad is two triangles, six vertices of five floats: x, y, z, u, v.
"""

from __future__ import annotations

import numpy as np

from voxelworld.blocks import BlockFlag, BlockGrid

_X, _Y, _Z = 0, 1, 2


def _sweep(grid: BlockGrid, origin, plane_axis: int, u_axis: int, v_axis: int, faces) -> list[float]:
    grid.clear_visited()
    data = grid.data
    shape = data.shape
    chunk_x, chunk_z = origin
    u_extent = shape[u_axis]
    v_extent = shape[v_axis]
    out: list[float] = []

    def cell(p: int, u: int, v: int) -> tuple[int, int, int]:
        index = [0, 0, 0]
        index[plane_axis] = p
        index[u_axis] = u
        index[v_axis] = v
        return tuple(index)

    def is_open(index, face: int, visited: int) -> bool:
        value = int(data[index])
        return bool(value & face) and not value & visited

    def position(p: float, u: int, v: int) -> list[float]:
        pos = [0.0, 0.0, 0.0]
        pos[plane_axis] = float(p)
        pos[u_axis] = float(u)
        pos[v_axis] = float(v)
        pos[_X] += chunk_x
        pos[_Z] += chunk_z
        return pos

    for p in range(shape[plane_axis]):
        for u in range(u_extent):
            for v in range(v_extent):
                for face, visited, offset in faces:
                    if not is_open(cell(p, u, v), face, visited):
                        continue

                    u_end = u
                    while u_end < u_extent and is_open(cell(p, u_end, v), face, visited):
                        u_end += 1

                    v_end = v
                    while v_end < v_extent:
                        span = [cell(p, i, v_end) for i in range(u, u_end)]
                        if not all(is_open(index, face, visited) for index in span):
                            break
                        for index in span:
                            data[index] |= np.uint16(visited)
                        v_end += 1

                    du = float(u_end - u)
                    dv = float(v_end - v)
                    plane = p + offset
                    for cu, cv, tu, tv in (
                        (u, v, 0.0, 0.0),
                        (u_end, v, du, 0.0),
                        (u_end, v_end, du, dv),
                        (u, v, 0.0, 0.0),
                        (u, v_end, 0.0, dv),
                        (u_end, v_end, du, dv),
                    ):
                        out.extend(position(plane, cu, cv))
                        out.extend((tu, tv))
    return out


def mesh_bottom_top(grid: BlockGrid, origin) -> list[float]:
    """Quads for bottom and top faces, merged across x then z."""
    return _sweep(
        grid,
        origin,
        _Y,
        _X,
        _Z,
        (
            (int(BlockFlag.BOTTOM), int(BlockFlag.FIRST_VISITED), 0),
            (int(BlockFlag.TOP), int(BlockFlag.SECOND_VISITED), 1),
        ),
    )


def mesh_back_front(grid: BlockGrid, origin) -> list[float]:
    """Quads for back (-z) and front (+z) faces, merged across x then y."""
    return _sweep(
        grid,
        origin,
        _Z,
        _X,
        _Y,
        (
            (int(BlockFlag.BACK), int(BlockFlag.FIRST_VISITED), 0),
            (int(BlockFlag.FRONT), int(BlockFlag.SECOND_VISITED), 1),
        ),
    )


def mesh_left_right(grid: BlockGrid, origin) -> list[float]:
    """Quads for left (-x) and right (+x) faces, merged across y then z."""
    return _sweep(
        grid,
        origin,
        _X,
        _Y,
        _Z,
        (
            (int(BlockFlag.LEFT), int(BlockFlag.FIRST_VISITED), 0),
            (int(BlockFlag.RIGHT), int(BlockFlag.SECOND_VISITED), 1),
        ),
    )


def build_mesh(grid: BlockGrid, origin) -> list[float]:
    """All face quads of the grid, translated by the chunk origin (x, z)."""
    vertices = mesh_bottom_top(grid, origin)
    vertices.extend(mesh_back_front(grid, origin))
    vertices.extend(mesh_left_right(grid, origin))
    return vertices