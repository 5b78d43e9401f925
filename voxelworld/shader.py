"""Splitting a combined shader file into its vertex and fragment sources."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class ShaderType(Enum):
    """Which shader section the parser is currently reading."""

    NONE = -1
    VERTEX = 0
    FRAGMENT = 1


@dataclass(frozen=True)
class ShaderProgramSource:
    """Source text of the vertex and fragment stages of a program."""

    vertex_source: str
    fragment_source: str


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def parse_shader_text(text: str) -> ShaderProgramSource:
    """Split text with `#shader vertex` / `#shader fragment` markers into stage sources."""
    sections = {ShaderType.VERTEX: [], ShaderType.FRAGMENT: []}
    current = ShaderType.NONE
    for line in _lines(text):
        if "#shader" in line:
            if "vertex" in line:
                current = ShaderType.VERTEX
            elif "fragment" in line:
                current = ShaderType.FRAGMENT
        elif current is not ShaderType.NONE:
            sections[current].append(line + "\n")
    return ShaderProgramSource(
        "".join(sections[ShaderType.VERTEX]),
        "".join(sections[ShaderType.FRAGMENT]),
    )


def parse_shader(path: str | os.PathLike) -> ShaderProgramSource:
    """Read a combined shader file and split it into stage sources."""
    return parse_shader_text(Path(path).read_text())