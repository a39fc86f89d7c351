"""Saving mazes to text files and loading them back."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path

from labyrinth.maze import CellType, Maze

_SEED_MODULUS = 1 << 32

_HEADER = re.compile(
    r"\s*([+-]?\d+)(?!\d)\s*([+-]?\d+)(?!\d)\s*([+-]?\d+)(?!\d)\s*"
)


@dataclass
class LoadedMaze:
    """A maze read from disk together with the seed stored beside it."""

    maze: Maze
    seed: int


def save_maze(maze: Maze, seed: int, path: str | os.PathLike[str]) -> None:
    """Write the maze as a header line, a seed line and one line of '#'/' ' per row."""
    lines = [f"{maze.rows} {maze.columns}", str(seed % _SEED_MODULUS)]
    lines.extend(
        "".join("#" if node.type is CellType.WALL else " " for node in row)
        for row in maze.grid
    )
    Path(path).write_text("\n".join(lines) + "\n", encoding="utf-8")


def load_maze(path: str | os.PathLike[str]) -> LoadedMaze:
    """Read a maze written by :func:`save_maze`.

    Characters other than '#' and ' ' leave the node at its default type;
    a body that ends early leaves the remaining nodes at their defaults.
    """
    text = Path(path).read_text(encoding="utf-8")
    header = _HEADER.match(text)
    if header is None:
        raise ValueError(f"{path}: missing or malformed maze header")
    rows, columns = int(header.group(1)), int(header.group(2))
    seed = int(header.group(3)) % _SEED_MODULUS

    maze = Maze(rows, columns)
    chars = iter(text[header.end():])
    for row in maze.grid:
        for node in row:
            ch = next(chars, None)
            if ch == "#":
                node.type = CellType.WALL
            elif ch == " ":
                node.type = CellType.CELL
        next(chars, None)

    maze.link_cells()
    return LoadedMaze(maze=maze, seed=seed)