"""Maze grid, seeded generator and recursive-backtracking generation."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterator, MutableSequence, TypeVar

_T = TypeVar("_T")

_WALL_GLYPH = "⬜ "
_CELL_GLYPH = "⬛ "


class CellType(enum.Enum):
    """What a grid position is: solid wall or walkable cell."""

    WALL = "wall"
    CELL = "cell"


@dataclass(eq=False)
class Connection:
    """A link from a cell to the cell two steps away and the wall between them."""

    neighbor: Node | None = None
    wall: Node | None = None


@dataclass(eq=False)
class Node:
    """One position of the maze grid."""

    row: int
    column: int
    type: CellType = CellType.WALL
    visited: bool = False
    up: Connection = field(default_factory=Connection, repr=False)
    down: Connection = field(default_factory=Connection, repr=False)
    left: Connection = field(default_factory=Connection, repr=False)
    right: Connection = field(default_factory=Connection, repr=False)


class LinearCongruentialGenerator:
    """A 32-bit linear congruential generator; deterministic for a given seed."""

    MULTIPLIER = 1103515245
    INCREMENT = 12345
    MODULUS = 1 << 32

    def __init__(self, seed: int) -> None:
        self.state = seed % self.MODULUS

    def next(self) -> int:
        """Advance the generator and return the new state."""
        self.state = (self.state * self.MULTIPLIER + self.INCREMENT) % self.MODULUS
        return self.state

    def shuffle(self, items: MutableSequence[_T]) -> None:
        """Shuffle ``items`` in place with a Fisher-Yates pass driven by this generator."""
        for i in range(len(items) - 1, 0, -1):
            j = self.next() % (i + 1)
            items[i], items[j] = items[j], items[i]


class Maze:
    """A rectangular grid in which cells sit at odd row and odd column positions."""

    def __init__(self, rows: int, columns: int) -> None:
        if rows < 1 or columns < 1:
            raise ValueError(f"maze dimensions must be positive, got {rows}x{columns}")
        self.rows = rows
        self.columns = columns
        self.grid: list[list[Node]] = [
            [
                Node(r, c, CellType.CELL if r % 2 == 1 and c % 2 == 1 else CellType.WALL)
                for c in range(columns)
            ]
            for r in range(rows)
        ]
        self.link_cells()

    def __getitem__(self, position: tuple[int, int]) -> Node:
        row, column = position
        return self.grid[row][column]

    def __iter__(self) -> Iterator[Node]:
        for row in self.grid:
            yield from row

    def link_cells(self) -> None:
        """Connect every odd-positioned node to neighbouring cells two steps away."""
        grid = self.grid
        for r in range(1, self.rows, 2):
            for c in range(1, self.columns, 2):
                node = grid[r][c]
                if r - 2 > 0 and grid[r - 2][c].type is CellType.CELL:
                    node.up = Connection(grid[r - 2][c], grid[r - 1][c])
                if r + 2 < self.rows and grid[r + 2][c].type is CellType.CELL:
                    node.down = Connection(grid[r + 2][c], grid[r + 1][c])
                if c - 2 > 0 and grid[r][c - 2].type is CellType.CELL:
                    node.left = Connection(grid[r][c - 2], grid[r][c - 1])
                if c + 2 < self.columns and grid[r][c + 2].type is CellType.CELL:
                    node.right = Connection(grid[r][c + 2], grid[r][c + 1])

    def reset_visited(self) -> None:
        """Mark every node as not visited."""
        for node in self:
            node.visited = False

    def generate(self, seed: int) -> int:
        """Open the entrance and exit, carve passages, and return the final generator state."""
        if self.rows < 3 or self.columns < 3:
            raise ValueError(
                f"maze must be at least 3x3 to generate, got {self.rows}x{self.columns}"
            )
        self.reset_visited()
        self.grid[1][0].type = CellType.CELL
        self.grid[self.rows - 2][self.columns - 1].type = CellType.CELL

        rng = LinearCongruentialGenerator(seed)
        stack = [self._enter(self.grid[1][1], rng)]
        while stack:
            connection = next(stack[-1], None)
            if connection is None:
                stack.pop()
                continue
            neighbor = connection.neighbor
            if neighbor is not None and not neighbor.visited and connection.wall is not None:
                connection.wall.type = CellType.CELL
                stack.append(self._enter(neighbor, rng))
        return rng.state

    @staticmethod
    def _enter(node: Node, rng: LinearCongruentialGenerator) -> Iterator[Connection]:
        node.visited = True
        directions = [node.up, node.down, node.left, node.right]
        rng.shuffle(directions)
        return iter(directions)

    def render(self) -> str:
        """Return the maze drawn with one glyph per node, one line per row."""
        return "".join(
            "".join(_WALL_GLYPH if node.type is CellType.WALL else _CELL_GLYPH for node in row)
            + "\n"
            for row in self.grid
        )


def generate_maze(rows: int, columns: int, seed: int) -> tuple[Maze, int]:
    """Build and generate a maze; return it with the generator state left after carving."""
    maze = Maze(rows, columns)
    final_seed = maze.generate(seed)
    return maze, final_seed