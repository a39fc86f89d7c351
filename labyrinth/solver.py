"""Automatic maze traversal: depth-first search and right-wall following."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator

from labyrinth.maze import CellType, Connection, Maze, Node


class Direction(enum.IntEnum):
    """Compass directions in clockwise order."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    def turn_right(self) -> Direction:
        return Direction((self + 1) % 4)

    def turn_left(self) -> Direction:
        return Direction((self + 3) % 4)


@dataclass(frozen=True)
class Step:
    """One position reached during a traversal, with the heading used to get there."""

    position: tuple[int, int]
    direction: Direction
    found: bool = False


def get_connection(node: Node, direction: Direction) -> Connection:
    """Return the node's connection in the given direction."""
    if direction is Direction.UP:
        return node.up
    if direction is Direction.RIGHT:
        return node.right
    if direction is Direction.DOWN:
        return node.down
    return node.left


def _passable(connection: Connection) -> bool:
    return (
        connection.neighbor is not None
        and connection.wall is not None
        and connection.wall.type is CellType.CELL
    )


def right_wall_hugging(maze: Maze) -> Iterator[Step]:
    """Follow the right-hand wall from (1, 1) towards the bottom-right cell.

    Visited flags are reset first. Each position is yielded as it is reached;
    the last step carries ``found=True`` when the destination was reached.
    If the walk starts repeating itself the destination is unreachable and the
    generator stops without a found step.
    """
    if maze.rows < 3 or maze.columns < 3:
        raise ValueError(f"maze must be at least 3x3, got {maze.rows}x{maze.columns}")
    maze.reset_visited()
    node = maze[1, 1]
    dest = maze[maze.rows - 2, maze.columns - 2]
    direction = Direction.RIGHT
    seen: set[tuple[int, int, Direction]] = set()

    while node is not dest:
        state = (node.row, node.column, direction)
        if state in seen:
            return
        seen.add(state)
        node.visited = True
        yield Step((node.row, node.column), direction)

        right = direction.turn_right()
        connection = get_connection(node, right)
        if _passable(connection) and connection.neighbor is not None:
            direction = right
            node = connection.neighbor
            continue
        connection = get_connection(node, direction)
        if _passable(connection) and connection.neighbor is not None:
            node = connection.neighbor
        else:
            direction = direction.turn_left()

    node.visited = True
    yield Step((node.row, node.column), direction, found=True)


def dfs_traverse(
    maze: Maze, start: tuple[int, int], dest: tuple[int, int]
) -> Iterator[Step]:
    """Depth-first search from ``start`` to ``dest``, trying UP, RIGHT, DOWN, LEFT in turn.

    Visited flags are not reset; already visited cells are never entered.
    The search stops at the first step that reaches ``dest`` (``found=True``).
    """
    start_node = maze[start]
    dest_node = maze[dest]

    def visit(node: Node, direction: Direction) -> Step:
        node.visited = True
        return Step((node.row, node.column), direction, node is dest_node)

    step = visit(start_node, Direction.UP)
    yield step
    if step.found:
        return

    stack: list[tuple[Node, Iterator[Direction]]] = [(start_node, iter(Direction))]
    while stack:
        node, directions = stack[-1]
        direction = next(directions, None)
        if direction is None:
            stack.pop()
            continue
        connection = get_connection(node, direction)
        neighbor = connection.neighbor
        if _passable(connection) and neighbor is not None and not neighbor.visited:
            step = visit(neighbor, direction)
            yield step
            if step.found:
                return
            stack.append((neighbor, iter(Direction)))