"""Terminal drawing, keyboard input and interactive traversal of a maze."""

from __future__ import annotations

import os
import sys
import time
from typing import Callable, Iterable, TextIO

from labyrinth.maze import CellType, Maze
from labyrinth.solver import Step

_PLAYER_GLYPH = "🟢 "
_WALL_GLYPH = "⬜ "
_VISITED_GLYPH = "⭕ "
_UNVISITED_GLYPH = "⬛ "

KEY_UP = "up"
KEY_DOWN = "down"
KEY_LEFT = "left"
KEY_RIGHT = "right"

_MOVES = {
    "w": (-1, 0), "W": (-1, 0), "z": (-1, 0), "Z": (-1, 0), KEY_UP: (-1, 0),
    "s": (1, 0), "S": (1, 0), KEY_DOWN: (1, 0),
    "a": (0, -1), "A": (0, -1), "q": (0, -1), "Q": (0, -1), KEY_LEFT: (0, -1),
    "d": (0, 1), "D": (0, 1), KEY_RIGHT: (0, 1),
}
_QUIT_KEYS = frozenset("xX")

_WINDOWS_ARROWS = {"H": KEY_UP, "P": KEY_DOWN, "K": KEY_LEFT, "M": KEY_RIGHT}
_ANSI_ARROWS = {"[A": KEY_UP, "[B": KEY_DOWN, "[D": KEY_LEFT, "[C": KEY_RIGHT}

_MENU = (
    "\n=== МЕНЮ ===\n"
    "1. Генериране на лабиринт\n"
    "2. Четене от файл\n"
    "3. Записване във файл\n"
    "4. Обхождане от потребителя\n"
    "5. Обхождане от компютъра\n"
    "6. Изход\n"
    "Избор: "
)


def clear_screen(out: TextIO) -> None:
    """Clear the terminal and move the cursor home, leaving two blank lines on top."""
    out.write("\033[2J\033[H")
    out.write("\n\n")


def menu_text() -> str:
    """Return the main menu, ending with the choice prompt."""
    return _MENU


def render_with_path(maze: Maze, player: tuple[int, int] | None) -> str:
    """Draw the maze with the player, walls, visited and unvisited cells."""

    def glyph(row: int, column: int) -> str:
        node = maze.grid[row][column]
        if (row, column) == player:
            return _PLAYER_GLYPH
        if node.type is CellType.WALL:
            return _WALL_GLYPH
        return _VISITED_GLYPH if node.visited else _UNVISITED_GLYPH

    return "".join(
        "".join(glyph(r, c) for c in range(maze.columns)) + "\n"
        for r in range(maze.rows)
    )


def apply_key(
    maze: Maze, position: tuple[int, int], key: str
) -> tuple[int, int] | None:
    """Return the position after pressing ``key``, or None if the key quits.

    Moves only onto walkable cells inside the grid, marking them visited.
    Unknown keys leave the position unchanged.
    """
    if key in _QUIT_KEYS:
        return None
    move = _MOVES.get(key)
    if move is None:
        return position
    row, column = position[0] + move[0], position[1] + move[1]
    if 0 <= row < maze.rows and 0 <= column < maze.columns:
        node = maze.grid[row][column]
        if node.type is CellType.CELL:
            node.visited = True
            return row, column
    return position


def read_key() -> str:
    """Read one key press from the terminal; arrow keys come back as 'up', 'down', 'left', 'right'."""
    if os.name == "nt":
        import msvcrt

        ch = msvcrt.getwch()
        if ch in ("\x00", "\xe0"):
            return _WINDOWS_ARROWS.get(msvcrt.getwch(), "")
        return ch

    import termios
    import tty

    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
        if ch == "\x1b":
            return _ANSI_ARROWS.get(sys.stdin.read(2), "")
        return ch
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def user_traverse(maze: Maze, read_key: Callable[[], str], out: TextIO) -> bool:
    """Let the user walk from the entrance to the exit; return True if the exit was reached."""
    maze.reset_visited()
    position = (1, 0)
    end = (maze.rows - 2, maze.columns - 1)
    maze[position].visited = True

    while position != end:
        clear_screen(out)
        out.write(render_with_path(maze, position))
        out.write("WASD / ZQSD / Arrow keys (←↑↓→) to move. Press 'X' to quit.\n")
        out.flush()
        moved = apply_key(maze, position, read_key())
        if moved is None:
            return False
        position = moved

    out.write(render_with_path(maze, position))
    out.write("Достигна края на лабиринта!\n")
    return True


def animate(maze: Maze, steps: Iterable[Step], out: TextIO, delay: float = 0.1) -> bool:
    """Draw each traversal step in turn; return True if a step reached the destination."""
    found = False
    for step in steps:
        clear_screen(out)
        out.write(render_with_path(maze, step.position))
        out.flush()
        if step.found:
            found = True
            out.write("Path found!\n")
        elif delay > 0:
            time.sleep(delay)
    return found