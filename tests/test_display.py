import io

from labyrinth.display import (
    animate,
    apply_key,
    clear_screen,
    menu_text,
    render_with_path,
    user_traverse,
)
from labyrinth.maze import CellType, Maze, generate_maze
from labyrinth.solver import dfs_traverse


def _walkable_row():
    maze = Maze(3, 5)
    for column in range(5):
        maze[1, column].type = CellType.CELL
    maze.link_cells()
    return maze


def test_clear_screen_sequence():
    out = io.StringIO()
    clear_screen(out)
    assert out.getvalue() == "\033[2J\033[H\n\n"


def test_menu_text_lists_options():
    text = menu_text()
    assert "=== МЕНЮ ===" in text
    assert "1. Генериране на лабиринт" in text
    assert "6. Изход" in text
    assert text.endswith("Избор: ")


def test_render_with_player():
    maze = Maze(3, 3)
    assert render_with_path(maze, (1, 1)) == "⬜ ⬜ ⬜ \n⬜ 🟢 ⬜ \n⬜ ⬜ ⬜ \n"


def test_render_visited_and_unvisited():
    maze = _walkable_row()
    maze[1, 1].visited = True
    lines = render_with_path(maze, (1, 0)).splitlines()
    assert lines[1] == "🟢 ⭕ ⬛ ⬛ ⬛ "
    assert len(lines) == 3


def test_apply_key_moves_and_marks_visited():
    maze = _walkable_row()
    assert apply_key(maze, (1, 1), "d") == (1, 2)
    assert maze[1, 2].visited
    assert apply_key(maze, (1, 2), "q") == (1, 1)
    assert apply_key(maze, (1, 2), "left") == (1, 1)
    assert apply_key(maze, (1, 2), "right") == (1, 3)


def test_apply_key_blocked_and_unknown():
    maze = _walkable_row()
    assert apply_key(maze, (1, 1), "w") == (1, 1)
    assert apply_key(maze, (1, 1), "Z") == (1, 1)
    assert apply_key(maze, (1, 1), "down") == (1, 1)
    assert apply_key(maze, (1, 0), "a") == (1, 0)
    assert apply_key(maze, (1, 4), "D") == (1, 4)
    assert apply_key(maze, (1, 1), "?") == (1, 1)
    assert not maze[0, 1].visited


def test_apply_key_quit():
    maze = _walkable_row()
    assert apply_key(maze, (1, 1), "x") is None
    assert apply_key(maze, (1, 1), "X") is None


def test_user_traverse_reaches_exit():
    maze = _walkable_row()
    keys = iter("dddd")
    out = io.StringIO()
    assert user_traverse(maze, lambda: next(keys), out) is True
    assert "Достигна края на лабиринта!" in out.getvalue()
    assert all(maze[1, c].visited for c in range(5))


def test_user_traverse_quit():
    maze = _walkable_row()
    keys = iter(["d", "x"])
    out = io.StringIO()
    assert user_traverse(maze, lambda: next(keys), out) is False
    assert "Достигна края" not in out.getvalue()
    assert maze[1, 1].visited and not maze[1, 2].visited


def test_user_traverse_on_generated_maze_with_bumps():
    maze, _ = generate_maze(3, 5, 11)
    keys = iter(["w", "right", "d", "s", "d", "d", "d"])
    out = io.StringIO()
    assert user_traverse(maze, lambda: next(keys), out) is True
    assert "🟢" in out.getvalue()


def test_animate_reports_found():
    maze, _ = generate_maze(7, 7, 8)
    maze.reset_visited()
    out = io.StringIO()
    found = animate(maze, dfs_traverse(maze, (1, 1), (5, 5)), out, 0)
    assert found is True
    text = out.getvalue()
    assert text.endswith("Path found!\n")
    assert text.count("\033[2J") >= 1


def test_animate_not_found():
    maze = Maze(3, 5)
    out = io.StringIO()
    assert animate(maze, dfs_traverse(maze, (1, 1), (1, 3)), out, 0) is False
    assert "Path found!" not in out.getvalue()