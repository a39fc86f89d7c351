import pytest

from labyrinth.maze import CellType, Maze, generate_maze
from labyrinth.storage import LoadedMaze, load_maze, save_maze


def _types(maze):
    return [[node.type for node in row] for row in maze.grid]


def test_save_writes_header_and_rows(tmp_path):
    path = tmp_path / "maze.txt"
    save_maze(Maze(3, 3), 42, path)
    assert path.read_text(encoding="utf-8") == "3 3\n42\n###\n# #\n###\n"


def test_round_trip_generated_maze(tmp_path):
    maze, final_seed = generate_maze(11, 15, 4242)
    path = tmp_path / "maze.txt"
    save_maze(maze, final_seed, path)
    loaded = load_maze(path)
    assert isinstance(loaded, LoadedMaze)
    assert loaded.seed == final_seed
    assert (loaded.maze.rows, loaded.maze.columns) == (11, 15)
    assert _types(loaded.maze) == _types(maze)
    assert loaded.maze.render() == maze.render()


def test_loaded_maze_is_unvisited(tmp_path):
    maze, seed = generate_maze(7, 7, 8)
    path = tmp_path / "maze.txt"
    save_maze(maze, seed, path)
    loaded = load_maze(path).maze
    assert not any(node.visited for node in loaded)


def test_loaded_maze_links_cells(tmp_path):
    maze, seed = generate_maze(7, 9, 17)
    path = tmp_path / "maze.txt"
    save_maze(maze, seed, path)
    loaded = load_maze(path).maze
    centre = loaded[3, 3]
    assert centre.up.neighbor is loaded[1, 3]
    assert centre.up.wall is loaded[2, 3]
    assert centre.right.neighbor is loaded[3, 5]
    assert centre.right.wall is loaded[3, 4]
    assert loaded[1, 1].up.neighbor is None


def test_seed_reduced_to_32_bits_on_save(tmp_path):
    path = tmp_path / "maze.txt"
    save_maze(Maze(3, 3), 2**32 + 9, path)
    assert load_maze(path).seed == 9


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_maze(tmp_path / "absent.txt")


@pytest.mark.parametrize("content", ["", "hello\n", "3\n", "3 3\n"])
def test_malformed_header_raises(tmp_path, content):
    path = tmp_path / "maze.txt"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError):
        load_maze(path)


def test_non_positive_dimensions_raise(tmp_path):
    path = tmp_path / "maze.txt"
    path.write_text("0 3\n1\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_maze(path)


def test_short_body_keeps_default_types(tmp_path):
    path = tmp_path / "maze.txt"
    path.write_text("3 3\n1\n###\n", encoding="utf-8")
    loaded = load_maze(path).maze
    assert loaded[1, 1].type is CellType.CELL
    assert loaded[1, 0].type is CellType.WALL
    assert loaded[2, 2].type is CellType.WALL


def test_unknown_characters_keep_default_types(tmp_path):
    path = tmp_path / "maze.txt"
    path.write_text("3 3\n1\n#X#\n ?#\n###\n", encoding="utf-8")
    loaded = load_maze(path).maze
    assert loaded[0, 1].type is CellType.WALL
    assert loaded[1, 0].type is CellType.CELL
    assert loaded[1, 1].type is CellType.CELL


def test_windows_line_endings_load(tmp_path):
    maze, seed = generate_maze(5, 7, 3)
    path = tmp_path / "maze.txt"
    save_maze(maze, seed, path)
    unix = path.read_bytes()
    path.write_bytes(unix.replace(b"\n", b"\r\n"))
    loaded = load_maze(path)
    assert loaded.seed == seed
    assert _types(loaded.maze) == _types(maze)