# labyrinth

A terminal maze program. It generates mazes by randomized recursive
backtracking, saves them to a text file and loads them back. You can walk a
maze yourself, or watch it being solved by depth-first search or by
following the right-hand wall.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Running

    labyrinth [--file PATH] [--delay SECONDS] [--no-pause]

Options:

- `--file PATH`: the file used by the save and load entries (default
  `maze.txt`).
- `--delay SECONDS`: the time between frames when a solver is animated
  (default `0.1`).
- `--no-pause`: skip the short pauses between screens.

The command opens an interactive menu:

1. Generate a maze. You give an odd number of rows and an odd number of
   columns, each at least 3. You can give a seed; if you do not, the current
   time is used. The same seed and size always give the same maze. After
   drawing the maze, the program prints its size and the state its random
   number generator reached after carving; this is the value a later save
   writes as the seed.
2. Load the maze from the file.
3. Save the current maze to the file.
4. Walk the maze yourself. Use WASD, ZQSD (AZERTY) or the arrow keys to
   move, and `X` to quit. Other keys are ignored. You start at the entrance on
   the left edge; the walk ends when you reach the exit on the right edge.
5. Let the computer solve it, from the top-left cell to the bottom-right
   cell, either by depth-first search or by following the right-hand wall.
   Each step is drawn in turn. If no path is found, the program says so.
6. Exit.

The menu also ends when standard input is closed.

## File format

The first line holds the number of rows and columns. The second line holds
the seed. Then comes one line per row, with `#` for a wall and a space for
an open cell (so some lines end in spaces):

    5 5
    42
    #####
        #
    ### #
    #    
    #####

When loading, any character other than `#` or a space leaves that position
as the empty grid has it (open at odd row and odd column, a wall elsewhere),
and a file that ends early leaves the remaining positions that way too. A
file without the three header numbers is rejected with `ValueError`.

## Library use

```python
from labyrinth.maze import Maze, generate_maze
from labyrinth.storage import save_maze, load_maze
from labyrinth.solver import dfs_traverse, right_wall_hugging

maze, seed = generate_maze(11, 21, 42)
print(maze.render())

save_maze(maze, seed, "maze.txt")
loaded = load_maze("maze.txt")   # LoadedMaze(maze=..., seed=...)

loaded.maze.reset_visited()
for step in dfs_traverse(loaded.maze, (1, 1), (9, 19)):
    print(step.position, step.direction.name, step.found)
```

- `labyrinth.maze`: `Maze` (a grid of `Node` objects, indexed as
  `maze[row, column]`, with `generate`, `reset_visited`, `link_cells` and
  `render`), `generate_maze`, `CellType`, `Connection` and
  `LinearCongruentialGenerator`.
- `labyrinth.storage`: `save_maze`, `load_maze` and `LoadedMaze`.
- `labyrinth.solver`: `dfs_traverse` and `right_wall_hugging`, both
  generators of `Step` values (position, `Direction`, and whether the
  destination was reached), and `get_connection`. `dfs_traverse` does not
  reset visited flags and never enters an already visited cell;
  `right_wall_hugging` resets them and stops without a found step if its walk
  starts repeating.
- `labyrinth.display`: `render_with_path`, `apply_key`, `read_key`,
  `user_traverse`, `animate`, `clear_screen` and `menu_text`.
- `labyrinth.cli`: `main`, the menu the `labyrinth` command runs.

## Limitations

The menu text is in Bulgarian, and the status lines printed while walking or
solving a maze are partly in English. Only one maze is held at a time, and
saving and loading always use the single file given by `--file`.