"""Interactive menu for generating, storing and traversing mazes."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Callable

from labyrinth.display import animate, clear_screen, menu_text, read_key, user_traverse
from labyrinth.maze import Maze, generate_maze
from labyrinth.solver import dfs_traverse, right_wall_hugging
from labyrinth.storage import load_maze, save_maze


def _read_int(prompt: str) -> int | None:
    try:
        return int(input(prompt).strip())
    except ValueError:
        return None


def _read_odd(prompt: str) -> int:
    while True:
        value = _read_int(prompt)
        if value is not None and value % 2 == 1 and value >= 3:
            return value


class _Session:
    def __init__(self, path: str, delay: float, pause: Callable[[float], None]) -> None:
        self.path = path
        self.delay = delay
        self.pause = pause
        self.maze: Maze | None = None
        self.seed = 0

    def generate(self) -> None:
        rows = _read_odd("Въведете брой редове (нечетно число): ")
        columns = _read_odd("Въведете брой колони (нечетно число): ")
        answer = ""
        while answer not in ("y", "Y", "n", "N"):
            answer = input(
                "Искате ли да въведете специфичен seed?\n"
                "Ако не искате ще се генерира случаен такъв (y-да,n-не): "
            ).strip()[:1]
        if answer in ("y", "Y"):
            seed = None
            while seed is None:
                seed = _read_int("Въведете стойността на seed: ")
        else:
            seed = int(time.time())
        print()
        self.maze, self.seed = generate_maze(rows, columns, seed % (1 << 32))
        sys.stdout.write(self.maze.render())
        print(f"\nРазмери: {columns}x{rows}", end="")
        print(f"\nSeed: {self.seed}", end="")

    def load(self) -> None:
        self.maze = None
        try:
            loaded = load_maze(self.path)
        except (OSError, ValueError) as exc:
            print(f"Cannot open file for reading: {exc}", file=sys.stderr)
            print(f"Cannot open file for reading: {exc}")
            return
        self.maze, self.seed = loaded.maze, loaded.seed
        print("Лабиринтът е зареден успешно.")
        sys.stdout.write(self.maze.render())

    def save(self) -> None:
        if self.maze is None:
            print("Няма лабиринт за запис.")
            return
        save_maze(self.maze, self.seed, self.path)
        print("Лабиринтът е записан успешно.")

    def walk(self) -> None:
        if self.maze is None:
            print("Първо генерирай лабиринт.")
            return
        user_traverse(self.maze, read_key, sys.stdout)

    def solve(self) -> None:
        maze = self.maze
        if maze is None:
            print("Първо генерирай лабиринт.")
            return
        maze.reset_visited()
        print("Изберете метод за обхождане:")
        print("1. DFS (Дълбочинно първо търсене)")
        print("2. Обхождане с дясна стена (Right-Wall Hugging)")
        choice = _read_int("Ваш избор: ")
        if choice == 1:
            steps = dfs_traverse(maze, (1, 1), (maze.rows - 2, maze.columns - 2))
            if animate(maze, steps, sys.stdout, self.delay):
                self.pause(2)
            else:
                print("Пътят не е намерен.")
                self.pause(2)
        elif choice == 2:
            if animate(maze, right_wall_hugging(maze), sys.stdout, self.delay):
                self.pause(2)
            else:
                print("Пътят не е намерен.")
                self.pause(2)
        else:
            print("Невалиден избор.")
            self.pause(2)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive maze menu until the user chooses to exit."""
    parser = argparse.ArgumentParser(
        prog="labyrinth", description="Generate, store and traverse mazes."
    )
    parser.add_argument("--file", default="maze.txt", help="file used for saving and loading")
    parser.add_argument(
        "--delay", type=float, default=0.1, help="seconds between animation frames"
    )
    parser.add_argument(
        "--no-pause", action="store_true", help="do not pause between screens"
    )
    args = parser.parse_args(argv)

    pause: Callable[[float], None] = (lambda seconds: None) if args.no_pause else time.sleep
    session = _Session(args.file, args.delay, pause)
    actions: dict[int, Callable[[], None]] = {
        1: session.generate,
        2: session.load,
        3: session.save,
        4: session.walk,
        5: session.solve,
    }

    try:
        while True:
            pause(1)
            clear_screen(sys.stdout)
            choice = _read_int(menu_text())
            if choice == 6:
                print("Изход...")
                return 0
            action = actions.get(choice) if choice is not None else None
            if action is None:
                print("Невалиден избор. Опитайте отново.")
            else:
                action()
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())