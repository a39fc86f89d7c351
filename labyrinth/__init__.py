"""Generate, store, solve and walk grid mazes in the terminal."""

__version__ = "0.1.0"
__all__ = ["cli", "display", "maze", "solver", "storage"]