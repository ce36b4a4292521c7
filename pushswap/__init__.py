"""Sort integers with two stacks and a fixed set of moves, with small string, output and buffer helpers."""

__version__ = "1.0.0"