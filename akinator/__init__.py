"""A console guessing game built on a self-extending question tree."""

__version__ = "0.1.0"
__all__ = ["errors", "stack", "tree", "treefile", "dump", "game"]