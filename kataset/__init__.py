"""Solutions to classic array, string, integer and binary-tree puzzles."""

__version__ = "0.1.0"
__all__ = ["arrays", "integers", "strings", "trees"]