"""Two-stack sorting with push, swap and rotate operations, and a checker for the result."""

__version__ = "1.0.0"