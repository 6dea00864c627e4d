"""Two-stack integer sorting with a fixed operation set, and a checker for operation sequences."""

__version__ = "1.0.0"
__all__ = ["stacks", "validation", "indexing", "sorting", "cli", "checker"]