"""Classic algorithms and data structures: trees, lists, caches, containers and more."""

__version__ = "0.1.0"