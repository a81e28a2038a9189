"""Core business logic layer.

Subpackages:
- shopping: building the grocery list from the week board
- board: planner service, debounced auto-save, read-only views
"""
__all__ = ["shopping", "board"]
