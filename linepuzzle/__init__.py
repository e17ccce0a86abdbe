"""
Line Puzzle Package

Validates paths drawn on node-and-edge puzzle boards against placed rule
elements, including:

- Puzzle graph validation
- Outer boundary tracing (with corner synthesis)
- Region extraction from a candidate path
- Hexagon / square / star element checks
- Puzzle file loading and debug visualization
"""
__all__ = [
    "config",
    "errors",
    "main",
    "engine",
    "models",
    "utils",
    "visualization",
]
