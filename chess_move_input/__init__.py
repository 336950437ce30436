"""Core package for resolving typed chess moves against a board."""

__all__ = [
    "board",
    "command",
    "config",
    "exceptions",
    "matching",
    "notation",
    "resolver",
    "types",
]
