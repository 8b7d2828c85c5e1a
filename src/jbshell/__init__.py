"""Interactive shell with a raw-mode line editor."""

__all__ = [
    "cli",
    "config",
    "editor",
    "errors",
    "keys",
    "parser",
    "runtime",
    "shell",
    "terminal",
]

__version__ = "0.1.0"
