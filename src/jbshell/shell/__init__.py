"""Builtins, external command execution, dispatch and the shell loop."""

from .builtins import Builtin, BuiltinResult, ShellContext, run_builtin
from .dispatcher import DispatchOutcome, DispatchStatus, Dispatcher
from .external import resolve_executable, run_executable
from .repl import Shell

__all__ = [
    "Builtin",
    "BuiltinResult",
    "DispatchOutcome",
    "DispatchStatus",
    "Dispatcher",
    "Shell",
    "ShellContext",
    "resolve_executable",
    "run_builtin",
    "run_executable",
]
