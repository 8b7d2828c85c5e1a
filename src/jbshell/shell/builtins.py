"""Commands implemented inside the shell process."""

from __future__ import annotations

import os
import re
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, TextIO

from jbshell.errors import CommandNotFoundError

from .external import resolve_executable

_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)


class Builtin(str, Enum):
    TYPE = "type"
    EXIT = "exit"
    ECHO = "echo"
    PWD = "pwd"
    CD = "cd"

    @classmethod
    def lookup(cls, name: str) -> Optional["Builtin"]:
        try:
            return cls(name)
        except ValueError:
            return None


@dataclass(slots=True)
class ShellContext:
    """Streams and lookup settings shared by builtins and the dispatcher."""

    stdout: TextIO = field(default_factory=lambda: sys.stdout)
    stderr: TextIO = field(default_factory=lambda: sys.stderr)
    search_path: Optional[str] = None

    def error(self, message: str) -> None:
        print(message, file=self.stderr)
        self.stderr.flush()


@dataclass(slots=True)
class BuiltinResult:
    """What a builtin wants printed, and whether the shell should exit."""

    output: Optional[str] = None
    exit_code: Optional[int] = None


BuiltinHandler = Callable[[ShellContext, List[str]], BuiltinResult]


def _handle_type(context: ShellContext, args: List[str]) -> BuiltinResult:
    if len(args) != 1:
        return BuiltinResult("usage: type [command]")
    name = args[0]
    if Builtin.lookup(name) is not None:
        return BuiltinResult(f"{name} is a shell builtin command")
    try:
        path = resolve_executable(name, search_path=context.search_path)
    except CommandNotFoundError:
        return BuiltinResult(f"{name}: is not recognised")
    return BuiltinResult(f"{name} is {path}")


def _handle_exit(context: ShellContext, args: List[str]) -> BuiltinResult:
    # Only a lone argument is read as the status.
    if len(args) != 1:
        return BuiltinResult(exit_code=0)
    if not _INTEGER.fullmatch(args[0]):
        context.error("invalid argument passed, argument must be an integer")
        return BuiltinResult(exit_code=1)
    return BuiltinResult(exit_code=int(args[0]))


def _handle_echo(context: ShellContext, args: List[str]) -> BuiltinResult:
    return BuiltinResult(" ".join(args))


def _handle_pwd(context: ShellContext, args: List[str]) -> BuiltinResult:
    if args:
        return BuiltinResult("usage: pwd\t(no arguments)")
    try:
        return BuiltinResult(os.getcwd())
    except OSError as exc:
        context.error(f"Could not get current directory: {exc.strerror or exc}")
        return BuiltinResult("")


def _handle_cd(context: ShellContext, args: List[str]) -> BuiltinResult:
    if len(args) != 1:
        return BuiltinResult("usage: cd [path]")
    target = args[0]
    destination = os.environ.get("HOME", "") if target == "~" else target
    try:
        os.chdir(destination)
    except OSError as exc:
        context.error(
            f"Could not change directory to: {target} {exc.strerror or exc}"
        )
    return BuiltinResult()


_BUILTIN_HANDLERS: Dict[Builtin, BuiltinHandler] = {
    Builtin.TYPE: _handle_type,
    Builtin.EXIT: _handle_exit,
    Builtin.ECHO: _handle_echo,
    Builtin.PWD: _handle_pwd,
    Builtin.CD: _handle_cd,
}


def run_builtin(
    builtin: Builtin, context: ShellContext, args: List[str]
) -> BuiltinResult:
    return _BUILTIN_HANDLERS[builtin](context, args)


__all__ = [
    "Builtin",
    "BuiltinHandler",
    "BuiltinResult",
    "ShellContext",
    "run_builtin",
]
