"""Route a tokenized command to a builtin or an external program."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from jbshell.errors import CommandNotFoundError
from jbshell.runtime import telemetry

from .builtins import Builtin, ShellContext, run_builtin
from .external import resolve_executable, run_executable


class DispatchStatus(str, Enum):
    OK = "ok"
    NOOP = "noop"
    NOT_FOUND = "not_found"
    FAILED = "failed"
    EXIT = "exit"


@dataclass(slots=True)
class DispatchOutcome:
    status: DispatchStatus
    exit_code: Optional[int] = None
    message: Optional[str] = None


class Dispatcher:
    """Runs one command to completion; never raises for user mistakes."""

    def __init__(self, context: Optional[ShellContext] = None) -> None:
        self.context = context or ShellContext()
        self.logger_name = "jbshell.dispatch"

    def dispatch(self, command: str, args: List[str]) -> DispatchOutcome:
        if not command:
            return DispatchOutcome(status=DispatchStatus.NOOP)

        builtin = Builtin.lookup(command)
        if builtin is not None:
            return self._dispatch_builtin(builtin, args)
        return self._dispatch_external(command, args)

    def _dispatch_builtin(self, builtin: Builtin, args: List[str]) -> DispatchOutcome:
        with telemetry.span(
            "dispatch::builtin",
            logger_name=self.logger_name,
            component="dispatch",
            metadata={"builtin": builtin.value, "argc": len(args)},
        ):
            result = run_builtin(builtin, self.context, args)

        if result.output is not None:
            print(result.output, file=self.context.stdout)
            self.context.stdout.flush()
        if result.exit_code is not None:
            telemetry.record_event(
                "shell.exit",
                data={"code": result.exit_code},
                logger_name=self.logger_name,
            )
            return DispatchOutcome(
                status=DispatchStatus.EXIT, exit_code=result.exit_code
            )
        return DispatchOutcome(status=DispatchStatus.OK)

    def _dispatch_external(self, command: str, args: List[str]) -> DispatchOutcome:
        try:
            path = resolve_executable(command, search_path=self.context.search_path)
        except CommandNotFoundError as exc:
            return self._unknown_command(exc)

        # Anything we printed must reach the terminal before the child writes.
        self.context.stdout.flush()
        with telemetry.span(
            "dispatch::external",
            logger_name=self.logger_name,
            component="dispatch",
            metadata={"command": command, "path": path, "argc": len(args)},
        ) as handle:
            try:
                code = run_executable(path, command, args)
            except OSError as exc:
                message = f"{command}: {exc.strerror or exc}"
                handle.add_metadata("spawn_error", message)
                self.context.error(message)
                return DispatchOutcome(status=DispatchStatus.FAILED, message=message)
            handle.add_metadata("returncode", code)

        if code == 0:
            return DispatchOutcome(status=DispatchStatus.OK, exit_code=0)
        if code < 0:
            message = f"{command}: terminated by signal {-code}"
        else:
            message = f"{command}: exit status {code}"
        self.context.error(message)
        return DispatchOutcome(
            status=DispatchStatus.FAILED, exit_code=code, message=message
        )

    def _unknown_command(self, exc: CommandNotFoundError) -> DispatchOutcome:
        message = str(exc)
        telemetry.record_event(
            "command.not_found",
            level="warning",
            data={"command": exc.command},
            logger_name=self.logger_name,
        )
        self.context.error(message)
        return DispatchOutcome(status=DispatchStatus.NOT_FOUND, message=message)


__all__ = ["DispatchOutcome", "DispatchStatus", "Dispatcher"]
