"""The read-eval-print loop tying the session, tokenizer and dispatcher."""

from __future__ import annotations

from typing import Optional

from jbshell.config import ShellConfig
from jbshell.editor import ReadOutcome
from jbshell.parser import tokenize
from jbshell.runtime import telemetry
from jbshell.terminal import RawTerminalSession

from .builtins import ShellContext
from .dispatcher import Dispatcher, DispatchStatus


class Shell:
    """Interactive shell.

    Each cycle prints the prompt, reads one edited line, and runs it to
    completion before the next prompt appears.

    Example:
        >>> shell = Shell(ShellConfig.from_env())
        >>> raise SystemExit(shell.run())
    """

    def __init__(
        self,
        config: Optional[ShellConfig] = None,
        *,
        context: Optional[ShellContext] = None,
        session: Optional[RawTerminalSession] = None,
        dispatcher: Optional[Dispatcher] = None,
    ) -> None:
        self.config = config or ShellConfig()
        self.context = context or ShellContext()
        self.session = session or RawTerminalSession(
            prompt=self.config.prompt, stdout=self.context.stdout
        )
        self.dispatcher = dispatcher or Dispatcher(self.context)
        self.logger_name = "jbshell.shell"

    def run(self) -> int:
        """Run cycles until ``exit`` or the end of input; return the status."""

        telemetry.record_event(
            "shell.start",
            data={"prompt": self.config.prompt},
            logger_name=self.logger_name,
        )
        while True:
            status = self.run_once()
            if status is not None:
                telemetry.record_event(
                    "shell.stop", data={"status": status}, logger_name=self.logger_name
                )
                return status

    def run_once(self) -> Optional[int]:
        """Run a single cycle; return an exit status once the shell should stop."""

        result = self.session.read_line()

        if result.outcome is ReadOutcome.INTERRUPTED:
            self._newline()
            return None

        if result.outcome is ReadOutcome.IO_ERROR:
            error = result.error
            if error is not None and not error.eof:
                self.context.error(f"jbshell: terminal read failed: {error}")
                return 1
            self._newline()
            return 0

        command, args = tokenize(result.text)
        outcome = self.dispatcher.dispatch(command, args)
        if outcome.status is DispatchStatus.EXIT:
            return outcome.exit_code or 0
        return None

    def _newline(self) -> None:
        self.context.stdout.write("\n")
        self.context.stdout.flush()


__all__ = ["Shell"]
