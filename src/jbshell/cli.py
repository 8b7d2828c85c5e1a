"""Console entry point for the interactive shell."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from jbshell.config import ShellConfig
from jbshell.runtime import telemetry
from jbshell.shell import Shell


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="jbshell", description="Run the interactive shell."
    )
    parser.add_argument(
        "--prompt",
        default=None,
        help="Prompt printed before each line (env: JBSHELL_PROMPT)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Minimum telemetry level, e.g. DEBUG (env: JBSHELL_LOG_LEVEL)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write telemetry to this file (env: JBSHELL_LOG_FILE)",
    )
    parser.add_argument(
        "--log-preset",
        choices=("development", "production", "performance"),
        default=None,
        help="Named telemetry preset (env: JBSHELL_LOG_PRESET)",
    )
    return parser.parse_args(argv)


def build_config(argv: Optional[Sequence[str]] = None) -> ShellConfig:
    args = _parse_args(argv)
    return ShellConfig.from_env().with_overrides(
        prompt=args.prompt,
        log_level=args.log_level,
        log_file=args.log_file,
        log_preset=args.log_preset,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    config = build_config(argv)
    telemetry.configure_for(config)
    return Shell(config).run()


if __name__ == "__main__":  # pragma: no cover - manual run
    raise SystemExit(main())
