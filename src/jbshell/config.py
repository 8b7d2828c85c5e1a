"""Shell configuration sourced from ``JBSHELL_*`` variables and CLI flags."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

ENV_PREFIX = "JBSHELL_"
DEFAULT_PROMPT = "JBShell * > "


@dataclass(frozen=True, slots=True)
class ShellConfig:
    prompt: str = DEFAULT_PROMPT
    log_level: Optional[str] = None
    log_file: Optional[str] = None
    log_preset: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ShellConfig":
        env = os.environ if environ is None else environ
        return cls(
            prompt=env.get(f"{ENV_PREFIX}PROMPT", DEFAULT_PROMPT),
            log_level=env.get(f"{ENV_PREFIX}LOG_LEVEL") or None,
            log_file=env.get(f"{ENV_PREFIX}LOG_FILE") or None,
            log_preset=env.get(f"{ENV_PREFIX}LOG_PRESET") or None,
        )

    def with_overrides(self, **changes: Optional[str]) -> "ShellConfig":
        """Return a copy with every non-``None`` value in ``changes`` applied."""

        applied = {key: value for key, value in changes.items() if value is not None}
        if not applied:
            return self
        return replace(self, **applied)


__all__ = ["DEFAULT_PROMPT", "ENV_PREFIX", "ShellConfig"]
