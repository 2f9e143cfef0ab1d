"""Process execution capability for hooks and deploy."""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from monokit.helpers.helpers_logging import print_error


class CommandRunner(Protocol):
    """Run an external command and return its exit status."""

    def run(
        self,
        command: list[str],
        cwd: Path,
        env: dict[str, str] | None = None,
    ) -> int:
        ...


class SubprocessRunner:
    """Blocking subprocess runner; output is inherited from the terminal."""

    def run(
        self,
        command: list[str],
        cwd: Path,
        env: dict[str, str] | None = None,
    ) -> int:
        child_env = {**os.environ, **env} if env else None
        try:
            result = subprocess.run(command, cwd=cwd, env=child_env, check=False)
        except FileNotFoundError:
            print_error(f"{command[0]} command not found. Please install it.")
            return 1
        except OSError as e:
            print_error(f"Failed to run {command[0]}: {e}")
            return 1
        return result.returncode


@dataclass
class RecordedCommand:
    command: list[str]
    cwd: Path
    env: dict[str, str] | None


@dataclass
class RecordingRunner:
    """Test runner: records invocations and returns canned exit codes.

    ``exit_codes`` maps the first two command tokens joined by a space
    (e.g. ``"go mod"``) or the bare executable to an exit status.
    """

    exit_codes: dict[str, int] = field(default_factory=dict)
    calls: list[RecordedCommand] = field(default_factory=list)

    def run(
        self,
        command: list[str],
        cwd: Path,
        env: dict[str, str] | None = None,
    ) -> int:
        self.calls.append(RecordedCommand(list(command), cwd, env))
        key = " ".join(command[:2])
        if key in self.exit_codes:
            return self.exit_codes[key]
        return self.exit_codes.get(command[0], 0)

    @property
    def commands(self) -> list[list[str]]:
        return [call.command for call in self.calls]
