"""Per-invocation wiring: workspace root, filesystem, settings, command runner."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from monokit.helpers.command_runner import CommandRunner, SubprocessRunner
from monokit.helpers.filesystem import FileSystem, LocalFileSystem
from monokit.helpers.project_config import Settings, find_workspace_root, load_settings


@dataclass(frozen=True)
class Runtime:
    settings: Settings
    fs: FileSystem
    runner: CommandRunner


def load_runtime(start: Path | None = None) -> Runtime:
    """Build the runtime once at command start.

    Raises:
        ConfigError: If monokit.yaml is malformed
    """
    root = find_workspace_root(start)
    fs = LocalFileSystem(root)
    return Runtime(settings=load_settings(root, fs), fs=fs, runner=SubprocessRunner())
