"""Shared fixtures for the monokit test suite.

Provides an in-memory workspace factory (no disk access), a recording
command runner, and an on-disk ``pnpm_workspace`` that the CLI tests run
inside via ``chdir``.
"""

from __future__ import annotations

import json
import os
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from monokit.helpers.command_runner import RecordingRunner
from monokit.helpers.filesystem import MemoryFileSystem
from monokit.helpers.project_config import Settings

MakeMemoryWorkspace = Callable[..., MemoryFileSystem]

PNPM_WORKSPACE_YAML = 'packages:\n  - "apps/*"\n  - "packages/*"\n'

ROOT_PACKAGE_JSON = json.dumps(
    {"name": "acme-go", "private": True, "packageManager": "pnpm@9.1.0"},
    indent=2,
)


@pytest.fixture()
def make_memory_workspace() -> MakeMemoryWorkspace:
    """Return a factory for in-memory pnpm workspaces.

    Usage::

        fs = make_memory_workspace(modules=["apps/gateway", "packages/logger"])
    """

    def _make(
        modules: list[str] | None = None,
        extra_files: dict[str, str] | None = None,
        pnpm_workspace: str | None = PNPM_WORKSPACE_YAML,
    ) -> MemoryFileSystem:
        files: dict[str, str] = {"package.json": ROOT_PACKAGE_JSON}
        if pnpm_workspace is not None:
            files["pnpm-workspace.yaml"] = pnpm_workspace
        for module in modules or []:
            files[f"{module}/go.mod"] = f"module acme-go/{module}\n\ngo 1.23\n"
        files.update(extra_files or {})
        return MemoryFileSystem(files)

    return _make


@pytest.fixture()
def settings() -> Settings:
    return Settings(root=Path("/workspace"), module_prefix="acme-go")


@pytest.fixture()
def recording_runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture()
def pnpm_workspace(tmp_path: Path) -> Iterator[Path]:
    """Create an on-disk pnpm workspace with one app and one package, cd into it.

    Hooks are disabled through the environment so CLI tests never shell out.
    """
    (tmp_path / "package.json").write_text(ROOT_PACKAGE_JSON)
    (tmp_path / "pnpm-workspace.yaml").write_text(PNPM_WORKSPACE_YAML)
    for module in ("apps/gateway", "packages/logger"):
        module_dir = tmp_path / module
        module_dir.mkdir(parents=True)
        (module_dir / "go.mod").write_text(f"module acme-go/{module}\n\ngo 1.23\n")

    original_cwd = Path.cwd()
    os.chdir(tmp_path)
    previous = os.environ.get("MONOKIT_SKIP_HOOKS")
    os.environ["MONOKIT_SKIP_HOOKS"] = "1"
    try:
        yield tmp_path
    finally:
        os.chdir(original_cwd)
        if previous is None:
            os.environ.pop("MONOKIT_SKIP_HOOKS", None)
        else:
            os.environ["MONOKIT_SKIP_HOOKS"] = previous
