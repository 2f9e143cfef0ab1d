"""Workspace declaration reading and glob resolution.

Reads the package manager's workspace configuration (``pnpm-workspace.yaml``
or ``package.json`` workspaces) and turns its globs into scan roots::

    packages:
      - "apps/*"
      - "packages/*"

resolves to ``["apps", "packages"]``.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, cast

from monokit.core.errors import ConfigError
from monokit.helpers.filesystem import FileSystem
from monokit.helpers.helpers_logging import print_info, print_warning

PACKAGE_JSON = "package.json"
PNPM_WORKSPACE = "pnpm-workspace.yaml"

# Lock files checked in order when package.json has no packageManager field
_LOCKFILES: tuple[tuple[str, str], ...] = (
    ("pnpm-lock.yaml", "pnpm"),
    ("yarn.lock", "yarn"),
    ("package-lock.json", "npm"),
)

# Matches: - "apps/*"  or  - 'apps/*'  or  - apps/*
_PNPM_GLOB_RE = re.compile(r"""^-\s+["']?([^"']+)["']?\s*$""")
_TRAILING_WILDCARD_RE = re.compile(r"/\*\*?$")


class PackageManager(str, Enum):
    PNPM = "pnpm"
    YARN = "yarn"
    NPM = "npm"
    UNKNOWN = "unknown"

    @classmethod
    def from_name(cls, name: str) -> PackageManager:
        for member in cls:
            if member.value == name:
                return member
        return cls.UNKNOWN


@dataclass(frozen=True)
class WorkspaceConfig:
    """Normalized workspace declaration: detected manager and its globs."""

    package_manager: PackageManager
    globs: tuple[str, ...]


def _load_package_json(fs: FileSystem) -> dict[str, Any] | None:
    if not fs.is_file(PACKAGE_JSON):
        return None
    try:
        data: object = json.loads(fs.read_text(PACKAGE_JSON))
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {PACKAGE_JSON}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid {PACKAGE_JSON}: expected a JSON object")
    return cast(dict[str, Any], data)


def detect_package_manager(fs: FileSystem) -> PackageManager:
    """Detect the package manager from the root package.json.

    The ``packageManager`` field wins (``pnpm@9.1.0`` -> pnpm); otherwise the
    first lock file found decides. No package.json means unknown.
    """
    pkg_json = _load_package_json(fs)
    if pkg_json is None:
        return PackageManager.UNKNOWN

    declared = pkg_json.get("packageManager")
    if isinstance(declared, str) and declared:
        return PackageManager.from_name(declared.split("@")[0])

    for lockfile, manager in _LOCKFILES:
        if fs.exists(lockfile):
            return PackageManager(manager)

    return PackageManager.UNKNOWN


def parse_pnpm_workspace(content: str) -> list[str]:
    """Extract globs from pnpm-workspace.yaml list items.

    Only ``- <glob>`` lines are recognized; keys, comments and anything else
    are ignored.
    """
    globs: list[str] = []
    for line in content.splitlines():
        match = _PNPM_GLOB_RE.match(line.strip())
        if match:
            globs.append(match.group(1))
    return globs


def read_pnpm_workspace(fs: FileSystem) -> list[str]:
    if not fs.is_file(PNPM_WORKSPACE):
        print_warning(f"{PNPM_WORKSPACE} not found")
        return []
    return parse_pnpm_workspace(fs.read_text(PNPM_WORKSPACE))


def read_package_json_workspaces(fs: FileSystem) -> list[str]:
    """Read ``workspaces`` as a bare array or ``{"packages": [...]}``."""
    pkg_json = _load_package_json(fs)
    if pkg_json is None:
        return []

    workspaces = pkg_json.get("workspaces")
    if isinstance(workspaces, dict):
        workspaces = cast(dict[str, Any], workspaces).get("packages")
    if not isinstance(workspaces, list):
        return []
    return [glob for glob in cast(list[object], workspaces) if isinstance(glob, str)]


def read_workspace_config(fs: FileSystem) -> WorkspaceConfig:
    """Read the workspace declaration for the detected package manager.

    Raises:
        ConfigError: If no workspace globs are declared
    """
    manager = detect_package_manager(fs)
    print_info(f"📦 Detected package manager: {manager.value}")

    if manager is PackageManager.PNPM:
        print_info(f"📄 Reading workspace config from: {PNPM_WORKSPACE}")
        globs = read_pnpm_workspace(fs)
    else:
        print_info(f"📄 Reading workspace config from: {PACKAGE_JSON} workspaces")
        globs = read_package_json_workspaces(fs)

    if not globs:
        raise ConfigError("No workspace globs found. Check your workspace config.")

    return WorkspaceConfig(package_manager=manager, globs=tuple(globs))


def resolve_workspace_globs(globs: list[str] | tuple[str, ...]) -> list[str]:
    """Turn workspace globs into sorted, unique scan roots.

    Exactly one trailing ``/*`` or ``/**`` is stripped: ``apps/*`` -> ``apps``,
    ``libs/**`` -> ``libs``. Globs that resolve to an empty string are dropped.
    """
    roots: set[str] = set()
    for glob in globs:
        base_dir = _TRAILING_WILDCARD_RE.sub("", glob)
        if base_dir:
            roots.add(base_dir)
    return sorted(roots)
