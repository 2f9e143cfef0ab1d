"""Workspace root detection and the per-run ``Settings`` value.

Settings are built once by the CLI and passed explicitly to every component.
Defaults can be overridden by an optional ``monokit.yaml`` at the workspace
root::

    go_version: "1.23"
    module_prefix: acme-go
    manifest: go.work
    module_descriptor: go.mod
    apps_dir: apps
    packages_dir: packages
    compose_dir: docker
    hooks:
      enabled: true
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, cast

from monokit.core.errors import ConfigError
from monokit.helpers.filesystem import FileSystem
from monokit.helpers.yaml_loader import load_yaml_text

CONFIG_FILE = "monokit.yaml"
SKIP_HOOKS_ENV = "MONOKIT_SKIP_HOOKS"

_ROOT_MARKERS = ("pnpm-workspace.yaml", "package.json")
_STRING_KEYS = (
    "go_version",
    "module_prefix",
    "manifest",
    "module_descriptor",
    "apps_dir",
    "packages_dir",
    "compose_dir",
)


@dataclass(frozen=True)
class Settings:
    """Immutable configuration for one monokit invocation."""

    root: Path
    module_prefix: str
    go_version: str = "1.23"
    manifest: str = "go.work"
    module_descriptor: str = "go.mod"
    apps_dir: str = "apps"
    packages_dir: str = "packages"
    compose_dir: str = "docker"
    hooks_enabled: bool = True


def find_workspace_root(start: Path | None = None) -> Path:
    """Find the monorepo root by walking up from ``start`` (default: cwd).

    The root is the first directory containing ``pnpm-workspace.yaml`` or
    ``package.json``. Falls back to ``start`` so commands still run in a
    fresh directory.
    """
    current = start or Path.cwd()
    for parent in [current, *current.parents]:
        if any((parent / marker).exists() for marker in _ROOT_MARKERS):
            return parent
    return current


def _default_module_prefix(fs: FileSystem, root: Path) -> str:
    """Derive the Go module prefix from the root package.json name."""
    if fs.is_file("package.json"):
        try:
            data: object = json.loads(fs.read_text("package.json"))
        except json.JSONDecodeError:
            data = None
        if isinstance(data, dict):
            name = cast(dict[str, Any], data).get("name")
            if isinstance(name, str) and name.strip():
                # "@acme/platform" -> "acme/platform"
                return name.strip().lstrip("@")
    return root.name


def _parse_config(raw: dict[str, Any]) -> dict[str, Any]:
    """Validate monokit.yaml keys and return Settings keyword arguments."""
    allowed = {*_STRING_KEYS, "hooks"}
    unknown = sorted(set(raw) - allowed)
    if unknown:
        raise ConfigError(f"{CONFIG_FILE}: unknown keys: {', '.join(unknown)}")

    kwargs: dict[str, Any] = {}
    for key in _STRING_KEYS:
        if key not in raw:
            continue
        value = raw[key]
        # go_version: 1.23 parses as a float
        if key == "go_version" and isinstance(value, (int, float)) and not isinstance(value, bool):
            value = str(value)
        if not isinstance(value, str) or not value.strip():
            raise ConfigError(f"{CONFIG_FILE}: '{key}' must be a non-empty string")
        kwargs[key] = value.strip()

    hooks = raw.get("hooks")
    if hooks is not None:
        if not isinstance(hooks, dict):
            raise ConfigError(f"{CONFIG_FILE}: 'hooks' must be a mapping")
        enabled = cast(dict[str, Any], hooks).get("enabled", True)
        if not isinstance(enabled, bool):
            raise ConfigError(f"{CONFIG_FILE}: 'hooks.enabled' must be true or false")
        kwargs["hooks_enabled"] = enabled

    return kwargs


def load_settings(root: Path, fs: FileSystem) -> Settings:
    """Build Settings from defaults, ``monokit.yaml`` and the environment.

    Raises:
        ConfigError: If monokit.yaml is malformed
    """
    kwargs: dict[str, Any] = {}
    if fs.is_file(CONFIG_FILE):
        try:
            raw = load_yaml_text(fs.read_text(CONFIG_FILE), CONFIG_FILE)
        except ValueError as e:
            raise ConfigError(str(e)) from e
        kwargs = _parse_config(dict(raw))

    if os.environ.get(SKIP_HOOKS_ENV) == "1":
        kwargs["hooks_enabled"] = False

    kwargs.setdefault("module_prefix", _default_module_prefix(fs, root))
    return Settings(root=root, **kwargs)
