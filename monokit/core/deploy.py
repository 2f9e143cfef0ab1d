"""Docker Compose file selection for app deployment."""

from __future__ import annotations

from typing import Any, cast

import yaml

from monokit.core.errors import NotFoundError
from monokit.helpers.filesystem import FileSystem
from monokit.helpers.project_config import Settings


def compose_candidates(environment_tag: str | None = None) -> list[str]:
    """Return compose file names in probe order.

    Environment-specific files come first, then the generic ones; ``.yaml``
    is always tried before ``.yml``.
    """
    candidates: list[str] = []
    if environment_tag:
        candidates.extend([f"compose.{environment_tag}.yaml", f"compose.{environment_tag}.yml"])
    candidates.extend(["compose.yaml", "compose.yml"])
    return candidates


def resolve_compose_file(
    fs: FileSystem,
    settings: Settings,
    unit_name: str,
    environment_tag: str | None = None,
) -> str:
    """Select the compose file for ``unit_name``.

    Returns:
        Path of the selected file relative to the workspace root

    Raises:
        NotFoundError: If the app directory or every candidate is missing
    """
    app_dir = f"{settings.apps_dir}/{unit_name}"
    if not fs.is_dir(app_dir):
        raise NotFoundError(f"Service directory not found: {app_dir}")

    compose_dir = f"{app_dir}/{settings.compose_dir}"
    candidates = compose_candidates(environment_tag)
    for candidate in candidates:
        path = f"{compose_dir}/{candidate}"
        if fs.is_file(path):
            return path

    raise NotFoundError(
        f'No valid Docker Compose file found for service "{unit_name}" in {compose_dir}/\n'
        + f"Checked: {', '.join(candidates)}"
    )


def list_compose_services(fs: FileSystem, compose_path: str) -> list[str]:
    """Return the service names declared in a compose file.

    Unreadable or malformed files yield an empty list; docker compose reports
    the real error when it runs.
    """
    try:
        raw: object = yaml.safe_load(fs.read_text(compose_path))
    except (OSError, yaml.YAMLError):
        return []

    if not isinstance(raw, dict):
        return []
    services = cast(dict[str, Any], raw).get("services")
    if not isinstance(services, dict):
        return []
    return [str(name) for name in cast(dict[str, Any], services)]
