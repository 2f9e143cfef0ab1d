"""Argument parsing and validation for make-app / make-package."""

from __future__ import annotations

import re

from monokit.core.errors import ValidationError
from monokit.scaffolding.types import DEFAULT_APP_DEPS, UnitKind

DEPS_FLAG = "--deps"
ENV_FLAG = "--env"

_UNIT_NAME_RE = re.compile(r"[a-z][a-z0-9-]*")

_USAGE: dict[UnitKind, list[str]] = {
    UnitKind.APP: [
        "Usage: monokit make-app <name> [--deps logger,http] [--env <tag>]",
        "   Example: monokit make-app notifications",
        "   Example: monokit make-app payments --deps logger,config",
    ],
    UnitKind.PACKAGE: [
        "Usage: monokit make-package <name>",
        "   Example: monokit make-package middleware",
    ],
}


def usage(kind: UnitKind) -> str:
    return "\n".join(_USAGE[kind])


def capitalize(value: str) -> str:
    """Uppercase the first character only: ``my-app`` -> ``My-app``."""
    return value[:1].upper() + value[1:]


def is_valid_unit_name(name: str) -> bool:
    return _UNIT_NAME_RE.fullmatch(name) is not None


def validate_unit_name(name: str, kind: UnitKind = UnitKind.APP) -> str:
    """Check a unit name: lowercase letter first, then ``[a-z0-9-]``.

    Raises:
        ValidationError: If the name contains anything else
    """
    if not is_valid_unit_name(name):
        raise ValidationError(
            f"{capitalize(kind.value)} name '{name}' is invalid: it must start with a "
            + "lowercase letter and contain only lowercase alphanumeric characters or hyphens."
        )
    return name


def extract_unit_name(raw_args: list[str], kind: UnitKind = UnitKind.APP) -> str:
    """Return the first positional argument as the validated unit name.

    Raises:
        ValidationError: If it is missing, looks like a flag or is malformed
    """
    if not raw_args or not raw_args[0] or raw_args[0].startswith("--"):
        raise ValidationError(usage(kind))
    return validate_unit_name(raw_args[0], kind)


def parse_deps(args: list[str]) -> list[str]:
    """Parse ``--deps logger,http,config`` from raw arguments.

    Without the flag (or with nothing after it) the default is ``["logger"]``.
    Pieces are trimmed and empty ones dropped; order and duplicates are kept.
    """
    if DEPS_FLAG not in args:
        return list(DEFAULT_APP_DEPS)

    deps_idx = args.index(DEPS_FLAG)
    if deps_idx + 1 >= len(args):
        return list(DEFAULT_APP_DEPS)

    pieces = (piece.strip() for piece in args[deps_idx + 1].split(","))
    return [piece for piece in pieces if piece]


def parse_env(args: list[str]) -> str | None:
    """Return the value after ``--env``, or None when absent or empty."""
    if ENV_FLAG not in args:
        return None
    env_idx = args.index(ENV_FLAG)
    if env_idx + 1 >= len(args):
        return None
    return args[env_idx + 1].strip() or None
