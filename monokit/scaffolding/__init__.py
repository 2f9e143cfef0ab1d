"""App and package scaffolding.

Public API:
    scaffold: Create a unit from its stub set and register it in go.work
    parse_deps: Parse the ``--deps`` flag
    parse_env: Parse the ``--env`` deploy tag shown in next steps
    validate_unit_name: Check a unit name

Example:
    from monokit.scaffolding import UnitKind, scaffold

    scaffold(["payments", "--deps", "logger,config"], UnitKind.APP, settings, fs, runner)
"""

from .engine import build_context, build_request, scaffold
from .stubs import APP_STUBS, PACKAGE_STUBS, render_stub_set
from .types import RenderContext, ScaffoldRequest, ScaffoldResult, UnitKind
from .validation import (
    extract_unit_name,
    is_valid_unit_name,
    parse_deps,
    parse_env,
    validate_unit_name,
)

__all__ = [
    "APP_STUBS",
    "PACKAGE_STUBS",
    "RenderContext",
    "ScaffoldRequest",
    "ScaffoldResult",
    "UnitKind",
    "build_context",
    "build_request",
    "extract_unit_name",
    "is_valid_unit_name",
    "parse_deps",
    "parse_env",
    "render_stub_set",
    "scaffold",
    "validate_unit_name",
]
