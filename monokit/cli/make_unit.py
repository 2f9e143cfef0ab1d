#!/usr/bin/env python3
"""
Scaffold a new app (apps/<name>) or shared package (packages/<name>).

Usage:
    monokit make-app <name> [--deps logger,http,config] [--env <tag>]
    monokit make-package <name>

Examples:
    monokit make-app notifications
    monokit make-app payments --deps logger,config
    monokit make-package middleware

After the files are written, go.work is re-synced and the setup hooks run
(pnpm setup, go mod tidy, pnpm install). Hook failures only warn.
"""

import sys

from monokit.cli.runtime import load_runtime
from monokit.core.errors import MonokitError, ValidationError
from monokit.helpers.helpers_logging import print_error, print_info, print_warning
from monokit.scaffolding import UnitKind, scaffold


def run(kind: UnitKind, argv: list[str] | None = None) -> int:
    """Scaffold a unit of ``kind`` from raw arguments and return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args and args[0] in ("-h", "--help"):
        print_info(__doc__ or "")
        return 0

    try:
        runtime = load_runtime()
        result = scaffold(args, kind, runtime.settings, runtime.fs, runtime.runner)
    except ValidationError as e:
        for line in str(e).splitlines():
            print_error(line)
        return 1
    except MonokitError as e:
        print_error(str(e))
        return 1
    except OSError as e:
        print_error(f"Failed to create {kind.value}: {e}")
        return 1

    if result.ok_with_warnings:
        print_warning(f"{kind.value} '{result.name}' created with {len(result.warnings)} warning(s)")
    return 0


def make_app_main(argv: list[str] | None = None) -> int:
    return run(UnitKind.APP, argv)


def make_package_main(argv: list[str] | None = None) -> int:
    return run(UnitKind.PACKAGE, argv)


if __name__ == "__main__":
    sys.exit(make_app_main())
