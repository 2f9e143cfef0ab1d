#!/usr/bin/env python3
"""
Regenerate the root go.work from the workspace configuration.

Reads pnpm-workspace.yaml (pnpm) or package.json workspaces (yarn/npm),
finds every directory with a go.mod one level below each workspace root and
rewrites go.work only when its content changes.

Usage:
    monokit sync
"""

import sys

from monokit.cli.runtime import load_runtime
from monokit.core.errors import MonokitError
from monokit.core.manifest import sync_workspace
from monokit.helpers.helpers_logging import print_error, print_info


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the sync command."""
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] in ("-h", "--help"):
        print_info(__doc__ or "")
        return 0

    try:
        runtime = load_runtime()
        sync_workspace(runtime.settings, runtime.fs)
    except MonokitError as e:
        print_error(str(e))
        return 1
    except OSError as e:
        print_error(f"Failed to sync workspace: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
