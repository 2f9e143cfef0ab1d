#!/usr/bin/env python3
"""monokit - Go/pnpm monorepo tooling.

Usage:
    monokit <command> [options]

Commands:
    make-app       Scaffold a new app in apps/ and register it in go.work
    make-package   Scaffold a new shared package in packages/
    sync           Regenerate go.work from the workspace configuration
    deploy         Deploy an app with its Docker Compose file
    help           Show this help message
"""

from __future__ import annotations

import importlib
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import cast

import click

from monokit.helpers.project_config import find_workspace_root

HELP_WORDS = ("help", "--help", "-h")

CommandMain = Callable[[list[str]], int]


@dataclass(frozen=True)
class CommandSpec:
    """Where a subcommand lives and how it is described in help output.

    Handler modules are imported only when their command runs.
    """

    module: str
    entry: str
    description: str
    usage: str

    def load(self) -> CommandMain:
        module = importlib.import_module(self.module)
        return cast(CommandMain, getattr(module, self.entry))


COMMANDS: dict[str, CommandSpec] = {
    "make-app": CommandSpec(
        module="monokit.cli.make_unit",
        entry="make_app_main",
        description="Scaffold a new app in apps/ and register it in go.work",
        usage="monokit make-app <name> [--deps logger,http] [--env <tag>]",
    ),
    "make-package": CommandSpec(
        module="monokit.cli.make_unit",
        entry="make_package_main",
        description="Scaffold a new shared package in packages/",
        usage="monokit make-package <name>",
    ),
    "sync": CommandSpec(
        module="monokit.cli.sync",
        entry="main",
        description="Regenerate go.work from the workspace configuration",
        usage="monokit sync",
    ),
    "deploy": CommandSpec(
        module="monokit.cli.deploy",
        entry="main",
        description="Deploy an app with its Docker Compose file",
        usage="monokit deploy <name> [--env <tag>]",
    ),
}


def print_help(workspace_root: Path) -> None:
    print(__doc__)
    print(f"📍 Workspace: {workspace_root}")

    print("\n📦 Commands:")
    for name, spec in COMMANDS.items():
        print(f"  {name:14} - {spec.description}")
        print(f"  {' ' * 14}   Usage: {spec.usage}")


def execute_command(command: str, extra_args: list[str]) -> int:
    """Run the handler registered for ``command`` with its raw arguments."""
    spec = COMMANDS.get(command)
    if spec is None:
        print(f"❌ Unknown command: {command}")
        print("\nRun 'monokit help' to see available commands.")
        return 1
    return spec.load()(extra_args)


def _passthrough(name: str, spec: CommandSpec) -> click.Command:
    """Wrap a handler so click hands over every argument untouched.

    Handlers parse their own flags (``--deps``, ``--env``), so click must not
    reject options it does not know.
    """

    @click.pass_context
    def callback(ctx: click.Context) -> int:
        return execute_command(name, list(ctx.args))

    return click.Command(
        name=name,
        callback=callback,
        help=spec.description,
        context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
        add_help_option=False,
    )


def _build_cli() -> click.Group:
    @click.group(invoke_without_command=True)
    @click.pass_context
    def group(ctx: click.Context) -> int:
        if ctx.invoked_subcommand is None:
            print_help(find_workspace_root())
        return 0

    for name, spec in COMMANDS.items():
        group.add_command(_passthrough(name, spec))

    @group.command(name="help", help="Show this help message")
    def help_command() -> int:
        print_help(find_workspace_root())
        return 0

    return group


_click_cli = _build_cli()


def main() -> int:
    """Console-script entry point for ``monokit``."""
    args = sys.argv[1:]
    if not args or args[0] in HELP_WORDS:
        print_help(find_workspace_root())
        return 0

    try:
        result = _click_cli.main(args=args, prog_name="monokit", standalone_mode=False)
    except click.Abort:
        print("\n⚠️  Cancelled by user")
        return 130
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    return 0 if result is None else int(result)


if __name__ == "__main__":
    sys.exit(main())
