"""Best-effort post-scaffold setup commands.

Hooks run after files and go.work are written. A failing hook never undoes
anything: it stops the remaining hooks and becomes a warning telling the
operator what to re-run.
"""

from __future__ import annotations

from dataclasses import dataclass

from monokit.helpers.command_runner import CommandRunner
from monokit.helpers.filesystem import FileSystem
from monokit.helpers.helpers_logging import print_command, print_info, print_warning
from monokit.scaffolding.types import UnitKind

MANUAL_HINT = "run manually: pnpm setup && pnpm install"


@dataclass(frozen=True)
class Hook:
    description: str
    command: tuple[str, ...]
    cwd: str = ""


def build_hooks(kind: UnitKind, name: str, unit_dir: str) -> list[Hook]:
    """Return the setup hooks for a new unit living in ``unit_dir``."""
    scope = "apps" if kind is UnitKind.APP else "packages"
    return [
        Hook("setup", ("pnpm", "run", f"--filter=@{scope}/{name}", "setup")),
        Hook("go mod tidy", ("go", "mod", "tidy"), unit_dir),
        Hook("dependency install", ("pnpm", "install")),
    ]


def run_hooks(hooks: list[Hook], fs: FileSystem, runner: CommandRunner) -> list[str]:
    """Run hooks in order, stopping at the first failure.

    Returns:
        Warning messages (empty when every hook succeeded)
    """
    for hook in hooks:
        if hook.description == "dependency install":
            print_info("\n📦 Resolving workspace dependencies...")
        print_command(list(hook.command), hook.cwd)
        exit_code = runner.run(list(hook.command), fs.absolute(hook.cwd))
        if exit_code != 0:
            message = (
                f"Hook '{' '.join(hook.command)}' failed with exit code {exit_code} - "
                + MANUAL_HINT
            )
            print_warning(message)
            return [message]
    return []
