"""Scaffold engine: validate, render, write, then register the new unit.

A scaffold runs strictly forward:

    validate name -> collision check -> render all stubs -> write files
    -> sync go.work -> hooks

Everything before the first write raises and leaves the workspace untouched.
Failures after that point (sync, hooks) are downgraded to warnings because
files already exist on disk and there is no rollback.

The collision check and the writes are not atomic: two concurrent scaffolds of
the same name can both pass the check.
"""

from __future__ import annotations

from monokit.core.errors import ConflictError, MonokitError, ScaffoldError
from monokit.core.manifest import sync_workspace
from monokit.helpers.command_runner import CommandRunner
from monokit.helpers.filesystem import FileSystem
from monokit.helpers.helpers_logging import (
    print_info,
    print_step,
    print_success,
    print_warning,
)
from monokit.helpers.project_config import Settings
from monokit.scaffolding.hooks import MANUAL_HINT, build_hooks, run_hooks
from monokit.scaffolding.stubs import render_stub_set
from monokit.scaffolding.types import (
    RenderContext,
    ScaffoldRequest,
    ScaffoldResult,
    UnitKind,
)
from monokit.scaffolding.validation import (
    capitalize,
    extract_unit_name,
    parse_deps,
    parse_env,
)


def kind_directory(settings: Settings, kind: UnitKind) -> str:
    return settings.apps_dir if kind is UnitKind.APP else settings.packages_dir


def build_request(raw_args: list[str], kind: UnitKind) -> ScaffoldRequest:
    """Parse raw CLI arguments into a validated request.

    Raises:
        ValidationError: If the unit name is missing or malformed
    """
    name = extract_unit_name(raw_args, kind)
    if kind is not UnitKind.APP:
        return ScaffoldRequest(name=name, kind=kind)
    return ScaffoldRequest(
        name=name,
        kind=kind,
        dependencies=tuple(parse_deps(raw_args)),
        environment_tag=parse_env(raw_args),
    )


def build_context(request: ScaffoldRequest, settings: Settings) -> RenderContext:
    return RenderContext(
        name=request.name,
        name_title=capitalize(request.name),
        deps=request.dependencies,
        module_prefix=settings.module_prefix,
        go_version=settings.go_version,
        apps_dir=settings.apps_dir,
        packages_dir=settings.packages_dir,
    )


def _write_files(
    fs: FileSystem,
    unit_dir: str,
    rendered: list[tuple[str, str]],
    result: ScaffoldResult,
) -> None:
    try:
        fs.mkdir(unit_dir)
    except OSError as e:
        raise ScaffoldError(f"Failed to create {unit_dir}/: {e}") from e

    for file_path, content in rendered:
        try:
            fs.write_text(f"{unit_dir}/{file_path}", content)
        except OSError as e:
            written = ", ".join(result.written_files) or "(none)"
            raise ScaffoldError(
                f"Failed to write {unit_dir}/{file_path}: {e}. Already written: {written}"
            ) from e
        result.written_files.append(file_path)
        print_success(file_path)


def _sync_after_write(settings: Settings, fs: FileSystem, result: ScaffoldResult) -> None:
    try:
        sync_workspace(settings, fs)
    except (MonokitError, OSError) as e:
        message = f"{settings.manifest} sync failed: {e} - {MANUAL_HINT}"
        print_warning(message)
        result.warnings.append(message)
        return
    result.synced = True


def _print_next_steps(settings: Settings, request: ScaffoldRequest) -> None:
    name = request.name
    if request.kind is UnitKind.APP:
        print_info(f"\n🎉 App \"{name}\" created successfully!")
        steps = [
            f"Review workspace dependencies in {settings.apps_dir}/{name}/package.json",
            f"Add Go dependencies: cd {settings.apps_dir}/{name} && go get ...",
            "Update Dockerfile COPY lines if you add more shared packages",
            f"Run: pnpm dev --filter=@apps/{name}",
            f"Deploy: monokit deploy {name} --env {request.environment_tag or 'local'}",
        ]
    else:
        print_info(f"\n🎉 Package \"{name}\" created successfully!")
        steps = [
            "Add as dependency in consuming apps' package.json: "
            + f"\"@packages/{name}\": \"workspace:*\"",
            f"Import in Go: import \"{settings.module_prefix}/{settings.packages_dir}/{name}\"",
            f"Run: pnpm test --filter=@packages/{name}",
        ]

    print_info("\n📝 Next steps:")
    for number, step in enumerate(steps, start=1):
        print_step(number, step)


def scaffold(
    raw_args: list[str],
    kind: UnitKind,
    settings: Settings,
    fs: FileSystem,
    runner: CommandRunner,
) -> ScaffoldResult:
    """Create a new app or package and register it in go.work.

    Args:
        raw_args: Arguments after the command, name first
            (e.g. ``["payments", "--deps", "logger,config"]``)
        kind: App or package
        settings: Per-run configuration
        fs: Filesystem rooted at the workspace root
        runner: Command runner for post-generation hooks

    Returns:
        Result listing written files and any post-write warnings

    Raises:
        ValidationError: Bad or missing name
        ConflictError: Target directory already exists
        ScaffoldError: A stub failed to render (nothing written) or a write
            failed (earlier files remain)
    """
    request = build_request(raw_args, kind)
    kind_dir = kind_directory(settings, kind)
    unit_dir = f"{kind_dir}/{request.name}"

    if fs.exists(unit_dir):
        raise ConflictError(f"{capitalize(kind.value)} already exists: {unit_dir}/")

    context = build_context(request, settings)
    rendered = render_stub_set(kind, context)

    icon = "🚀" if kind is UnitKind.APP else "📦"
    print_info(f"\n{icon} Creating {kind.value}: {request.name}")
    if kind is UnitKind.APP:
        deps_label = ", ".join(request.dependencies) if request.dependencies else "(none)"
        print_info(f"   Dependencies: {deps_label}\n")

    result = ScaffoldResult(name=request.name, kind=kind, directory=unit_dir)
    _write_files(fs, unit_dir, rendered, result)

    print_info(f"\n🔄 Syncing {settings.manifest} and setting up {kind.value}...")
    _sync_after_write(settings, fs, result)

    if settings.hooks_enabled:
        result.warnings.extend(run_hooks(build_hooks(kind, request.name, unit_dir), fs, runner))
    else:
        print_info("Hooks disabled - skipping setup commands")

    _print_next_steps(settings, request)
    return result
