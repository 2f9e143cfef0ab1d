"""go.work generation and workspace sync.

The manifest is regenerated wholesale from the workspace declaration on every
run and written only when its content changes, so repeated syncs are no-ops.
"""

from __future__ import annotations

from dataclasses import dataclass

from monokit.core.discovery import discover_modules
from monokit.core.errors import ConfigError
from monokit.core.workspace_config import read_workspace_config, resolve_workspace_globs
from monokit.helpers.filesystem import FileSystem
from monokit.helpers.helpers_logging import print_info, print_success
from monokit.helpers.project_config import Settings

DEFAULT_GO_VERSION = "1.23"

_HEADER_LINES = (
    "// Auto-generated by monokit (monokit sync)",
    "// Do NOT edit manually - run: monokit sync",
    "//",
    "// This file allows Go to recognize multiple modules within the repository",
    "// without needing manual 'replace' directives in each go.mod file.",
)


@dataclass(frozen=True)
class SyncResult:
    written: bool
    module_count: int


def section_label(scan_root: str) -> str:
    """Capitalize the first character: ``apps`` -> ``Apps``."""
    return scan_root[:1].upper() + scan_root[1:]


def generate_go_work(
    modules_by_dir: dict[str, list[str]],
    go_version: str = DEFAULT_GO_VERSION,
) -> str:
    """Render go.work content grouped by scan root.

    Scan roots with no modules are skipped entirely. Sections are separated
    by one blank line; there is no blank line before the closing ``)``.
    """
    lines: list[str] = [*_HEADER_LINES, f"go {go_version}", "", "use ("]

    sections = [(label, mods) for label, mods in modules_by_dir.items() if mods]
    for index, (scan_root, modules) in enumerate(sections):
        if index > 0:
            lines.append("")
        lines.append(f"\t// {section_label(scan_root)}")
        lines.extend(f"\t{module}" for module in modules)

    lines.append(")")
    lines.append("")
    return "\n".join(lines)


def collect_modules(settings: Settings, fs: FileSystem) -> dict[str, list[str]]:
    """Discover modules for every scan root declared by the workspace config."""
    config = read_workspace_config(fs)
    scan_dirs = resolve_workspace_globs(config.globs)
    print_info(f"🔎 Workspace directories: {', '.join(scan_dirs)}\n")

    modules_by_dir: dict[str, list[str]] = {}
    for scan_dir in scan_dirs:
        modules = discover_modules(fs, scan_dir, settings.module_descriptor)
        modules_by_dir[scan_dir] = modules
        if modules:
            print_info(f"  📦 {scan_dir}/")
            for module in modules:
                print_info(f"     └─ {module}")
    return modules_by_dir


def sync_workspace(settings: Settings, fs: FileSystem) -> SyncResult:
    """Regenerate the manifest and write it only if the content changed.

    Raises:
        ConfigError: If no workspace globs or no modules are found
    """
    print_info("🔍 Scanning for Go modules...\n")
    modules_by_dir = collect_modules(settings, fs)

    total_modules = sum(len(modules) for modules in modules_by_dir.values())
    if total_modules == 0:
        raise ConfigError("No Go modules found. Nothing to sync.")

    content = generate_go_work(modules_by_dir, settings.go_version)

    if fs.is_file(settings.manifest) and fs.read_text(settings.manifest) == content:
        print_success(f"{settings.manifest} is already up to date.")
        return SyncResult(written=False, module_count=total_modules)

    fs.write_text(settings.manifest, content)
    print_success(f"{settings.manifest} synced - {total_modules} modules registered.")
    return SyncResult(written=True, module_count=total_modules)
