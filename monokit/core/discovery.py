"""Go module discovery under workspace scan roots."""

from __future__ import annotations

from dataclasses import dataclass

from monokit.helpers.filesystem import FileSystem
from monokit.helpers.helpers_logging import print_warning


@dataclass(frozen=True)
class ModuleRecord:
    scan_root: str
    relative_path: str


def discover_module_records(
    fs: FileSystem,
    scan_root: str,
    descriptor: str = "go.mod",
) -> list[ModuleRecord]:
    """Find child directories of ``scan_root`` that contain ``descriptor``.

    Only one level is searched. A missing scan root is reported as a warning
    and yields no modules, so partially initialized workspaces still sync.
    Records are sorted by directory name (ordinal).
    """
    if not fs.is_dir(scan_root):
        print_warning(f"Directory not found: {scan_root}/")
        return []

    records: list[ModuleRecord] = []
    for child in sorted(fs.list_dir(scan_root)):
        if fs.is_file(f"{scan_root}/{child}/{descriptor}"):
            records.append(ModuleRecord(scan_root, f"./{scan_root}/{child}"))
    return records


def discover_modules(
    fs: FileSystem,
    scan_root: str,
    descriptor: str = "go.mod",
) -> list[str]:
    """Return ``./<scan_root>/<child>`` paths of the modules under a scan root."""
    return [record.relative_path for record in discover_module_records(fs, scan_root, descriptor)]
