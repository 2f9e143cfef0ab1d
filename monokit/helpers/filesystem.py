"""Filesystem capability used by discovery, manifest sync and scaffolding.

All paths are POSIX-style strings relative to the workspace root
(e.g. ``apps/gateway/go.mod``). ``LocalFileSystem`` maps them onto a real
directory; ``MemoryFileSystem`` keeps an in-memory tree for tests.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Protocol


class FileSystem(Protocol):
    """Minimal filesystem interface rooted at the workspace root."""

    def read_text(self, path: str) -> str:
        """Read a UTF-8 file. Raises FileNotFoundError if missing."""
        ...

    def write_text(self, path: str, content: str) -> None:
        """Write a UTF-8 file, creating parent directories."""
        ...

    def list_dir(self, path: str) -> list[str]:
        """Return the names of the immediate child directories of ``path``."""
        ...

    def exists(self, path: str) -> bool:
        ...

    def is_dir(self, path: str) -> bool:
        ...

    def is_file(self, path: str) -> bool:
        ...

    def mkdir(self, path: str) -> None:
        """Create ``path`` and any missing parents."""
        ...

    def absolute(self, path: str) -> Path:
        """Return the real path for ``path`` (used for process cwd/args)."""
        ...


def _normalize(path: str) -> str:
    normalized = str(PurePosixPath(path))
    return "" if normalized == "." else normalized


class LocalFileSystem:
    """FileSystem backed by a directory on disk."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def absolute(self, path: str) -> Path:
        rel = _normalize(path)
        return self.root / rel if rel else self.root

    def read_text(self, path: str) -> str:
        return self.absolute(path).read_text(encoding="utf-8")

    def write_text(self, path: str, content: str) -> None:
        target = self.absolute(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")

    def list_dir(self, path: str) -> list[str]:
        return [entry.name for entry in self.absolute(path).iterdir() if entry.is_dir()]

    def exists(self, path: str) -> bool:
        return self.absolute(path).exists()

    def is_dir(self, path: str) -> bool:
        return self.absolute(path).is_dir()

    def is_file(self, path: str) -> bool:
        return self.absolute(path).is_file()

    def mkdir(self, path: str) -> None:
        self.absolute(path).mkdir(parents=True, exist_ok=True)


class MemoryFileSystem:
    """In-memory FileSystem for tests.

    Tracks every write in ``writes`` so tests can assert that an operation
    touched nothing.
    """

    def __init__(self, files: dict[str, str] | None = None, root: Path | None = None) -> None:
        self.root = root or Path("/workspace")
        self.files: dict[str, str] = {}
        self.dirs: set[str] = {""}
        self.writes: list[str] = []
        for path, content in (files or {}).items():
            self._store(path, content)

    def _store(self, path: str, content: str) -> None:
        rel = _normalize(path)
        self.files[rel] = content
        self._add_parents(rel)

    def _add_parents(self, rel: str) -> None:
        for parent in PurePosixPath(rel).parents:
            self.dirs.add(_normalize(str(parent)))

    def absolute(self, path: str) -> Path:
        rel = _normalize(path)
        return self.root / rel if rel else self.root

    def read_text(self, path: str) -> str:
        rel = _normalize(path)
        if rel not in self.files:
            raise FileNotFoundError(rel)
        return self.files[rel]

    def write_text(self, path: str, content: str) -> None:
        self._store(path, content)
        self.writes.append(_normalize(path))

    def list_dir(self, path: str) -> list[str]:
        rel = _normalize(path)
        if rel not in self.dirs:
            raise FileNotFoundError(rel)
        children: set[str] = set()
        for directory in self.dirs:
            if directory and _normalize(str(PurePosixPath(directory).parent)) == rel:
                children.add(PurePosixPath(directory).name)
        return list(children)

    def exists(self, path: str) -> bool:
        rel = _normalize(path)
        return rel in self.files or rel in self.dirs

    def is_dir(self, path: str) -> bool:
        return _normalize(path) in self.dirs

    def is_file(self, path: str) -> bool:
        return _normalize(path) in self.files

    def mkdir(self, path: str) -> None:
        rel = _normalize(path)
        self.dirs.add(rel)
        self._add_parents(rel)
