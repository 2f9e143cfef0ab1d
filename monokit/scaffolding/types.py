"""Data types for scaffolding requests, render contexts and results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class UnitKind(str, Enum):
    """What is being scaffolded: a deployable app or a shared package."""

    APP = "app"
    PACKAGE = "package"


DEFAULT_APP_DEPS: tuple[str, ...] = ("logger",)


@dataclass(frozen=True)
class ScaffoldRequest:
    name: str
    kind: UnitKind
    dependencies: tuple[str, ...] = ()
    environment_tag: str | None = None


@dataclass(frozen=True)
class RenderContext:
    """Template variables passed to every stub.

    Attributes:
        name: Lowercase unit name (e.g. "auth")
        name_title: Display name with the first letter capitalized ("Auth")
        deps: Shared packages the unit depends on (e.g. ("logger", "http"))
        module_prefix: Go module path prefix of the monorepo
        go_version: Go version written into go.mod and Dockerfiles
        apps_dir: Workspace directory holding apps
        packages_dir: Workspace directory holding shared packages
    """

    name: str
    name_title: str
    deps: tuple[str, ...]
    module_prefix: str
    go_version: str
    apps_dir: str = "apps"
    packages_dir: str = "packages"

    @property
    def package_ident(self) -> str:
        """Go package identifier (hyphens are not allowed in Go names)."""
        return self.name.replace("-", "")

    def module_path(self, kind_dir: str, unit: str | None = None) -> str:
        return f"{self.module_prefix}/{kind_dir}/{unit or self.name}"

    @property
    def root_from_compose_dir(self) -> str:
        """Relative path from <apps_dir>/<name>/docker back to the workspace root."""
        depth = len([part for part in self.apps_dir.split("/") if part]) + 2
        return "/".join([".."] * depth)


@dataclass
class ScaffoldResult:
    name: str
    kind: UnitKind
    directory: str
    written_files: list[str] = field(default_factory=list)
    synced: bool = False
    warnings: list[str] = field(default_factory=list)

    @property
    def ok_with_warnings(self) -> bool:
        return bool(self.warnings)
