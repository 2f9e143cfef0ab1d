"""Fixed stub file sets per unit kind and stub rendering.

Destinations are relative to the new unit directory; ``__name__`` in a
destination is replaced with the unit name. Files are rendered and written in
tuple order.
"""

from __future__ import annotations

from monokit.core.errors import ScaffoldError
from monokit.scaffolding.templates import TEMPLATES
from monokit.scaffolding.types import RenderContext, UnitKind

NAME_PLACEHOLDER = "__name__"

StubFileSet = tuple[tuple[str, str], ...]

APP_STUBS: StubFileSet = (
    ("src/main.go", "app/main.go"),
    ("go.mod", "app/go.mod"),
    ("package.json", "app/package.json"),
    (".air.toml", "app/.air.toml"),
    ("env/.env.example", "app/.env.example"),
    ("docker/Dockerfile", "app/Dockerfile"),
    ("docker/compose.local.yaml", "app/compose.local.yaml"),
    ("docker/compose.dev.yaml", "app/compose.dev.yaml"),
    ("docker/compose.production.yaml", "app/compose.production.yaml"),
)

PACKAGE_STUBS: StubFileSet = (
    (f"src/{NAME_PLACEHOLDER}.go", "package/__name__.go"),
    ("go.mod", "package/go.mod"),
    ("package.json", "package/package.json"),
    (".air.toml", "package/.air.toml"),
)

STUB_SETS: dict[UnitKind, StubFileSet] = {
    UnitKind.APP: APP_STUBS,
    UnitKind.PACKAGE: PACKAGE_STUBS,
}


def render_stub(template_id: str, context: RenderContext) -> str:
    """Render one stub template.

    Raises:
        ScaffoldError: If the template is unknown or fails to render
    """
    template = TEMPLATES.get(template_id)
    if template is None:
        raise ScaffoldError(f"Stub not found: {template_id}")
    try:
        return template(context)
    except Exception as e:
        raise ScaffoldError(f"Failed to render stub {template_id}: {e}") from e


def render_stub_set(kind: UnitKind, context: RenderContext) -> list[tuple[str, str]]:
    """Render every stub for ``kind`` into ``(destination, content)`` pairs.

    Nothing is written here, so a failing stub aborts before any file exists.
    """
    rendered: list[tuple[str, str]] = []
    for destination, template_id in STUB_SETS[kind]:
        path = destination.replace(NAME_PLACEHOLDER, context.name)
        rendered.append((path, render_stub(template_id, context)))
    return rendered
