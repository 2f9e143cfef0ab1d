"""Stub templates for scaffolded apps and packages.

Each template is a function ``RenderContext -> str``. They are looked up by
identifier through ``TEMPLATES`` so stub sets stay declarative.
"""

from __future__ import annotations

import json
from collections.abc import Callable

from monokit.scaffolding.types import RenderContext

Template = Callable[[RenderContext], str]


# ============================================================================
# App templates
# ============================================================================

def get_app_main_template(ctx: RenderContext) -> str:
    """Generate src/main.go with a health endpoint.

    Uses the shared logger package when the app depends on it, slog otherwise.
    """
    if "logger" in ctx.deps:
        log_import = f'\t"{ctx.module_path(ctx.packages_dir, "logger")}"\n'
        log_start = f'\tlogger.Info(ctx, "{ctx.name_title} service starting", "port", port)'
        log_stop = f'\t\tlogger.Error(ctx, "{ctx.name_title} service stopped", "error", err)'
    else:
        log_import = '\t"log/slog"\n'
        log_start = f'\tslog.InfoContext(ctx, "{ctx.name_title} service starting", "port", port)'
        log_stop = f'\t\tslog.ErrorContext(ctx, "{ctx.name_title} service stopped", "error", err)'

    return f"""package main

import (
\t"context"
\t"net/http"
\t"os"

{log_import})

func main() {{
\tctx := context.Background()

\tport := os.Getenv("PORT")
\tif port == "" {{
\t\tport = "8080"
\t}}

\tmux := http.NewServeMux()
\tmux.HandleFunc("/health", func(w http.ResponseWriter, r *http.Request) {{
\t\tw.WriteHeader(http.StatusOK)
\t\t_, _ = w.Write([]byte("ok"))
\t}})

{log_start}
\tif err := http.ListenAndServe(":"+port, mux); err != nil {{
{log_stop}
\t\tos.Exit(1)
\t}}
}}
"""


def _go_mod(module_path: str, go_version: str, requires: list[str]) -> str:
    lines = [f"module {module_path}", "", f"go {go_version}", ""]
    if requires:
        lines.append("require (")
        lines.extend(f"\t{require} v0.0.0" for require in requires)
        lines.append(")")
        lines.append("")
    return "\n".join(lines)


def get_app_go_mod_template(ctx: RenderContext) -> str:
    """Generate go.mod; shared packages resolve through go.work."""
    requires = [ctx.module_path(ctx.packages_dir, dep) for dep in ctx.deps]
    return _go_mod(ctx.module_path(ctx.apps_dir), ctx.go_version, requires)


def get_app_package_json_template(ctx: RenderContext) -> str:
    """Generate package.json with the task script contract and workspace deps."""
    data: dict[str, object] = {
        "name": f"@apps/{ctx.name}",
        "version": "0.0.0",
        "private": True,
        "scripts": {
            "setup": "cp -n env/.env.example env/.env || true",
            "dev": "air -c .air.toml",
            "build": f"go build -o bin/{ctx.name} ./src",
            "test": "go test ./...",
            "lint": "go vet ./...",
            "deploy": f"monokit deploy {ctx.name}",
        },
        "dependencies": {f"@packages/{dep}": "workspace:*" for dep in ctx.deps},
    }
    return json.dumps(data, indent=2) + "\n"


def get_app_air_template(ctx: RenderContext) -> str:
    """Generate .air.toml for hot reload of the app binary."""
    return f"""root = "."
tmp_dir = "tmp"

[build]
  cmd = "go build -o ./tmp/{ctx.name} ./src"
  bin = "./tmp/{ctx.name}"
  include_ext = ["go"]
  exclude_dir = ["tmp", "docker", "env", "node_modules"]
  delay = 500

[log]
  time = true

[misc]
  clean_on_exit = true
"""


def get_app_env_example_template(ctx: RenderContext) -> str:
    return f"""# {ctx.name_title} service environment
# Copy to env/.env (done by `pnpm run setup`)
APP_NAME={ctx.name}
PORT=8080
LOG_LEVEL=info
DEPLOY_ENV=local
"""


def get_app_dockerfile_template(ctx: RenderContext) -> str:
    """Generate a multi-stage Dockerfile built from the repository root.

    Shared packages are copied individually; update the COPY lines when the
    app gains dependencies.
    """
    app_dir = f"{ctx.apps_dir}/{ctx.name}"
    dep_dirs = [f"{ctx.packages_dir}/{dep}" for dep in ctx.deps]
    copy_deps = "".join(f"COPY {dep_dir} ./{dep_dir}\n" for dep_dir in dep_dirs)
    work_uses = " ".join(f"./{path}" for path in [app_dir, *dep_dirs])

    return f"""# syntax=docker/dockerfile:1
# Build context: repository root
FROM golang:{ctx.go_version}-alpine AS builder

WORKDIR /src
{copy_deps}COPY {app_dir} ./{app_dir}

RUN go work init {work_uses}
RUN CGO_ENABLED=0 go build -o /out/{ctx.name} ./{app_dir}/src

FROM gcr.io/distroless/static-debian12

COPY --from=builder /out/{ctx.name} /usr/local/bin/{ctx.name}

EXPOSE 8080
ENTRYPOINT ["/usr/local/bin/{ctx.name}"]
"""


def _compose(ctx: RenderContext, environment: str, restart: str) -> str:
    return f"""# {ctx.name_title} - {environment} deployment
# Usage: monokit deploy {ctx.name} --env {environment}
services:
  {ctx.name}:
    build:
      context: {ctx.root_from_compose_dir}
      dockerfile: {ctx.apps_dir}/{ctx.name}/docker/Dockerfile
    container_name: {ctx.name}-{environment}
    env_file:
      - ../env/.env
    environment:
      DEPLOY_ENV: {environment}
    ports:
      - "${{PORT:-8080}}:8080"
    restart: {restart}
"""


def get_compose_local_template(ctx: RenderContext) -> str:
    return _compose(ctx, "local", '"no"')


def get_compose_dev_template(ctx: RenderContext) -> str:
    return _compose(ctx, "dev", "unless-stopped")


def get_compose_production_template(ctx: RenderContext) -> str:
    return _compose(ctx, "production", "always")


# ============================================================================
# Package templates
# ============================================================================

def get_package_source_template(ctx: RenderContext) -> str:
    return f"""// Package {ctx.package_ident} is the shared {ctx.name} library.
package {ctx.package_ident}

// Name returns the workspace name of this package.
func Name() string {{
\treturn "{ctx.name}"
}}
"""


def get_package_go_mod_template(ctx: RenderContext) -> str:
    return _go_mod(ctx.module_path(ctx.packages_dir), ctx.go_version, [])


def get_package_package_json_template(ctx: RenderContext) -> str:
    """Generate package.json for a library (no dev/deploy scripts)."""
    data: dict[str, object] = {
        "name": f"@packages/{ctx.name}",
        "version": "0.0.0",
        "private": True,
        "scripts": {
            "setup": "go mod download",
            "build": "go build ./...",
            "test": "go test ./...",
            "lint": "go vet ./...",
        },
    }
    return json.dumps(data, indent=2) + "\n"


def get_package_air_template(ctx: RenderContext) -> str:
    """Generate .air.toml that re-runs the package tests on change."""
    return f"""root = "."
tmp_dir = "tmp"

[build]
  cmd = "go test ./..."
  bin = ""
  full_bin = "echo {ctx.name}: tests passed"
  include_ext = ["go"]
  exclude_dir = ["tmp", "node_modules"]
  delay = 500

[misc]
  clean_on_exit = true
"""


TEMPLATES: dict[str, Template] = {
    "app/main.go": get_app_main_template,
    "app/go.mod": get_app_go_mod_template,
    "app/package.json": get_app_package_json_template,
    "app/.air.toml": get_app_air_template,
    "app/.env.example": get_app_env_example_template,
    "app/Dockerfile": get_app_dockerfile_template,
    "app/compose.local.yaml": get_compose_local_template,
    "app/compose.dev.yaml": get_compose_dev_template,
    "app/compose.production.yaml": get_compose_production_template,
    "package/__name__.go": get_package_source_template,
    "package/go.mod": get_package_go_mod_template,
    "package/package.json": get_package_package_json_template,
    "package/.air.toml": get_package_air_template,
}
