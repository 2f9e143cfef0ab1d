#!/usr/bin/env python3
"""
Deploy an app with Docker Compose.

Selects the compose file from apps/<name>/docker/ in this order:
    compose.<env>.yaml, compose.<env>.yml, compose.yaml, compose.yml

and runs ``docker compose -f <file> up -d --build`` from the repository root.

Usage:
    monokit deploy gateway
    monokit deploy gateway --env production
    DEPLOY_ENV=dev monokit deploy gateway
"""

import argparse
import os
import sys
from typing import NoReturn

from monokit.cli.runtime import load_runtime
from monokit.core.deploy import list_compose_services, resolve_compose_file
from monokit.core.errors import MonokitError, ValidationError
from monokit.helpers.helpers_logging import (
    print_command,
    print_error,
    print_header,
    print_info,
    print_success,
)

DEPLOY_ENV_VAR = "DEPLOY_ENV"


class _DeployArgumentParser(argparse.ArgumentParser):
    """Raises ValidationError on bad arguments instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise ValidationError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _DeployArgumentParser(
        prog="monokit deploy",
        description="Deploy an app with the best matching Docker Compose file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("name", nargs="?", help="App name under apps/")
    parser.add_argument(
        "--env",
        help=f"Environment tag (default: ${DEPLOY_ENV_VAR})",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the deploy command."""
    try:
        args = build_parser().parse_args(sys.argv[1:] if argv is None else argv)
    except ValidationError as e:
        print_error(str(e))
        print_info("   Usage: monokit deploy <name> [--env <tag>]")
        return 1

    if not args.name:
        print_error("Service name is required.")
        print_info("   Usage: monokit deploy <name> [--env <tag>]")
        return 1

    deploy_env: str | None = args.env or os.environ.get(DEPLOY_ENV_VAR) or None

    try:
        runtime = load_runtime()
        compose_file = resolve_compose_file(
            runtime.fs, runtime.settings, args.name, deploy_env,
        )
    except MonokitError as e:
        for line in str(e).splitlines():
            print_error(line)
        return 1

    env_label = f"[{deploy_env.upper()}]" if deploy_env else "[DEFAULT]"
    print_header(f"\n🚀 Orchestrating deployment for {env_label} {args.name}...")
    print_info(f"📄 Using config: {compose_file}")
    services = list_compose_services(runtime.fs, compose_file)
    if services:
        print_info(f"   Services: {', '.join(services)}\n")

    command = [
        "docker", "compose",
        "-f", str(runtime.fs.absolute(compose_file)),
        "up", "-d", "--build",
    ]
    print_command(command)
    exit_code = runtime.runner.run(
        command,
        runtime.fs.absolute(""),
        env={DEPLOY_ENV_VAR: deploy_env or "local"},
    )
    if exit_code != 0:
        print_error(f"Deployment failed for {args.name}. Check Docker logs.")
        return 1

    print_success(f"Service {args.name} deployed successfully.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
