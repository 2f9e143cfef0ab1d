"""Tests for console output helpers."""

from __future__ import annotations

from collections.abc import Callable
from unittest.mock import patch

import pytest

from monokit.helpers.helpers_logging import (
    Colors,
    print_command,
    print_error,
    print_header,
    print_info,
    print_step,
    print_success,
    print_warning,
)


def test_plain_output_when_not_a_terminal(capsys: pytest.CaptureFixture[str]) -> None:
    print_success("go.mod")
    print_error("boom")

    assert capsys.readouterr().out == "✓ go.mod\n❌ boom\n"


def test_colors_on_a_terminal(
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.delenv("NO_COLOR", raising=False)
    with patch("monokit.helpers.helpers_logging.sys") as fake_sys:
        fake_sys.stdout.isatty.return_value = True
        print_success("go.mod")

    assert capsys.readouterr().out == f"{Colors.GREEN}✓ go.mod{Colors.ENDC}\n"


def test_no_color_env_wins_over_terminal(
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
    with patch("monokit.helpers.helpers_logging.sys") as fake_sys:
        fake_sys.stdout.isatty.return_value = True
        print_error("boom")

    assert capsys.readouterr().out == "❌ boom\n"


def test_step_and_command_format(capsys: pytest.CaptureFixture[str]) -> None:
    print_step(2, "Run: pnpm dev")
    print_command(["go", "mod", "tidy"], "apps/api")
    print_command(["pnpm", "install"])

    assert capsys.readouterr().out == (
        "   2. Run: pnpm dev\n"
        "$ go mod tidy (in apps/api)\n"
        "$ pnpm install\n"
    )


@pytest.mark.parametrize(
    "helper",
    [print_header, print_info, print_success, print_warning, print_error, print_step, print_command],
)
def test_helpers_have_docstrings(helper: Callable[..., None]) -> None:
    assert helper.__doc__
