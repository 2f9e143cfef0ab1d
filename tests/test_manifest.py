"""Tests for go.work generation and workspace sync."""

from __future__ import annotations

import pytest

from monokit.core.errors import ConfigError
from monokit.core.manifest import generate_go_work, section_label, sync_workspace
from monokit.helpers.project_config import Settings

from tests.conftest import MakeMemoryWorkspace


class TestGenerateGoWork:

    def test_sections_in_order(self) -> None:
        result = generate_go_work({
            "apps": ["./apps/gateway", "./apps/auth"],
            "packages": ["./packages/logger"],
        })

        body = result.split("go 1.23\n", 1)[1]
        assert body == (
            "\n"
            "use (\n"
            "\t// Apps\n"
            "\t./apps/gateway\n"
            "\t./apps/auth\n"
            "\n"
            "\t// Packages\n"
            "\t./packages/logger\n"
            ")\n"
        )

    def test_header_precedes_version_directive(self) -> None:
        lines = generate_go_work({"apps": ["./apps/a"]}).splitlines()

        version_index = lines.index("go 1.23")
        assert all(line.startswith("//") for line in lines[:version_index])
        assert lines[version_index + 1] == ""
        assert lines[version_index + 2] == "use ("

    def test_empty_sections_are_skipped(self) -> None:
        result = generate_go_work({
            "apps": [],
            "packages": ["./packages/logger"],
            "tools": [],
        })

        assert "// Apps" not in result
        assert "// Tools" not in result
        assert "use (\n\t// Packages\n\t./packages/logger\n)\n" in result

    def test_no_blank_line_before_closing_paren(self) -> None:
        result = generate_go_work({"apps": ["./apps/a"], "packages": ["./packages/b"], "zz": []})

        assert "\n\n)" not in result
        assert result.endswith("\t./packages/b\n)\n")

    def test_custom_go_version(self) -> None:
        assert "\ngo 1.22\n" in generate_go_work({"apps": ["./apps/a"]}, go_version="1.22")

    def test_deterministic(self) -> None:
        modules = {"apps": ["./apps/a"], "packages": ["./packages/b"]}

        assert generate_go_work(modules) == generate_go_work(dict(modules))

    def test_section_label_capitalizes_first_character_only(self) -> None:
        assert section_label("apps") == "Apps"
        assert section_label("shared/libs") == "Shared/libs"


class TestSyncWorkspace:

    def test_writes_manifest_when_absent(
        self,
        make_memory_workspace: MakeMemoryWorkspace,
        settings: Settings,
    ) -> None:
        fs = make_memory_workspace(modules=["apps/gateway", "apps/auth", "packages/logger"])

        result = sync_workspace(settings, fs)

        assert result.written is True
        assert result.module_count == 3
        content = fs.read_text("go.work")
        assert content.index("./apps/auth") < content.index("./apps/gateway")
        assert "\t// Packages\n\t./packages/logger\n" in content

    def test_second_run_is_a_no_op(
        self,
        make_memory_workspace: MakeMemoryWorkspace,
        settings: Settings,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        fs = make_memory_workspace(modules=["apps/gateway"])
        sync_workspace(settings, fs)
        writes_after_first = list(fs.writes)
        capsys.readouterr()

        result = sync_workspace(settings, fs)

        assert result.written is False
        assert fs.writes == writes_after_first
        assert "already up to date" in capsys.readouterr().out

    def test_rewrites_when_modules_change(
        self,
        make_memory_workspace: MakeMemoryWorkspace,
        settings: Settings,
    ) -> None:
        fs = make_memory_workspace(modules=["apps/gateway"])
        sync_workspace(settings, fs)
        fs.write_text("packages/http/go.mod", "module http\n")

        result = sync_workspace(settings, fs)

        assert result.written is True
        assert "./packages/http" in fs.read_text("go.work")

    def test_overwrites_hand_edited_manifest(
        self,
        make_memory_workspace: MakeMemoryWorkspace,
        settings: Settings,
    ) -> None:
        fs = make_memory_workspace(
            modules=["apps/gateway"],
            extra_files={"go.work": "go 1.21\n\nuse ./apps/gateway\n"},
        )

        assert sync_workspace(settings, fs).written is True
        assert fs.read_text("go.work").startswith("// Auto-generated")

    def test_zero_modules_is_config_error(
        self,
        make_memory_workspace: MakeMemoryWorkspace,
        settings: Settings,
    ) -> None:
        fs = make_memory_workspace(extra_files={"apps/empty/README.md": ""})

        with pytest.raises(ConfigError, match="No Go modules found"):
            sync_workspace(settings, fs)
        assert fs.writes == []

    def test_missing_scan_root_does_not_block_sync(
        self,
        make_memory_workspace: MakeMemoryWorkspace,
        settings: Settings,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        fs = make_memory_workspace(modules=["apps/gateway"])

        result = sync_workspace(settings, fs)

        assert result.module_count == 1
        assert "Directory not found: packages/" in capsys.readouterr().out

    def test_uses_configured_manifest_and_version(
        self,
        make_memory_workspace: MakeMemoryWorkspace,
        settings: Settings,
    ) -> None:
        fs = make_memory_workspace(modules=["apps/gateway"])
        custom = Settings(
            root=settings.root,
            module_prefix="acme-go",
            manifest="workspace/go.work",
            go_version="1.22",
        )

        sync_workspace(custom, fs)

        assert "\ngo 1.22\n" in fs.read_text("workspace/go.work")
