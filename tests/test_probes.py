"""Tests for dockgen.probes."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from dockgen import probes
from dockgen.probes import (
    any_file_with_extension,
    file_exists,
    iter_files_with_extensions,
    top_level_files,
)


def test_file_exists_checks_direct_children(repo_builder) -> None:
    root = repo_builder.write({"requirements.txt": "flask\n", "src/app.py": "print('hi')\n"})

    assert file_exists(root, "requirements.txt") is True
    assert file_exists(root, "src") is True
    assert file_exists(root, "app.py") is False


def test_file_exists_returns_false_for_missing_directory(tmp_path: Path) -> None:
    assert file_exists(tmp_path / "missing", "go.mod") is False


def test_any_file_with_extension_searches_recursively(repo_builder) -> None:
    root = repo_builder.write({"a/b/c/deep.rs": "fn main() {}\n", "README.md": "# demo\n"})

    assert any_file_with_extension(root, ".rs") is True
    assert any_file_with_extension(root, ".go") is False


def test_any_file_with_extension_is_case_sensitive_and_exact(repo_builder) -> None:
    root = repo_builder.write({"SCRIPT.PY": "print('x')\n", "notes.py.txt": "text\n"})

    assert any_file_with_extension(root, ".py") is False
    assert any_file_with_extension(root, ".PY") is True
    assert any_file_with_extension(root, ".txt") is True


def test_any_file_with_extension_ignores_directories_named_like_files(repo_builder) -> None:
    root = repo_builder.path()
    (root / "package.js").mkdir()

    assert any_file_with_extension(root, ".js") is False


def test_any_file_with_extension_returns_false_for_missing_root(tmp_path: Path) -> None:
    assert any_file_with_extension(tmp_path / "missing", ".py") is False


def test_any_file_with_extension_stops_at_first_match(repo_builder, monkeypatch) -> None:
    root = repo_builder.write({"first.py": "import os\n"})

    def _walk(top, onerror=None, followlinks=False):
        yield str(root), [], ["first.py"]
        raise AssertionError("walk continued after a match")

    monkeypatch.setattr(probes.os, "walk", _walk)

    assert any_file_with_extension(root, ".py") is True


def test_symlink_cycles_do_not_loop(repo_builder) -> None:
    root = repo_builder.write({"pkg/module.txt": "data\n"})
    try:
        os.symlink(root, root / "pkg" / "loop", target_is_directory=True)
    except (OSError, NotImplementedError):  # pragma: no cover - platform without symlinks
        pytest.skip("symlinks unavailable")

    assert any_file_with_extension(root, ".py") is False


@pytest.mark.skipif(
    not hasattr(os, "geteuid") or os.geteuid() == 0,
    reason="permission bits are not enforced for root",
)
def test_unreadable_subdirectory_is_skipped(repo_builder) -> None:
    root = repo_builder.write({"locked/hidden.py": "import os\n", "open/visible.go": "package main\n"})
    locked = root / "locked"
    locked.chmod(0)
    try:
        assert any_file_with_extension(root, ".py") is False
        assert any_file_with_extension(root, ".go") is True
    finally:
        locked.chmod(0o755)


def test_iter_files_with_extensions_yields_every_match(repo_builder) -> None:
    root = repo_builder.write(
        {
            "index.js": "",
            "src/app.ts": "",
            "src/styles.css": "",
        }
    )

    found = sorted(path.relative_to(root).as_posix() for path in iter_files_with_extensions(root, (".js", ".ts")))

    assert found == ["index.js", "src/app.ts"]


def test_top_level_files_lists_only_regular_files(repo_builder) -> None:
    root = repo_builder.write({"App.csproj": "<Project />\n", "src/Program.cs": ""})

    assert top_level_files(root) == ["App.csproj"]
    assert top_level_files(root / "missing") == []
