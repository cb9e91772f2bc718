"""Tests for logiclens.analysis.scanner."""

import pytest

from logiclens.analysis.scanner import GitignoreFilter, SourceScanner
from logiclens.core.config import ScanSettings


@pytest.fixture
def project_tree(tmp_path):
    """Small project with sources, vendored code, ignored and binary files."""
    files = {
        "src/app.js": "if (a) {}",
        "src/util/helpers.ts": "for (;;) {}",
        "src/native.c": "while (x) {}",
        "README.md": "if (docs) {}",
        "node_modules/lib/index.js": "if (dep) {}",
        "dist/bundle.js": "if (built) {}",
        "generated/out.js": "if (gen) {}",
        "lib/jquery.min.js": "if (min) {}",
        ".hidden/secret.js": "if (hidden) {}",
        ".gitignore": "generated/\n",
    }
    for relative, content in files.items():
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    (tmp_path / "src/empty.js").write_text("", encoding="utf-8")
    (tmp_path / "src/blob.js").write_bytes(b"if (x)\x00\x01\x02")
    return tmp_path


@pytest.fixture
def scanner():
    return SourceScanner.from_settings(ScanSettings())


class TestSourceScanner:
    """File discovery."""

    def test_default_scan(self, scanner, project_tree):
        found = [f.identifier for f in scanner.scan(project_tree)]
        assert found == ["src/app.js", "src/native.c", "src/util/helpers.ts"]

    def test_scanned_file_fields(self, scanner, project_tree):
        first = next(scanner.scan(project_tree))
        assert first.path == project_tree / "src" / "app.js"
        assert first.size_bytes == len("if (a) {}")
        assert first.read_text() == "if (a) {}"

    def test_max_files(self, project_tree):
        scanner = SourceScanner.from_settings(ScanSettings(), max_files=2)
        assert len(list(scanner.scan(project_tree))) == 2

    def test_include_override(self, project_tree):
        scanner = SourceScanner.from_settings(ScanSettings(), include_patterns=["**/*.c"])
        assert [f.identifier for f in scanner.scan(project_tree)] == ["src/native.c"]

    def test_empty_overrides_ignored(self, project_tree):
        scanner = SourceScanner.from_settings(
            ScanSettings(), include_patterns=[], exclude_patterns=[], max_files=None
        )
        assert scanner.max_files == 100
        assert len(list(scanner.scan(project_tree))) == 3

    def test_exclude_pattern(self, project_tree):
        scanner = SourceScanner(include_patterns=["**/*.js", "**/*.ts"], exclude_patterns=["src/util/**"])
        found = [f.identifier for f in scanner.scan(project_tree)]
        assert "src/util/helpers.ts" not in found
        assert "src/app.js" in found

    def test_gitignore_disabled(self, project_tree):
        scanner = SourceScanner(include_patterns=["**/*.js"], respect_gitignore=False)
        found = [f.identifier for f in scanner.scan(project_tree)]
        assert "generated/out.js" in found
        assert "node_modules/lib/index.js" not in found

    def test_max_file_size(self, project_tree):
        scanner = SourceScanner(include_patterns=["**/*.js"], max_file_size=5)
        assert list(scanner.scan(project_tree)) == []

    def test_missing_root(self, scanner, tmp_path):
        assert list(scanner.scan(tmp_path / "missing")) == []

    def test_deterministic(self, scanner, project_tree):
        first = [f.identifier for f in scanner.scan(project_tree)]
        second = [f.identifier for f in scanner.scan(project_tree)]
        assert first == second


class TestGitignoreFilter:
    """Ignore rules from .gitignore plus built-ins."""

    def test_builtin_ignores(self, tmp_path):
        gitignore = GitignoreFilter(tmp_path)
        assert gitignore.is_ignored(tmp_path / "node_modules", is_dir=True)
        assert gitignore.is_ignored(tmp_path / ".git", is_dir=True)
        assert not gitignore.is_ignored(tmp_path / "src", is_dir=True)

    def test_reads_gitignore(self, tmp_path):
        (tmp_path / ".gitignore").write_text("*.log\nbuild/\n", encoding="utf-8")
        gitignore = GitignoreFilter(tmp_path)
        assert gitignore.is_ignored(tmp_path / "debug.log")
        assert gitignore.is_ignored(tmp_path / "build", is_dir=True)
        assert not gitignore.is_ignored(tmp_path / "main.js")

    def test_disabled_keeps_builtins(self, tmp_path):
        (tmp_path / ".gitignore").write_text("*.js\n", encoding="utf-8")
        gitignore = GitignoreFilter(tmp_path, enabled=False)
        assert not gitignore.is_ignored(tmp_path / "main.js")
        assert gitignore.is_ignored(tmp_path / "node_modules", is_dir=True)

    def test_outside_root(self, tmp_path):
        gitignore = GitignoreFilter(tmp_path / "a")
        assert not gitignore.is_ignored(tmp_path / "b" / "node_modules", is_dir=True)
