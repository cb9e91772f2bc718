"""
ⒸAngelaMos | 2026
analysis/scanner.py
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import pathspec

if TYPE_CHECKING:
    from collections.abc import Iterator

    from logiclens.core.config import ScanSettings


@dataclass(frozen=True)
class ScannedFile:
    """
    A source file discovered during a directory scan
    """
    path: Path
    relative_path: Path
    size_bytes: int

    @property
    def identifier(self) -> str:
        return self.relative_path.as_posix()

    def read_text(self) -> str:
        return self.path.read_text(encoding="utf-8")


class GitignoreFilter:
    """
    Filters files based on the root .gitignore
    """

    ALWAYS_IGNORED = [".git/", "node_modules/"]

    def __init__(self, root: Path, enabled: bool = True) -> None:
        self.root = root
        patterns = list(self.ALWAYS_IGNORED)

        gitignore_path = root / ".gitignore"
        if enabled and gitignore_path.is_file():
            patterns.extend(gitignore_path.read_text(encoding="utf-8", errors="replace").splitlines())

        self.spec = pathspec.PathSpec.from_lines("gitwildmatch", patterns)

    def is_ignored(self, path: Path, is_dir: bool = False) -> bool:
        try:
            rel_path = path.relative_to(self.root).as_posix()
        except ValueError:
            return False
        if is_dir:
            rel_path += "/"
        return self.spec.match_file(rel_path)


class SourceScanner:
    """
    Finds source files under a directory in a stable order
    """

    BINARY_CHECK_BYTES = 8192

    def __init__(
        self,
        include_patterns: list[str],
        exclude_patterns: list[str] | None = None,
        max_files: int | None = None,
        max_file_size: int = 1024 * 1024,
        respect_gitignore: bool = True,
    ) -> None:
        self.include_patterns = include_patterns
        self.exclude_patterns = exclude_patterns or []
        self.max_files = max_files
        self.max_file_size = max_file_size
        self.respect_gitignore = respect_gitignore
        self._include_spec = pathspec.PathSpec.from_lines("gitwildmatch", self.include_patterns)
        self._exclude_spec = pathspec.PathSpec.from_lines("gitwildmatch", self.exclude_patterns)

    @classmethod
    def from_settings(cls, settings: ScanSettings, **overrides) -> SourceScanner:
        """
        Build a scanner from scan settings with optional field overrides
        """
        values = settings.model_dump()
        values.update({k: v for k, v in overrides.items() if v})
        return cls(**values)

    def scan(self, root: Path) -> Iterator[ScannedFile]:
        """
        Yield matching files, directories and names sorted for determinism
        Stops after max_files
        """
        if not root.is_dir():
            return

        gitignore = GitignoreFilter(root, enabled=self.respect_gitignore)
        found = 0

        for current, dirs, files in os.walk(root):
            current_path = Path(current)
            dirs[:] = sorted(
                d for d in dirs
                if not d.startswith(".")
                and not gitignore.is_ignored(current_path / d, is_dir=True)
            )

            for filename in sorted(files):
                scanned = self._check_file(root, current_path / filename, gitignore)
                if scanned is None:
                    continue

                yield scanned
                found += 1
                if self.max_files is not None and found >= self.max_files:
                    return

    def _check_file(self, root: Path, file_path: Path, gitignore: GitignoreFilter) -> ScannedFile | None:
        rel_path = file_path.relative_to(root)
        rel = rel_path.as_posix()

        if not self._include_spec.match_file(rel):
            return None
        if self._exclude_spec.match_file(rel):
            return None
        if gitignore.is_ignored(file_path):
            return None

        try:
            size = file_path.stat().st_size
        except OSError:
            return None
        if size == 0 or size > self.max_file_size:
            return None
        if self._is_binary(file_path):
            return None

        return ScannedFile(path=file_path, relative_path=rel_path, size_bytes=size)

    def _is_binary(self, file_path: Path) -> bool:
        """
        Check if file appears to be binary
        """
        try:
            with open(file_path, "rb") as f:
                chunk = f.read(self.BINARY_CHECK_BYTES)
        except OSError:
            return True
        if b"\x00" in chunk:
            return True
        if not chunk:
            return False
        text_chars = sum(1 for b in chunk if 32 <= b <= 126 or b in (9, 10, 13) or b >= 128)
        return text_chars / len(chunk) < 0.7
