"""Source file discovery and text file records."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Callable


def read_file(path: Path | str) -> str:
    """Read a UTF-8 text file, keeping its line endings as they are."""
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def write_file(path: Path | str, data: str) -> None:
    """Write a UTF-8 text file through a temp file and an atomic rename."""
    path = Path(path)
    tmp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            newline="",
            dir=str(path.parent),
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as f:
            tmp_path = Path(f.name)
            f.write(data)
        if path.exists():
            os.chmod(tmp_path, path.stat().st_mode & 0o7777)
        os.replace(tmp_path, path)
        tmp_path = None
    finally:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()


class SourceFile:
    """A file's original text, its current text and the passes that changed it.

    The file counts as modified when ``data`` is no longer the very object
    read from disk.
    """

    def __init__(self, path: Path | str, rel_name: str | None = None) -> None:
        self.path = Path(path)
        self.rel_name = rel_name or str(path)
        self.original: str | None = None
        self.data: str | None = None
        self.ops: list[str] = []

    def __repr__(self) -> str:
        return f"SourceFile({self.rel_name!r})"

    @property
    def is_loaded(self) -> bool:
        return self.data is not None

    @property
    def is_modified(self) -> bool:
        return self.data is not self.original

    def read(self) -> SourceFile:
        self.original = read_file(self.path)
        self.data = self.original
        return self

    def write(self) -> SourceFile:
        if not self.is_loaded:
            raise RuntimeError(f"{self.rel_name}: cannot write a file that was never read")
        write_file(self.path, self.data)
        return self

    def set_data(self, data: str, *comments: str) -> SourceFile:
        """Replace ``data`` and record ``comments`` if ``data`` is a new object."""
        if data is not self.data:
            self.data = data
            self.ops.extend(comments)
        return self


def list_dir(
    root: Path | str,
    exclude: list[str] | None = None,
    accept: Callable[[str], bool] | None = None,
) -> list[SourceFile]:
    """Recursively collect files under ``root``.

    Symbolic links are skipped. ``exclude`` holds paths relative to
    ``root`` (``/``-separated) of files or directories to leave out.
    ``accept`` receives a file's base name. Files of a directory come
    before the files of its subdirectories.
    """
    excluded = set(exclude or [])
    return _list_dir(Path(root), "", excluded, accept)


def _list_dir(
    directory: Path,
    rel_dir: str,
    exclude: set[str],
    accept: Callable[[str], bool] | None,
) -> list[SourceFile]:
    files: list[SourceFile] = []
    nested: list[SourceFile] = []

    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
        rel_name = f"{rel_dir}/{entry.name}" if rel_dir else entry.name
        if rel_name in exclude or entry.is_symlink():
            continue
        if entry.is_dir():
            nested.extend(_list_dir(entry, rel_name, exclude, accept))
        elif entry.is_file():
            if accept is None or accept(entry.name):
                files.append(SourceFile(entry, rel_name))

    return files + nested
