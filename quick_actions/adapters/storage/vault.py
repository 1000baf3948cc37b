"""Filesystem vault — implements DocumentRepository over a directory."""

from pathlib import Path, PurePosixPath
from typing import List

from quick_actions.adapters.storage.atomic import atomic_write_text
from quick_actions.domain.section import parse_headings
from quick_actions.ports.outbound import (
    DocumentExistsError,
    DocumentInfo,
    DocumentStoreError,
    HeadingInfo,
)


class FileSystemVault:
    """Markdown documents under `root`, addressed by "/"-separated relative paths.

    Hidden directories (".git", ".obsidian", ".quick-actions", ...) are not listed.
    """

    def __init__(self, root: str = "."):
        self._root = Path(root).resolve()

    @property
    def root(self) -> Path:
        return self._root

    def _path(self, path: str) -> Path:
        relative = PurePosixPath(path.lstrip("/"))
        if ".." in relative.parts:
            raise DocumentStoreError(f"Path escapes the vault: {path}")
        return self._root.joinpath(*relative.parts)

    def exists(self, path: str) -> bool:
        return self._path(path).is_file()

    def read(self, path: str) -> str:
        try:
            # newline="" keeps "\r\n" intact; lines are split on "\n" only
            with open(self._path(path), encoding="utf-8", newline="") as f:
                return f.read()
        except OSError as e:
            raise DocumentStoreError(f"Cannot read {path}: {e}") from e

    def create(self, path: str, text: str) -> DocumentInfo:
        target = self._path(path)
        if target.exists():
            raise DocumentExistsError(f"File already exists: {path}")
        try:
            atomic_write_text(target, text)
        except OSError as e:
            raise DocumentStoreError(f"Cannot create {path}: {e}") from e
        return DocumentInfo(path=path, basename=target.stem)

    def write(self, path: str, text: str) -> None:
        try:
            atomic_write_text(self._path(path), text)
        except OSError as e:
            raise DocumentStoreError(f"Cannot write {path}: {e}") from e

    def list_documents(self) -> List[DocumentInfo]:
        docs = []
        for file in self._root.rglob("*.md"):
            relative = file.relative_to(self._root)
            if any(part.startswith(".") for part in relative.parts):
                continue
            if file.is_file():
                docs.append(DocumentInfo(path=relative.as_posix(), basename=file.stem))
        return docs

    def headings(self, path: str) -> List[HeadingInfo]:
        return parse_headings(self.read(path))
