"""In-memory vault — DocumentRepository backed by a dict."""

from typing import Dict, List, Optional

from quick_actions.domain.section import parse_headings
from quick_actions.ports.outbound import (
    DocumentExistsError,
    DocumentInfo,
    DocumentStoreError,
    HeadingInfo,
)


def _basename(path: str) -> str:
    name = path.rsplit("/", 1)[-1]
    return name.rsplit(".", 1)[0] if "." in name else name


class MemoryVault:
    """Dict of path -> text. Records every write for inspection."""

    def __init__(self, documents: Optional[Dict[str, str]] = None):
        self.documents: Dict[str, str] = dict(documents or {})
        self.writes: List[str] = []

    def exists(self, path: str) -> bool:
        return path in self.documents

    def read(self, path: str) -> str:
        if path not in self.documents:
            raise DocumentStoreError(f"No such document: {path}")
        return self.documents[path]

    def create(self, path: str, text: str) -> DocumentInfo:
        if path in self.documents:
            raise DocumentExistsError(f"File already exists: {path}")
        self.documents[path] = text
        self.writes.append(path)
        return DocumentInfo(path=path, basename=_basename(path))

    def write(self, path: str, text: str) -> None:
        if path not in self.documents:
            raise DocumentStoreError(f"No such document: {path}")
        self.documents[path] = text
        self.writes.append(path)

    def list_documents(self) -> List[DocumentInfo]:
        return [
            DocumentInfo(path=p, basename=_basename(p))
            for p in self.documents
            if p.endswith(".md")
        ]

    def headings(self, path: str) -> List[HeadingInfo]:
        return parse_headings(self.read(path))
