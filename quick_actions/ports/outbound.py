"""Outbound ports — interfaces for the host collaborators an action talks to."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol, Union, runtime_checkable


class DocumentStoreError(Exception):
    """Raised by document repositories when a store operation fails."""


class DocumentExistsError(DocumentStoreError):
    """Raised by create() when a document already exists at the path."""


class TransportError(Exception):
    """Raised by HTTP transports on network failures and error responses."""


@dataclass(frozen=True)
class DocumentInfo:
    """A document listed by the repository."""

    path: str  # vault-relative, "/"-separated
    basename: str  # file name without extension


@dataclass(frozen=True)
class HeadingInfo:
    """One entry of a document's heading index."""

    text: str
    level: int
    line: int  # 0-based line number


@dataclass(frozen=True)
class Selected:
    """The user submitted or picked a value."""

    value: str


class Dismissed:
    """The user closed the dialog without choosing anything."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "DISMISSED"


DISMISSED = Dismissed()

DialogResult = Union[Selected, Dismissed]


@runtime_checkable
class DocumentRepository(Protocol):
    """Key-value store of text documents addressed by path."""

    def exists(self, path: str) -> bool: ...
    def read(self, path: str) -> str: ...
    def create(self, path: str, text: str) -> DocumentInfo: ...
    def write(self, path: str, text: str) -> None: ...
    def list_documents(self) -> List[DocumentInfo]: ...
    def headings(self, path: str) -> List[HeadingInfo]: ...


@runtime_checkable
class InteractionPort(Protocol):
    """Modal dialogs. Each call resolves once the dialog is closed."""

    async def prompt_text(self, label: str, multiline: bool = False) -> DialogResult: ...

    async def pick_file(self, candidates: List[DocumentInfo]) -> DialogResult: ...

    async def pick_choice(self, label: str, options: List[str]) -> DialogResult: ...


@runtime_checkable
class TaskLinePort(Protocol):
    """Optional task-line editor provided by an external tool."""

    async def create_task_line(self) -> DialogResult: ...


@runtime_checkable
class ViewPort(Protocol):
    """Shows a document to the user, optionally at a given line."""

    async def open(self, path: str, line: Optional[int] = None) -> None: ...


@runtime_checkable
class SecretStore(Protocol):
    """Interface for looking up API keys by secret id."""

    def get_secret(self, secret_id: str) -> Optional[str]: ...


@runtime_checkable
class HttpTransport(Protocol):
    """Interface for JSON-over-HTTP POST requests."""

    async def post(self, url: str, headers: Dict[str, str], body: Dict[str, Any]) -> Dict[str, Any]: ...


@runtime_checkable
class TextGenerator(Protocol):
    """Remote text generation. Returns None on any failure."""

    async def generate(
        self,
        model: str,
        api_key: str,
        system_prompt: str,
        user_prompt: str,
    ) -> Optional[str]: ...


@runtime_checkable
class NotificationPort(Protocol):
    """Fire-and-forget user feedback."""

    def notify(self, message: str, persistent: bool = False) -> None: ...
