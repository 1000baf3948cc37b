"""Port interfaces (Hexagonal Architecture)."""

from quick_actions.ports.inbound import ActionCommand
from quick_actions.ports.outbound import (
    DISMISSED,
    DialogResult,
    Dismissed,
    DocumentExistsError,
    DocumentInfo,
    DocumentRepository,
    DocumentStoreError,
    HeadingInfo,
    HttpTransport,
    InteractionPort,
    NotificationPort,
    SecretStore,
    Selected,
    TaskLinePort,
    TextGenerator,
    TransportError,
    ViewPort,
)

__all__ = [
    "ActionCommand",
    "DISMISSED",
    "DialogResult",
    "Dismissed",
    "DocumentExistsError",
    "DocumentInfo",
    "DocumentRepository",
    "DocumentStoreError",
    "HeadingInfo",
    "HttpTransport",
    "InteractionPort",
    "NotificationPort",
    "SecretStore",
    "Selected",
    "TaskLinePort",
    "TextGenerator",
    "TransportError",
    "ViewPort",
]
