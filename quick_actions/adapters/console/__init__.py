"""Console adapters — terminal dialogs, notifications and editor view."""

from quick_actions.adapters.console.interaction import ConsoleInteraction
from quick_actions.adapters.console.notifier import ConsoleNotifier
from quick_actions.adapters.console.view import EditorView

__all__ = ["ConsoleInteraction", "ConsoleNotifier", "EditorView"]
