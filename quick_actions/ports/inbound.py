"""Inbound port — host-agnostic representation of an invocable command."""

from dataclasses import dataclass

from quick_actions.domain.models import Action


@dataclass
class ActionCommand:
    """One registered command, bound to the action it runs."""

    command_id: str  # "action-<action id>"
    name: str
    action: Action
