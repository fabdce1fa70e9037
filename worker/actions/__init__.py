"""Filesystem actions executed by the worker."""

from worker.actions.base import Action, ActionKind
from worker.actions.copy_action import CopyAction
from worker.actions.list_action import ListAction
from worker.actions.remove_action import RemoveAction

__all__ = [
    "Action",
    "ActionKind",
    "CopyAction",
    "ListAction",
    "RemoveAction",
]
