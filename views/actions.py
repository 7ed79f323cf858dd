from typing import Callable

from domain.constants import MAIN_VIEW, START_VIEW
from domain.models import Action, ActionKind


def action_path(action: Action) -> str:
    """Navigation path an action leads to."""
    if action.kind is ActionKind.GO_TO_MAIN:
        return MAIN_VIEW
    if action.kind is ActionKind.SELECT_ANIMAL:
        return f"{MAIN_VIEW}/{action.value}"
    if action.kind is ActionKind.GO_BACK:
        return START_VIEW
    raise ValueError(f"Unknown action kind: {action.kind!r}")


def dispatch(action: Action, navigate: Callable[[str], object]):
    navigate(action_path(action))
