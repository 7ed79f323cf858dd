from dataclasses import dataclass
from typing import Callable, List, Optional

from domain.constants import START_VIEW, WELCOME_MESSAGE
from domain.models import Action, ActionKind, Button, Notification
from views.actions import dispatch


@dataclass
class StartState:
    pending_notification: Optional[Notification] = None


def render(state: StartState) -> List[object]:
    widgets: List[object] = []
    if state.pending_notification is not None:
        widgets.append(state.pending_notification)
    widgets.append(Button("Go to Main View", Action(ActionKind.GO_TO_MAIN)))
    return widgets


class StartView:
    """Initial view: a welcome message and the way into the main view."""

    name = START_VIEW

    def __init__(self, navigate: Callable[[str], object]):
        self.navigate = navigate
        self.state = StartState()

    def enter(self, parameter: Optional[str] = None):
        self.state.pending_notification = Notification(WELCOME_MESSAGE)

    def render(self) -> List[object]:
        # the welcome notification is shown once per enter
        widgets = render(self.state)
        self.state.pending_notification = None
        return widgets

    def handle(self, action: Action):
        dispatch(action, self.navigate)
