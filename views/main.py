from dataclasses import dataclass
from typing import Callable, List, Optional

from domain.constants import ANIMALS, MAIN_VIEW
from domain.models import Action, ActionKind, Button
from views.actions import dispatch
from views.animal_panel import AnimalPanel


@dataclass
class MainState:
    panel: Optional[AnimalPanel] = None


def render(state: MainState) -> List[object]:
    widgets: List[object] = [
        Button(animal.label, Action(ActionKind.SELECT_ANIMAL, animal.value))
        for animal in ANIMALS
    ]
    widgets.append(Button("Go back to the start", Action(ActionKind.GO_BACK)))
    if state.panel is not None:
        widgets.append(state.panel.render())
    return widgets


class MainView:
    """
    Animal buttons plus the panel of the selected animal.

    Entering without a parameter leaves the view as it is, so a panel attached
    by an earlier selection stays visible. Entering with a parameter replaces
    the attached panel rather than stacking a second one.
    """

    name = MAIN_VIEW

    def __init__(self, navigate: Callable[[str], object], image_dirs=None):
        self.navigate = navigate
        self.image_dirs = image_dirs
        self.state = MainState()

    def enter(self, parameter: Optional[str] = None):
        if not parameter:
            return
        self.state.panel = AnimalPanel(parameter, self.image_dirs)

    def render(self) -> List[object]:
        return render(self.state)

    def handle(self, action: Action):
        dispatch(action, self.navigate)
