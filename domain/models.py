from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Tuple


class Animal(str, Enum):
    PIG = "pig"
    CAT = "cat"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class ActionKind(Enum):
    GO_TO_MAIN = "go_to_main"
    SELECT_ANIMAL = "select_animal"
    GO_BACK = "go_back"


@dataclass(frozen=True)
class Action:
    kind: ActionKind
    value: Optional[str] = None


@dataclass(frozen=True)
class Route:
    path: str
    view: Any  # anything exposing enter(parameter) and render()


@dataclass(frozen=True)
class NavigationEvent:
    """A resolved navigation request.

    `parameter` is whatever followed the first '/' of the requested path;
    an empty remainder is stored as None.
    """
    path: str
    view_name: str
    parameter: Optional[str] = None


# --- Widget tree ---
# Views describe what to show with these; ui.components turns them into
# Streamlit calls.

@dataclass(frozen=True)
class Notification:
    message: str
    kind: str = "humanized"  # humanized | warning | error


@dataclass(frozen=True)
class Label:
    text: str


@dataclass(frozen=True)
class Image:
    source: str  # relative asset path, e.g. img/pig.png
    resolved_path: Optional[str] = None  # None when the file is missing
    caption: Optional[str] = None

    @property
    def missing(self) -> bool:
        return self.resolved_path is None


@dataclass(frozen=True)
class Button:
    caption: str
    action: Action


@dataclass(frozen=True)
class Panel:
    children: Tuple[Any, ...] = field(default_factory=tuple)
