"""Path based navigation between registered views."""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Tuple

from domain.errors import DuplicateRouteError, RouteNotFoundError
from domain.models import NavigationEvent, Route

logger = logging.getLogger(__name__)

ViewChangeListener = Callable[[NavigationEvent], Optional[bool]]
ErrorListener = Callable[[RouteNotFoundError], None]


def split_path(path: str) -> Tuple[str, Optional[str]]:
    """Split a navigation path into (view name, parameter).

    Only the first '/' separates; everything after it is the parameter.
    Fragment style prefixes ('!', '/') are ignored and an empty parameter
    is returned as None.
    """
    path = (path or "").lstrip("!").lstrip("/")
    name, sep, rest = path.partition("/")
    return name, (rest if sep and rest else None)


class Router:
    """Maps navigation paths to views and enters them.

    Lookup is an exact match of the part before the first '/' against the
    registered paths. Unknown paths never raise out of navigate_to: the
    RouteNotFoundError is logged, handed to error listeners and kept in
    `last_error`, and the current view stays as it was.
    """

    def __init__(self):
        self._routes: Dict[str, Route] = {}
        self._before: List[ViewChangeListener] = []
        self._after: List[ViewChangeListener] = []
        self._error_listeners: List[ErrorListener] = []
        self.state: Optional[str] = None
        self.current_view = None
        self.last_error: Optional[RouteNotFoundError] = None

    @property
    def routes(self) -> Dict[str, Route]:
        return dict(self._routes)

    def register(self, path: str, view) -> Route:
        if path in self._routes:
            raise DuplicateRouteError(path)
        route = Route(path=path, view=view)
        self._routes[path] = route
        logger.debug("Registered view %r for path %r", type(view).__name__, path)
        return route

    def resolve(self, path: str) -> Tuple[Route, Optional[str]]:
        name, parameter = split_path(path)
        route = self._routes.get(name)
        if route is None:
            raise RouteNotFoundError(path)
        return route, parameter

    def add_view_change_listener(self, listener: ViewChangeListener, after: bool = False):
        """Listen to view changes.

        Listeners run with the pending NavigationEvent before the view is
        entered; one returning False cancels the change. With after=True the
        listener runs once the view has been entered and its result is ignored.
        """
        (self._after if after else self._before).append(listener)

    def add_error_listener(self, listener: ErrorListener):
        self._error_listeners.append(listener)

    def navigate_to(self, path: str) -> Optional[NavigationEvent]:
        try:
            route, parameter = self.resolve(path)
        except RouteNotFoundError as err:
            logger.warning("%s", err)
            self.last_error = err
            for listener in self._error_listeners:
                listener(err)
            return None

        event = NavigationEvent(path=path, view_name=route.path, parameter=parameter)
        for listener in self._before:
            if listener(event) is False:
                logger.debug("Navigation to %r cancelled by listener", path)
                return None

        self.last_error = None
        logger.debug("Entering view %r with parameter %r", route.path, parameter)
        route.view.enter(parameter)
        self.current_view = route.view
        self.state = path

        for listener in self._after:
            listener(event)
        return event

    def navigate(self, path: str) -> None:
        """navigate_to without the return value, for use as a plain callback."""
        self.navigate_to(path)
