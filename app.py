import logging

import streamlit as st

from domain.constants import (
    LOG_FORMAT,
    LOG_LEVEL,
    MAIN_VIEW,
    PAGE_TITLE,
    ROUTER_KEY,
    START_VIEW,
    VIEW_QUERY_PARAM,
)
from services.navigation import Router
from ui.components import render_tree
from views.main import MainView
from views.start import StartView

logger = logging.getLogger(__name__)

# --- Route table ---
# Maps a navigation path to the view class shown there. Each session builds
# its own view instances from it; the table itself never changes.
ROUTES = {
    START_VIEW: StartView,
    MAIN_VIEW: MainView,
}


def build_router(routes=None) -> Router:
    """Create a router with one instance of every view in `routes`."""
    router = Router()
    for path, view_cls in (routes or ROUTES).items():
        router.register(path, view_cls(router.navigate))
    return router


def session_router() -> Router:
    """
    Return the router of the current browser session, creating it on first use.

    A fresh session enters the view named by the `view` query parameter so
    links like ?view=main/cat open directly; anything unknown falls back to
    the start view.
    """
    if ROUTER_KEY not in st.session_state:
        router = build_router()
        requested = st.query_params.get(VIEW_QUERY_PARAM, START_VIEW)
        if router.navigate_to(requested) is None:
            error = router.last_error
            router.navigate_to(START_VIEW)
            router.last_error = error
        st.session_state[ROUTER_KEY] = router
    return st.session_state[ROUTER_KEY]


def main():
    """
    Main application entry.

    Builds or restores the session router, draws the current view and keeps
    the query string in sync with the navigation state.
    """
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    st.set_page_config(page_title=PAGE_TITLE)

    router = session_router()

    if router.last_error is not None:
        st.warning(str(router.last_error))
        router.last_error = None

    view = router.current_view
    render_tree(view.render(), view.handle, key_prefix=f"{view.name or 'start'}_")

    if router.state is not None:
        st.query_params[VIEW_QUERY_PARAM] = router.state


if __name__ == "__main__":
    main()
