import streamlit as st
from typing import Any, Callable, Iterable

from domain.models import Action, Button, Image, Label, Notification, Panel


def _button_key(action: Action, key_prefix: str) -> str:
    return f"{key_prefix}btn_{action.kind.value}_{action.value or ''}"


def notification(widget: Notification):
    """Humanized notifications are transient toasts, everything else stays on the page."""
    if widget.kind == "humanized":
        st.toast(widget.message)
    elif widget.kind == "warning":
        st.warning(widget.message)
    else:
        st.error(widget.message)


def image(widget: Image):
    if widget.missing:
        st.caption(widget.caption or f"Image not available: {widget.source}")
        return
    st.image(widget.resolved_path, caption=widget.caption)


def render_widget(widget: Any, on_action: Callable[[Action], None], key_prefix: str = ""):
    if isinstance(widget, Notification):
        notification(widget)
    elif isinstance(widget, Label):
        st.write(widget.text)
    elif isinstance(widget, Image):
        image(widget)
    elif isinstance(widget, Button):
        st.button(
            widget.caption,
            key=_button_key(widget.action, key_prefix),
            on_click=on_action,
            args=(widget.action,),
        )
    elif isinstance(widget, Panel):
        with st.container(border=True):
            render_tree(widget.children, on_action, key_prefix=f"{key_prefix}panel_")
    else:
        raise TypeError(f"Cannot render {type(widget).__name__}")


def render_tree(widgets: Iterable[Any], on_action: Callable[[Action], None], key_prefix: str = ""):
    """Draw a view's widget tree; button clicks are reported through on_action."""
    for w in widgets:
        render_widget(w, on_action, key_prefix)
