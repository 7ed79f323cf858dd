"""
Streamlit rendering of the widget trees produced by the views.

Views never import Streamlit; they describe labels, images, buttons and
panels with the dataclasses in `domain.models`, and the functions here draw
them (`from ui import components`).
"""

from .widgets import (
    render_tree,
    render_widget,
)
