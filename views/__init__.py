"""View modules for the animal farm router.

Each view is a small state object plus a pure `render(state)` function that
returns a widget tree (see `domain.models`). Views get the router's
`navigate` callable injected and never talk to Streamlit directly; drawing
the widget tree is the job of `ui.components`.

Add a new view by giving it `enter(parameter)`, `render()` and
`handle(action)` and registering it in `ROUTES` inside `app.py`.
"""
