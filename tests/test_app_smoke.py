import pytest
from unittest.mock import patch, MagicMock

from domain.errors import DuplicateRouteError, RouteNotFoundError
from domain.models import Action, ActionKind, Button, Image, Label, Notification, Panel

# Mock streamlit before importing the app
st_mock = MagicMock()


def _app():
    with patch.dict("sys.modules", {"streamlit": st_mock}):
        import app
    return app


def _fake_st(query=None):
    fake = MagicMock()
    fake.session_state = {}
    fake.query_params = dict(query or {})
    return fake


def test_route_table_structure():
    app = _app()
    """
    The route table maps the start and main paths to view classes.
    """
    assert set(app.ROUTES) == {"", "main"}
    for path, view_cls in app.ROUTES.items():
        assert callable(view_cls)
        assert view_cls.name == path


def test_build_router_registers_every_route():
    app = _app()
    router = app.build_router()
    assert set(router.routes) == set(app.ROUTES)
    for path, route in router.routes.items():
        assert isinstance(route.view, app.ROUTES[path])


def test_build_router_rejects_duplicate_paths():
    app = _app()

    class Other:
        name = "main"

        def __init__(self, navigate):
            pass

    router = app.build_router()
    with pytest.raises(DuplicateRouteError):
        router.register("main", Other(router.navigate))


def test_session_router_starts_on_start_view():
    app = _app()
    fake = _fake_st()
    with patch.object(app, "st", fake):
        router = app.session_router()
        assert app.session_router() is router
    assert router.state == ""
    assert router.current_view.name == ""


def test_session_router_follows_query_param():
    app = _app()
    fake = _fake_st({"view": "main/cat"})
    with patch.object(app, "st", fake):
        router = app.session_router()
    assert router.state == "main/cat"
    assert router.current_view.state.panel.animal == "cat"


def test_session_router_unknown_query_param_falls_back():
    app = _app()
    fake = _fake_st({"view": "zoo"})
    with patch.object(app, "st", fake):
        router = app.session_router()
    assert router.state == ""
    assert isinstance(router.last_error, RouteNotFoundError)


def test_main_renders_current_view_and_syncs_query():
    app = _app()
    fake = _fake_st({"view": "main/pig"})
    with patch.object(app, "st", fake), patch.object(app, "render_tree") as render:
        app.main()
    widgets, on_action = render.call_args[0][:2]
    assert any(isinstance(w, Panel) for w in widgets)
    assert fake.query_params["view"] == "main/pig"
    fake.set_page_config.assert_called_once()


def test_main_warns_once_about_unknown_view():
    app = _app()
    fake = _fake_st({"view": "zoo"})
    with patch.object(app, "st", fake), patch.object(app, "render_tree"):
        app.main()
        app.main()
    fake.warning.assert_called_once()
    assert fake.query_params["view"] == ""


def test_widget_rendering():
    from ui.components import widgets as w
    fake = MagicMock()
    on_action = MagicMock()
    tree = [
        Notification("hello"),
        Button("Pig", Action(ActionKind.SELECT_ANIMAL, "pig")),
        Panel(children=(
            Label("You are currently watching a pig"),
            Image(source="img/pig.png", resolved_path="/x/img/pig.png"),
            Image(source="img/dog.png", caption="Image not available: img/dog.png"),
        )),
    ]
    with patch.object(w, "st", fake):
        w.render_tree(tree, on_action)

    fake.toast.assert_called_once_with("hello")
    fake.button.assert_called_once()
    assert fake.button.call_args.kwargs["on_click"] is on_action
    assert fake.button.call_args.kwargs["args"] == (tree[1].action,)
    fake.container.assert_called_once_with(border=True)
    fake.write.assert_called_once_with("You are currently watching a pig")
    fake.image.assert_called_once_with("/x/img/pig.png", caption=None)
    fake.caption.assert_called_once_with("Image not available: img/dog.png")


def test_widget_rendering_rejects_unknown_widgets():
    from ui.components import widgets as w
    with patch.object(w, "st", MagicMock()):
        with pytest.raises(TypeError):
            w.render_widget(object(), MagicMock())
