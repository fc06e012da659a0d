import os

import pytest

from photoviewer.commands import (
    ACTION_HANDLERS, MenuCommand,
    NavigateNext, NavigatePrev, WheelZoom, StartDrag, DragTick,
    Rotate, Flip, ShowContextMenu, HideContextMenu, ContextMenuClick,
    DismissNotification, CloseApp,
)
from photoviewer.types import UIAction, Interpolation, BackgroundColor

from conftest import loaded


def test_every_action_has_a_handler():
    assert set(ACTION_HANDLERS) == set(UIAction)


@pytest.mark.parametrize("command", [
    NavigateNext(), NavigatePrev(),
    WheelZoom(delta=1.0, anchor=(10.0, 10.0)),
    StartDrag(mouse_x=1.0, mouse_y=1.0, t=0.0),
    Rotate(clockwise=True), Flip(horizontal=False),
    MenuCommand(UIAction.RESET_FIT), MenuCommand(UIAction.RESET_ACTUAL_SIZE),
])
def test_image_commands_need_an_image(session, command):
    assert command.execute(session) is False
    assert session.redraws.calls == []


def test_navigate_commands(session, image_dir):
    loaded(session, image_dir, "a.png")
    assert NavigateNext().execute(session)
    assert os.path.basename(session.path) == "b.png"
    assert NavigatePrev().execute(session)
    assert NavigatePrev().execute(session)
    assert os.path.basename(session.path) == "c.jpg"


def test_drag_commands(session, image_dir):
    loaded(session, image_dir, "a.png")
    assert StartDrag(mouse_x=10, mouse_y=10, t=1.0).execute(session)
    # a second press while dragging is ignored
    assert StartDrag(mouse_x=50, mouse_y=50, t=1.0).execute(session) is False
    # too soon after the previous sample
    assert DragTick(mouse_x=20, mouse_y=10, button_down=True, t=1.005).execute(session) is False
    assert DragTick(mouse_x=20, mouse_y=10, button_down=True, t=1.02).execute(session)
    assert DragTick(mouse_x=20, mouse_y=10, button_down=False, t=1.04).execute(session) is False
    assert not session.state.input.is_dragging


def test_wheel_zoom_command(session, image_dir):
    loaded(session, image_dir, "a.png")
    scale = session.view.scale
    assert WheelZoom(delta=-1.0, anchor=(0.0, 0.0)).execute(session)
    assert session.view.scale == pytest.approx(scale / 1.25)


def test_open_image_uses_dialog(session, image_dir):
    session.dialog.result = str(image_dir / "b.png")
    assert MenuCommand(UIAction.OPEN_IMAGE).execute(session)
    assert session.image.size == (30, 60)
    assert session.dialog.calls == [(None,)]


def test_open_image_cancelled(session):
    assert MenuCommand(UIAction.OPEN_IMAGE).execute(session) is False
    assert session.image is None


def test_new_window_launches_empty_viewer(session):
    assert MenuCommand(UIAction.NEW_WINDOW).execute(session)
    assert session.launcher_calls.calls == [(None,)]


def test_menu_options(session):
    assert MenuCommand(UIAction.SET_INTERPOLATION, Interpolation.Trilinear).execute(session)
    assert session.state.ui.interpolation is Interpolation.Trilinear
    assert MenuCommand(UIAction.SET_BACKGROUND, BackgroundColor.White).execute(session)
    assert session.state.ui.background is BackgroundColor.White


def test_context_menu_click_runs_action_and_hides(session):
    ShowContextMenu(x=100, y=100).execute(session)
    menu = session.state.ui.context_menu
    assert menu.visible
    # Interpolation > Bilinear
    assert ContextMenuClick(path=(1, 1)).execute(session)
    assert not menu.visible
    assert session.state.ui.interpolation is Interpolation.Bilinear

    ShowContextMenu(x=100, y=100).execute(session)
    assert menu.get_item((1, 1)).checked
    assert not menu.get_item((1, 0)).checked


def test_context_menu_click_on_submenu_parent_is_ignored(session):
    ShowContextMenu(x=0, y=0).execute(session)
    assert ContextMenuClick(path=(2,)).execute(session) is False
    assert session.state.ui.context_menu.visible


def test_context_menu_reset_fit(session, image_dir):
    loaded(session, image_dir, "a.png")
    session.reset_actual_size()
    ShowContextMenu(x=5, y=5).execute(session)
    assert ContextMenuClick(path=(3,)).execute(session)
    assert session.view.fitted


def test_hide_context_menu(session):
    assert HideContextMenu().execute(session) is False
    ShowContextMenu(x=0, y=0).execute(session)
    assert HideContextMenu().execute(session)
    assert not session.state.ui.context_menu.visible


def test_dismiss_notification(session, tmp_path):
    session.open_path(str(tmp_path / "nope.png"))
    assert session.state.ui.notification.visible
    assert DismissNotification().execute(session)
    assert not session.state.ui.notification.visible
    assert DismissNotification().execute(session) is False


def test_close_app(session):
    assert CloseApp().execute(session)


def test_context_menu_ends_drag(session, image_dir):
    loaded(session, image_dir, "a.png")
    StartDrag(mouse_x=10, mouse_y=10, t=0.0).execute(session)
    ShowContextMenu(x=10, y=10).execute(session)
    assert not session.state.input.is_dragging
