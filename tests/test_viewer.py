import os

import pytest

from photoviewer import view_math
from photoviewer.config import WINDOW_TITLE
from photoviewer.types import Interpolation, BackgroundColor

from conftest import loaded, make_png


def test_open_path_fits_and_titles(session, image_dir):
    loaded(session, image_dir, "a.png")
    assert session.image.size == (40, 20)
    assert session.view == view_math.fit_to_window(40, 20, 800, 600)
    assert session.view.fitted
    assert session.state.window.title == f"{WINDOW_TITLE} - {session.path}"
    assert session.redraws.calls


def test_failed_open_keeps_previous_image(session, image_dir):
    loaded(session, image_dir, "a.png")
    before = session.image
    assert session.open_path(str(image_dir / "notes.txt")) is False
    assert session.image is before
    note = session.state.ui.notification
    assert note.visible
    assert note.title == "Failed to Open Image"
    assert "notes.txt" in note.text


def test_failed_open_without_image_stays_empty(session, tmp_path):
    assert session.open_path(str(tmp_path / "missing.png")) is False
    assert session.image is None
    assert session.state.window.title == WINDOW_TITLE
    assert session.state.ui.notification.visible


def test_navigation_wraps(session, image_dir):
    loaded(session, image_dir, "b.png")
    assert session.navigate(1)
    assert os.path.basename(session.path) == "c.jpg"
    assert session.navigate(1)
    assert os.path.basename(session.path) == "a.png"
    assert session.navigate(-1)
    assert os.path.basename(session.path) == "c.jpg"
    assert session.view.fitted


def test_navigation_with_single_image_does_nothing(session, tmp_path):
    only = make_png(tmp_path / "only.png")
    assert session.open_path(only)
    calls = len(session.redraws.calls)
    assert session.navigate(1) is False
    assert len(session.redraws.calls) == calls


def test_navigation_after_file_deleted(session, image_dir):
    loaded(session, image_dir, "b.png")
    os.remove(image_dir / "b.png")
    assert session.navigate(1) is False
    assert os.path.basename(session.path) == "b.png"


def test_navigation_to_broken_sibling_notifies(session, image_dir):
    (image_dir / "bb.png").write_bytes(b"garbage")
    loaded(session, image_dir, "b.png")
    assert session.navigate(1) is False
    assert session.state.ui.notification.visible
    assert os.path.basename(session.path) == "b.png"


def test_operations_without_image_are_noops(session):
    calls = len(session.redraws.calls)
    assert session.wheel_zoom((10, 10), 1) is False
    assert session.pan(5, 5) is False
    assert session.start_drag(1, 1, 0.0) is False
    assert session.rotate(True) is False
    assert session.flip(True) is False
    assert session.reset_fit() is False
    assert session.reset_actual_size() is False
    assert session.navigate(1) is False
    assert len(session.redraws.calls) == calls


def test_resize_refits_only_when_fitted(session, image_dir):
    loaded(session, image_dir, "a.png")
    assert session.resize(400, 400)
    assert session.view == view_math.fit_to_window(40, 20, 400, 400)

    session.pan(10, 0)
    panned = session.view
    assert session.resize(500, 300) is False
    assert session.view == panned


def test_zoom_and_actual_size(session, image_dir):
    loaded(session, image_dir, "a.png")
    fit_scale = session.view.scale
    assert session.wheel_zoom((400, 300), 1)
    assert session.view.scale == pytest.approx(fit_scale * 1.25)
    assert not session.view.fitted
    assert session.reset_actual_size()
    assert session.view.scale == 1.0
    assert session.reset_fit()
    assert session.view.fitted
    assert session.reset_fit() is False


def test_drag_moves_image(session, image_dir):
    loaded(session, image_dir, "a.png")
    start = session.view.origin
    assert session.start_drag(100, 100, 0.0)
    assert session.drag_tick(150, 80, True, 0.02)
    assert session.view.origin == pytest.approx((start[0] + 50, start[1] - 20))
    assert not session.view.fitted
    assert session.drag_tick(150, 80, False, 0.04) is False
    assert not session.state.input.is_dragging


def test_rotate_fitted_image(session, image_dir):
    loaded(session, image_dir, "a.png")
    assert session.rotate(True)
    assert session.image.size == (20, 40)
    assert session.image.revision == 1
    assert session.view == view_math.fit_to_window(20, 40, 800, 600)


def test_rotate_unfitted_keeps_scale(session, image_dir):
    loaded(session, image_dir, "a.png")
    session.reset_actual_size()
    session.pan(13, -7)
    before = session.view
    session.rotate(False)
    assert session.view.scale == before.scale
    for _ in range(3):
        session.rotate(False)
    assert session.view.origin == pytest.approx(before.origin)
    assert session.image.size == (40, 20)


def test_flip_unfitted_mirrors_position(session, image_dir):
    loaded(session, image_dir, "a.png")
    session.reset_actual_size()
    session.pan(100, 0)
    session.flip(True)
    assert session.view.offx == pytest.approx(800 - (380 + 100) - 40)
    assert session.image.revision == 1


def test_display_options(session):
    assert session.set_interpolation(Interpolation.Bilinear)
    assert session.set_interpolation(Interpolation.Bilinear) is False
    assert session.set_background(BackgroundColor.White)
    assert session.state.ui.bg_color == (255, 255, 255)


def test_prompt_open_uses_dialog(session, image_dir):
    session.dialog.result = str(image_dir / "c.jpg")
    assert session.prompt_open()
    assert os.path.basename(session.path) == "c.jpg"
    # next dialog starts in the image's directory
    session.dialog.result = None
    assert session.prompt_open() is False
    assert session.dialog.calls[-1] == (str(image_dir),)


def test_flip_during_drag_is_kept(session, image_dir):
    loaded(session, image_dir, "a.png")
    session.reset_actual_size()
    session.start_drag(100, 100, 0.0)
    session.drag_tick(300, 100, True, 0.02)
    session.flip(True)
    assert session.view.origin == pytest.approx((180, 290))
    session.drag_tick(301, 100, True, 0.04)
    assert session.view.origin == pytest.approx((181, 290))


def test_zoom_during_drag_is_kept(session, image_dir):
    loaded(session, image_dir, "a.png")
    session.start_drag(100, 100, 0.0)
    session.wheel_zoom((100, 100), 1)
    zoomed = session.view
    session.drag_tick(110, 100, True, 0.02)
    assert session.view.scale == zoomed.scale
    assert session.view.origin == pytest.approx((zoomed.offx + 10, zoomed.offy))
