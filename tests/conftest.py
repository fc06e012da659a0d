import os

import pytest
from PIL import Image

from photoviewer.viewer import ViewerSession
from photoviewer.state import AppState


def make_png(path, size=(40, 20), color=(200, 30, 30, 255)):
    Image.new("RGBA", size, color).save(path, format="PNG")
    return str(path)


@pytest.fixture
def image_dir(tmp_path):
    """Directory with a.png, b.png, c.jpg and a few non-images."""
    make_png(tmp_path / "a.png", (40, 20))
    make_png(tmp_path / "b.png", (30, 60))
    Image.new("RGB", (50, 50), (0, 0, 255)).save(tmp_path / "c.jpg", format="JPEG")
    (tmp_path / "notes.txt").write_text("not an image")
    return tmp_path


class Recorder:
    """Callable stand-in that remembers its calls."""

    def __init__(self, result=None):
        self.calls = []
        self.result = result

    def __call__(self, *args):
        self.calls.append(args)
        return self.result


@pytest.fixture
def session():
    """Session with an 800x600 client area and recording collaborators."""
    redraws = Recorder()
    dialog = Recorder()
    launcher = Recorder()
    s = ViewerSession(state=AppState(), on_redraw=redraws,
                      open_dialog=dialog, launcher=launcher)
    s.resize(800, 600)
    s.redraws = redraws
    s.dialog = dialog
    s.launcher_calls = launcher
    return s


def loaded(session, directory, name="a.png"):
    assert session.open_path(os.path.join(str(directory), name))
    return session
