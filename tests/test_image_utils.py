import os

import pytest

from photoviewer.errors import DirectoryUnavailable
from photoviewer.image_utils import (
    image_extension, is_supported_image, list_sibling_images, next_image, prev_image,
)


def names(paths):
    return [os.path.basename(p) for p in paths]


def test_lists_supported_images_sorted(image_dir):
    (image_dir / "sub.png").mkdir()
    listing = list_sibling_images(str(image_dir / "b.png"))
    assert names(listing) == ["a.png", "b.png", "c.jpg"]
    assert all(os.path.isabs(p) for p in listing)


def test_extensions_are_case_insensitive(tmp_path):
    for name in ("x.PNG", "y.JpEg", "z.Tiff", "w.jfif", "v.jpe", "u.bmp", "t.gif",
                 "s.tif", "photo.webp", "archive.tar.gz", "README"):
        (tmp_path / name).write_bytes(b"")
    listing = names(list_sibling_images(str(tmp_path / "x.PNG")))
    assert listing == sorted(["x.PNG", "y.JpEg", "z.Tiff", "w.jfif", "v.jpe",
                              "u.bmp", "t.gif", "s.tif"])


@pytest.mark.parametrize("name,ext", [
    ("a.PNG", "png"),
    ("archive.tar.gz", "gz"),
    ("README", ""),
    (".png", "png"),
    ("dir.d/file", ""),
])
def test_image_extension(name, ext):
    assert image_extension(name) == ext


def test_is_supported_image():
    assert is_supported_image("/tmp/pic.JPG")
    assert not is_supported_image("/tmp/pic.webp")


def test_next_prev_example(image_dir):
    b = str(image_dir / "b.png")
    c = next_image(b)
    assert os.path.basename(c) == "c.jpg"
    a = next_image(c)
    assert os.path.basename(a) == "a.png"
    assert os.path.basename(prev_image(a)) == "c.jpg"


def test_next_cycles_through_all(image_dir):
    start = str(image_dir / "a.png")
    seen = []
    current = start
    for _ in range(3):
        current = next_image(current)
        seen.append(os.path.basename(current))
    assert seen == ["b.png", "c.jpg", "a.png"]
    assert current == start


def test_next_then_prev_returns_to_start(image_dir):
    start = str(image_dir / "b.png")
    assert prev_image(next_image(start)) == start
    assert next_image(prev_image(start)) == start


def test_single_image_wraps_to_itself(tmp_path):
    only = tmp_path / "only.png"
    only.write_bytes(b"")
    assert next_image(str(only)) == str(only)
    assert prev_image(str(only)) == str(only)


def test_missing_loaded_file_yields_none(image_dir):
    gone = str(image_dir / "deleted.png")
    assert next_image(gone) is None
    assert prev_image(gone) is None


def test_unsupported_loaded_file_yields_none(image_dir):
    assert next_image(str(image_dir / "notes.txt")) is None


def test_empty_listing_yields_none(tmp_path):
    (tmp_path / "notes.txt").write_text("x")
    assert next_image(str(tmp_path / "notes.txt")) is None


def test_listing_reflects_directory_changes(image_dir):
    b = str(image_dir / "b.png")
    (image_dir / "bb.png").write_bytes(b"")
    assert os.path.basename(next_image(b)) == "bb.png"
    os.remove(image_dir / "bb.png")
    assert os.path.basename(next_image(b)) == "c.jpg"


def test_unreadable_directory(tmp_path):
    missing = str(tmp_path / "nowhere" / "a.png")
    with pytest.raises(DirectoryUnavailable):
        list_sibling_images(missing)
    assert next_image(missing) is None
    assert prev_image(missing) is None


def test_loaded_name_matches_case_insensitively(image_dir, monkeypatch):
    # behave like a case-insensitive filesystem
    monkeypatch.setattr(os.path, "normcase", lambda s: s.lower())
    assert names([next_image(str(image_dir / "B.PNG"))]) == ["c.jpg"]
    assert names([prev_image(str(image_dir / "B.PNG"))]) == ["a.png"]
