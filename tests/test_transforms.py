from PIL import Image

from photoviewer.transforms import rotate_handle, flip_handle
from photoviewer.types import ImageHandle

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)


def two_pixel_handle():
    img = Image.new("RGBA", (2, 1))
    img.putpixel((0, 0), RED)
    img.putpixel((1, 0), BLUE)
    return ImageHandle(image=img, w=2, h=1, path="/tmp/pair.png")


def test_rotate_clockwise_moves_left_edge_to_top():
    handle = rotate_handle(two_pixel_handle(), clockwise=True)
    assert handle.size == (1, 2)
    assert handle.image.getpixel((0, 0)) == RED
    assert handle.image.getpixel((0, 1)) == BLUE
    assert handle.revision == 1


def test_rotate_counter_clockwise_moves_left_edge_to_bottom():
    handle = rotate_handle(two_pixel_handle(), clockwise=False)
    assert handle.size == (1, 2)
    assert handle.image.getpixel((0, 0)) == BLUE
    assert handle.image.getpixel((0, 1)) == RED


def test_flip_horizontal():
    handle = flip_handle(two_pixel_handle(), horizontal=True)
    assert handle.size == (2, 1)
    assert handle.image.getpixel((0, 0)) == BLUE
    assert handle.revision == 1


def test_flip_vertical_keeps_single_row():
    handle = flip_handle(two_pixel_handle(), horizontal=False)
    assert handle.image.getpixel((0, 0)) == RED


def test_four_rotations_restore_pixels():
    handle = two_pixel_handle()
    original = handle.image.tobytes()
    for _ in range(4):
        rotate_handle(handle, clockwise=True)
    assert handle.size == (2, 1)
    assert handle.image.tobytes() == original
    assert handle.revision == 4
