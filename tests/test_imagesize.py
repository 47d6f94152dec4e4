import io

import pytest
from PIL import Image

from youvideo.imagesize import get_image_size


def _encode(width, height, fmt, mode="RGB"):
    buffer = io.BytesIO()
    Image.new(mode, (width, height), color=0).save(buffer, format=fmt)
    buffer.seek(0)
    return buffer


@pytest.mark.parametrize("fmt", ["PNG", "JPEG"])
def test_size_of_rgb_images(fmt):
    assert get_image_size(_encode(7, 3, fmt)) == (7, 3)


def test_size_of_gif():
    assert get_image_size(_encode(12, 5, "GIF", mode="P")) == (12, 5)


def test_size_of_square_png():
    assert get_image_size(_encode(320, 320, "PNG")) == (320, 320)


def test_unsupported_format_raises():
    with pytest.raises(OSError):
        get_image_size(_encode(4, 4, "BMP"))


def test_garbage_data_raises():
    with pytest.raises(OSError):
        get_image_size(io.BytesIO(b"this is not an image"))


def test_stream_left_open():
    stream = _encode(2, 9, "PNG")
    assert get_image_size(stream) == (2, 9)
    assert stream.closed is False