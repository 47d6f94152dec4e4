"""Reading the pixel size of cover images."""

from __future__ import annotations

from typing import BinaryIO

from PIL import Image

_FORMATS = ("GIF", "JPEG", "PNG")


def get_image_size(stream: BinaryIO) -> tuple[int, int]:
    """Decode a GIF, JPEG or PNG image from ``stream`` and return ``(width, height)``.

    Raises ``PIL.UnidentifiedImageError`` (an ``OSError``) for data in any
    other format, and ``OSError`` when the image cannot be decoded.
    """
    with Image.open(stream, formats=_FORMATS) as image:
        image.load()
        return image.size