"""Read the EXIF orientation tag from encoded image bytes."""

from __future__ import annotations

import logging
from io import BytesIO

from PIL import ExifTags, Image, UnidentifiedImageError

from ..core.orientation import ORIENTATION_NORMAL

_LOGGER = logging.getLogger(__name__)


def read_orientation_code(data: bytes) -> int:
    """Return the EXIF orientation code of *data*.

    Images without EXIF data, without the tag, or that Pillow cannot parse
    report :data:`ORIENTATION_NORMAL`.
    """

    try:
        with Image.open(BytesIO(data)) as image:
            value = image.getexif().get(ExifTags.Base.Orientation, ORIENTATION_NORMAL)
    except (UnidentifiedImageError, OSError, ValueError) as exc:
        _LOGGER.debug("No orientation metadata available: %s", exc)
        return ORIENTATION_NORMAL

    try:
        return int(value)
    except (TypeError, ValueError):
        return ORIENTATION_NORMAL


__all__ = ["read_orientation_code"]
