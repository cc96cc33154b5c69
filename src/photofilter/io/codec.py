"""Decode source images into pixel buffers and encode rendered buffers.

Pillow does the compressed-format work; this module only converts between
its images and :class:`PixelBuffer`.  Decoding deliberately ignores the EXIF
orientation so rotation stays under the control of the renderer.
"""

from __future__ import annotations

from io import BytesIO

import numpy as np
from PIL import Image, UnidentifiedImageError

from ..core.pixel_buffer import PixelBuffer
from ..errors import DecodeError, EncodeError


def decode_image(data: bytes) -> PixelBuffer:
    """Return the RGBA pixels stored in the encoded *data*."""

    if not data:
        raise DecodeError("Source image is empty")
    try:
        with Image.open(BytesIO(data)) as image:
            image.load()
            rgba = image.convert("RGBA")
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as exc:
        raise DecodeError(f"Unable to decode source image: {exc}") from exc
    return PixelBuffer(np.array(rgba, dtype=np.uint8))


def encode_jpeg(buffer: PixelBuffer, quality: int) -> bytes:
    """Return *buffer* encoded as JPEG at *quality* (1-100).

    JPEG carries no alpha channel, so alpha is dropped during encoding.
    """

    try:
        image = Image.fromarray(buffer.pixels).convert("RGB")
        output = BytesIO()
        image.save(output, format="JPEG", quality=int(quality))
    except (OSError, ValueError) as exc:
        raise EncodeError(f"Unable to encode image: {exc}") from exc
    return output.getvalue()


__all__ = ["decode_image", "encode_jpeg"]
