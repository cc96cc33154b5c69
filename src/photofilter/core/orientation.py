"""Translate EXIF orientation codes into rotation angles."""

from __future__ import annotations

import numbers
from enum import IntEnum
from typing import Any

# EXIF ``Orientation`` tag values (0x0112) that describe a pure rotation.
ORIENTATION_NORMAL = 1
ORIENTATION_ROTATE_180 = 3
ORIENTATION_ROTATE_90 = 6
ORIENTATION_ROTATE_270 = 8


class RotationAngle(IntEnum):
    """Clockwise rotation, in degrees, needed to display an image upright."""

    DEG_0 = 0
    DEG_90 = 90
    DEG_180 = 180
    DEG_270 = 270

    @property
    def quarter_turns(self) -> int:
        """Number of clockwise 90 degree steps."""

        return self.value // 90

    @property
    def swaps_dimensions(self) -> bool:
        return self in (RotationAngle.DEG_90, RotationAngle.DEG_270)


_ROTATIONS = {
    ORIENTATION_ROTATE_90: RotationAngle.DEG_90,
    ORIENTATION_ROTATE_180: RotationAngle.DEG_180,
    ORIENTATION_ROTATE_270: RotationAngle.DEG_270,
}


def resolve_rotation(code: Any) -> RotationAngle:
    """Return the :class:`RotationAngle` for the orientation *code*.

    Missing, "normal", mirrored or unrecognised codes all resolve to
    :attr:`RotationAngle.DEG_0` instead of raising.
    """

    if isinstance(code, bool) or not isinstance(code, numbers.Integral):
        return RotationAngle.DEG_0
    return _ROTATIONS.get(int(code), RotationAngle.DEG_0)


__all__ = [
    "ORIENTATION_NORMAL",
    "ORIENTATION_ROTATE_180",
    "ORIENTATION_ROTATE_270",
    "ORIENTATION_ROTATE_90",
    "RotationAngle",
    "resolve_rotation",
]
