"""Adjustment parameters collected from the edit controls."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

# The order matches the composition order of the colour pipeline so the same
# tuple can drive gating, matrix composition and logging.
ADJUSTMENT_ORDER = (
    "grayscale",
    "brightness",
    "contrast",
    "sepia",
    "negative",
)

AMOUNT_MIN = 0
AMOUNT_MAX = 100


def _clamp_amount(value: Any) -> int:
    """Return *value* as an ``int`` limited to ``[AMOUNT_MIN, AMOUNT_MAX]``."""

    numeric = float(value)
    # Compare before converting so infinities saturate; NaN fails both tests.
    if not numeric >= AMOUNT_MIN:
        return AMOUNT_MIN
    if numeric > AMOUNT_MAX:
        return AMOUNT_MAX
    return int(numeric)


@dataclass(frozen=True)
class AdjustmentState:
    """Immutable snapshot of the five colour adjustments.

    Amounts are slider positions in ``[0, 100]`` where ``0`` means "no effect".
    """

    gray_amount: int = 0
    brightness_amount: int = 0
    contrast_amount: int = 0
    sepia_amount: int = 0
    negative_enabled: bool = False

    def clamp(self) -> "AdjustmentState":
        """Return a copy with every amount forced into ``[0, 100]``.

        Producers are expected to keep values in range already; the pipeline
        still calls this so a stray value can never crash a render.
        """

        return AdjustmentState(
            gray_amount=_clamp_amount(self.gray_amount),
            brightness_amount=_clamp_amount(self.brightness_amount),
            contrast_amount=_clamp_amount(self.contrast_amount),
            sepia_amount=_clamp_amount(self.sepia_amount),
            negative_enabled=bool(self.negative_enabled),
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "AdjustmentState":
        """Return a clamped state from *data*, treating missing keys as neutral."""

        return cls(
            gray_amount=data.get("gray_amount", 0),
            brightness_amount=data.get("brightness_amount", 0),
            contrast_amount=data.get("contrast_amount", 0),
            sepia_amount=data.get("sepia_amount", 0),
            negative_enabled=bool(data.get("negative_enabled", False)),
        ).clamp()

    @classmethod
    def ensure(cls, state: "AdjustmentState | Mapping[str, Any] | None") -> "AdjustmentState":
        """Return *state* as a clamped :class:`AdjustmentState`.

        Mappings of slider values go through :meth:`from_mapping`; ``None``
        yields the neutral state.
        """

        if state is None:
            return cls()
        if isinstance(state, cls):
            return state.clamp()
        return cls.from_mapping(state)


__all__ = ["ADJUSTMENT_ORDER", "AMOUNT_MAX", "AMOUNT_MIN", "AdjustmentState"]
