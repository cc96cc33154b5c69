import numpy as np
import pytest

from photofilter.core.adjustments import ADJUSTMENT_ORDER, AdjustmentState
from photofilter.core.color_matrix import (
    brightness_matrix,
    contrast_matrix,
    grayscale_matrix,
    identity_matrix,
    negative_matrix,
    sepia_matrix,
)
from photofilter.core.compositor import active_matrices, build_combined_matrix, compose, concat
from photofilter.core.pixel_buffer import PixelBuffer
from photofilter.core.renderer import apply_color_matrix


def _apply(matrix: np.ndarray, rgba) -> np.ndarray:
    vector = np.asarray(rgba, dtype=np.float64)
    return matrix[:, :4] @ vector + matrix[:, 4]


def test_neutral_state_yields_identity() -> None:
    assert np.array_equal(build_combined_matrix(AdjustmentState()), identity_matrix())


def test_compose_of_nothing_is_identity() -> None:
    assert np.array_equal(compose([]), identity_matrix())


def test_compose_single_matrix_is_unchanged() -> None:
    matrix = sepia_matrix(60)
    assert np.allclose(compose([matrix]), matrix)


def test_concat_applies_first_then_second() -> None:
    first = contrast_matrix(30)
    then = negative_matrix()
    rgba = (12.0, 140.0, 250.0, 255.0)
    expected = _apply(then, _apply(first, rgba))
    assert _apply(concat(first, then), rgba) == pytest.approx(expected)


def test_active_matrices_follow_fixed_order() -> None:
    state = AdjustmentState(
        gray_amount=10,
        brightness_amount=20,
        contrast_amount=30,
        sepia_amount=40,
        negative_enabled=True,
    )
    assert [name for name, _ in active_matrices(state)] == list(ADJUSTMENT_ORDER)


def test_brightness_is_gated_at_zero() -> None:
    state = AdjustmentState(gray_amount=30, brightness_amount=0)
    assert [name for name, _ in active_matrices(state)] == ["grayscale"]


def test_combined_matrix_matches_manual_chain() -> None:
    state = AdjustmentState(
        gray_amount=15,
        brightness_amount=70,
        contrast_amount=45,
        sepia_amount=80,
        negative_enabled=True,
    )
    manual = identity_matrix()
    for matrix in (
        grayscale_matrix(15),
        brightness_matrix(70),
        contrast_matrix(45),
        sepia_matrix(80),
        negative_matrix(),
    ):
        manual = concat(manual, matrix)
    assert np.array_equal(build_combined_matrix(state), manual)


def test_brightness_and_contrast_do_not_commute() -> None:
    brightness = brightness_matrix(75)
    contrast = contrast_matrix(80)
    forward = concat(brightness, contrast)
    backward = concat(contrast, brightness)
    assert not np.allclose(forward, backward)

    pixels = np.array([[[100, 50, 200, 255]]], dtype=np.uint8)
    forward_px = apply_color_matrix(PixelBuffer(pixels.copy()), forward).pixel(0, 0)
    backward_px = apply_color_matrix(PixelBuffer(pixels.copy()), backward).pixel(0, 0)
    assert forward_px[0] == 164
    assert backward_px[0] == 124


def test_unit_brightness_commutes_with_contrast() -> None:
    # Half brightness is a scale of exactly 1.0, the identity on RGB.
    brightness = brightness_matrix(50)
    contrast = contrast_matrix(80)
    assert np.allclose(concat(brightness, contrast), concat(contrast, brightness))


def test_out_of_range_state_is_clamped() -> None:
    wild = AdjustmentState(gray_amount=250, brightness_amount=-5, sepia_amount=101)
    tame = AdjustmentState(gray_amount=100, brightness_amount=0, sepia_amount=100)
    assert np.array_equal(build_combined_matrix(wild), build_combined_matrix(tame))


def test_from_mapping_clamps_and_fills_missing_keys() -> None:
    state = AdjustmentState.from_mapping({"gray_amount": 300, "negative_enabled": 1})
    assert state == AdjustmentState(gray_amount=100, negative_enabled=True)
    assert state.negative_enabled is True
    assert state.brightness_amount == state.contrast_amount == state.sepia_amount == 0


def test_ensure_accepts_state_mapping_or_none() -> None:
    assert AdjustmentState.ensure(None) == AdjustmentState()
    assert AdjustmentState.ensure(AdjustmentState(sepia_amount=140)) == AdjustmentState(sepia_amount=100)
    assert AdjustmentState.ensure({"contrast_amount": 35}) == AdjustmentState(contrast_amount=35)


def test_combined_matrix_accepts_slider_mapping() -> None:
    values = {"gray_amount": 20, "brightness_amount": 60, "negative_enabled": "yes"}
    expected = build_combined_matrix(
        AdjustmentState(gray_amount=20, brightness_amount=60, negative_enabled=True)
    )
    assert np.array_equal(build_combined_matrix(values), expected)
    assert [name for name, _ in active_matrices(values)] == ["grayscale", "brightness", "negative"]


def test_non_finite_amounts_saturate() -> None:
    wild = AdjustmentState(
        gray_amount=float("inf"),
        brightness_amount=float("-inf"),
        sepia_amount=float("nan"),
    )
    assert wild.clamp() == AdjustmentState(gray_amount=100)
    assert np.array_equal(build_combined_matrix(wild), grayscale_matrix(100))
