# Copyright (c) 2026 Chromaquery
# SPDX-License-Identifier: MIT

"""Tests for RGB ↔ HSB conversions."""

import numpy as np
import pytest

from chromaquery.interpret.colorspace import (
    hsb_to_rgb,
    hsb_tuple_to_rgb,
    rgb_to_hsb,
    rgb_tuple_to_hsb,
)


class TestRGBToHSB:

    def test_primaries(self):
        rgb = np.array([
            [1.0, 0.0, 0.0],
            [0.0, 1.0, 0.0],
            [0.0, 0.0, 1.0],
        ])
        hsb = rgb_to_hsb(rgb)
        np.testing.assert_allclose(hsb[:, 0], [0.0, 1 / 3, 2 / 3], atol=1e-12)
        np.testing.assert_allclose(hsb[:, 1], [1.0, 1.0, 1.0])
        np.testing.assert_allclose(hsb[:, 2], [1.0, 1.0, 1.0])

    def test_black(self):
        np.testing.assert_array_equal(rgb_to_hsb([0.0, 0.0, 0.0]), [0.0, 0.0, 0.0])

    def test_gray(self):
        np.testing.assert_array_equal(rgb_to_hsb([0.25, 0.25, 0.25]), [0.0, 0.0, 0.25])

    def test_magenta_side_hue_is_positive(self):
        """Red max with blue > green lands just below a full turn."""
        hue = rgb_to_hsb([1.0, 0.0, 0.5])[0]
        assert hue == pytest.approx(11 / 12)

    def test_hue_never_reaches_full_turn(self):
        """A vanishing negative sector wraps to 0, not 1."""
        assert rgb_tuple_to_hsb((1.0, 0.0, 1e-19)) == (0.0, 1.0, 1.0)
        hue = rgb_to_hsb([[1.0, 0.0, 1e-19], [1.0, 0.0, 0.5]])[:, 0]
        assert hue[0] == 0.0
        assert hue[1] == pytest.approx(11 / 12)

    def test_no_warnings_for_black(self):
        with np.errstate(all="raise"):
            rgb_to_hsb(np.zeros((4, 3)))

    def test_preserves_batch_shape(self):
        assert rgb_to_hsb(np.zeros((2, 5, 3))).shape == (2, 5, 3)


class TestHSBToRGB:

    def test_primaries(self):
        hsb = np.array([
            [0.0, 1.0, 1.0],
            [1 / 3, 1.0, 1.0],
            [2 / 3, 1.0, 1.0],
        ])
        np.testing.assert_allclose(hsb_to_rgb(hsb), np.eye(3), atol=1e-12)

    def test_full_turn_is_red(self):
        np.testing.assert_allclose(hsb_to_rgb([1.0, 1.0, 1.0]), [1.0, 0.0, 0.0])

    def test_zero_saturation_is_gray(self):
        np.testing.assert_allclose(hsb_to_rgb([0.7, 0.0, 0.4]), [0.4, 0.4, 0.4])

    def test_half_brightness_red(self):
        np.testing.assert_allclose(hsb_to_rgb([0.0, 1.0, 0.5]), [0.5, 0.0, 0.0])


class TestRoundtrip:

    def test_batch_roundtrip(self):
        rgb = np.random.RandomState(7).random((200, 3))
        recovered = hsb_to_rgb(rgb_to_hsb(rgb))
        np.testing.assert_allclose(recovered, rgb, atol=1e-10)

    def test_tuple_helpers_return_floats(self):
        hsb = rgb_tuple_to_hsb((0.2, 0.4, 0.6))
        assert all(type(v) is float for v in hsb)
        rgb = hsb_tuple_to_rgb(hsb)
        assert all(type(v) is float for v in rgb)
        assert rgb == pytest.approx((0.2, 0.4, 0.6))
