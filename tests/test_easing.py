"""測試緩動函式與 clamp。"""

import numpy as np
import pytest

from control_animator.easing import DURATION, clamp, ease_in_out_cubic


class TestEaseInOutCubic:
    """測試 ease_in_out_cubic()。"""

    def test_start_value(self):
        """t=0 時回傳起始值。"""
        assert ease_in_out_cubic(0.0, 100.0, 50.0) == pytest.approx(100.0)

    def test_end_value_exact(self):
        """t=d 時精確回傳 b + c。"""
        assert ease_in_out_cubic(DURATION, 100.0, 50.0) == 150.0
        assert ease_in_out_cubic(DURATION, 150.0, -50.0) == 100.0

    def test_midpoint(self):
        """t=d/2 時位於中點。"""
        assert ease_in_out_cubic(5.0, 0.0, 200.0) == pytest.approx(100.0)

    def test_first_half_accelerates(self):
        """前半段：c/2 * u^3 + b。"""
        # u = 2.5 / 5 = 0.5 -> 100 * 0.125
        assert ease_in_out_cubic(2.5, 0.0, 200.0) == pytest.approx(12.5)

    def test_second_half_decelerates(self):
        """後半段：c/2 * ((u-2)^3 + 2) + b。"""
        # u = 1.5 -> 100 * (-0.125 + 2)
        assert ease_in_out_cubic(7.5, 0.0, 200.0) == pytest.approx(187.5)

    def test_custom_duration(self):
        assert ease_in_out_cubic(1.0, 0.0, 10.0, d=2.0) == pytest.approx(5.0)

    def test_returns_float_for_scalars(self):
        assert isinstance(ease_in_out_cubic(3.0, 0.0, 1.0), float)

    def test_elementwise_arrays(self):
        """b、c 為陣列時逐元素計算。"""
        b = np.array([0.0, 255.0, 10.0])
        c = np.array([100.0, -255.0, 0.0])
        result = ease_in_out_cubic(DURATION, b, c)
        np.testing.assert_allclose(result, [100.0, 0.0, 10.0])

    def test_opposite_directions_mirror(self):
        """往 on 與往 off 的曲線互為鏡像：兩者相加為定值。"""
        b, c = 100.0, 50.0
        for t in np.linspace(0.0, DURATION, 21):
            forward = ease_in_out_cubic(t, b, c)
            backward = ease_in_out_cubic(t, b + c, -c)
            assert forward + backward == pytest.approx(2 * b + c)

    def test_monotonic(self):
        prev = ease_in_out_cubic(0.0, 0.0, 1.0)
        for t in np.linspace(0.1, DURATION, 100):
            val = ease_in_out_cubic(t, 0.0, 1.0)
            assert val >= prev
            prev = val


class TestClamp:
    """測試 clamp()。"""

    def test_inside(self):
        assert clamp(5, 0, 10) == 5

    def test_below(self):
        assert clamp(-3, 0, 10) == 0

    def test_above(self):
        assert clamp(13, 0, 10) == 10

    def test_reversed_bounds(self):
        """端點順序不影響結果。"""
        assert clamp(13, 10, 0) == 10
        assert clamp(-3, 10, 0) == 0
        assert clamp(7, 10, 0) == 7
