"""
Tests for tolerance tier selection.
"""

import numpy as np

from pymatrix.core.tolerances import EXACT, FP32, FP64, select_tolerance


class TestSelectTolerance:

    def test_integers_are_exact(self):
        assert select_tolerance(np.dtype("int32"), np.dtype("int64")) is EXACT

    def test_float64_tier(self):
        assert select_tolerance(np.dtype("int32"), np.dtype("float64")) is FP64

    def test_float32_dominates(self):
        assert select_tolerance(np.dtype("float64"), np.dtype("float32")) is FP32

    def test_tiers_are_ordered(self):
        assert EXACT.rtol < FP64.rtol < FP32.rtol
        assert EXACT.atol < FP64.atol < FP32.atol
