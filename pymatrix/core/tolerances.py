"""
Tolerance tiers for approximate matrix comparison.

Defines precision expectations for the supported element kinds:
- EXACT: integer kinds compare exactly
- FP64: double precision, a few ulps of slack
- FP32: relaxed for single-precision arithmetic

Used by Matrix.allclose and by the test suite.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Integer kinds, no slack',
)

FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision',
)

FP32 = ToleranceTier(
    rtol=1e-5,
    atol=1e-6,
    name='fp32',
    description='Single precision',
)


def select_tolerance(*dtypes: np.dtype) -> ToleranceTier:
    """Select the loosest tier required by any of the given kinds."""
    if any(dt == np.float32 for dt in dtypes):
        return FP32
    if any(np.issubdtype(dt, np.floating) for dt in dtypes):
        return FP64
    return EXACT
