"""Element-wise addition of float arrays with an error check."""

from __future__ import annotations

import sys
from typing import List, Optional

import numpy as np
from numpy.typing import ArrayLike

ELEMENT_COUNT = 1 << 20


def add(x: ArrayLike, y: ArrayLike) -> np.ndarray:
    """Return the single-precision element-wise sum of ``x`` and ``y``."""
    left = np.asarray(x, dtype=np.float32)
    right = np.asarray(y, dtype=np.float32)
    if left.shape != right.shape:
        raise ValueError(f"shape mismatch: {left.shape} and {right.shape}")
    return left + right


def max_error(values: ArrayLike, expected: float) -> float:
    """Largest absolute difference between ``values`` and ``expected`` (0 if empty)."""
    array = np.asarray(values, dtype=np.float32)
    return float(np.max(np.abs(array - np.float32(expected)), initial=0.0))


def main(argv: Optional[List[str]] = None) -> int:
    """Add a million ones to a million twos and report the largest error from three."""
    x = np.full(ELEMENT_COUNT, 1.0, dtype=np.float32)
    y = np.full(ELEMENT_COUNT, 2.0, dtype=np.float32)
    result = add(x, y)
    print(f"Max error: {max_error(result, 3.0):g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())