"""Facial ratio features.

This module converts the six raw landmark distances of a face into the
fifteen pairwise ratios used for matching. Ratios are scale invariant, so
measurements taken at different distances from the camera remain comparable.
"""

from itertools import combinations
from typing import Dict, Mapping, Sequence, Tuple, TypeVar

import numpy as np

from .exceptions import InvalidInputError

K = TypeVar("K")

MEASUREMENT_SIZE = 6

# Prompt text for each measurement, in vector order
MEASUREMENT_NAMES: Tuple[str, ...] = (
    "distance from top of head to bottom of chin",
    "distance from left ear to right ear",
    "distance from center point between the eyes and top of head",
    "distance from center of left eye to center of right eye",
    "length of nose from top to bottom",
    "distance from bottom of chin to middle of mouth",
)

# (0, 1), (0, 2), ... (4, 5)
RATIO_PAIRS: Tuple[Tuple[int, int], ...] = tuple(combinations(range(MEASUREMENT_SIZE), 2))
RATIO_SIZE = len(RATIO_PAIRS)

_NUMERATORS = np.array([i for i, _ in RATIO_PAIRS])
_DENOMINATORS = np.array([j for _, j in RATIO_PAIRS])


def compute_ratios(measurements: Sequence[float]) -> np.ndarray:
    """Calculate every pairwise ratio between the measurements.

    Args:
        measurements: The six landmark distances, in ``MEASUREMENT_NAMES`` order.

    Returns:
        Array of 15 ratios where entry k is ``measurements[i] / measurements[j]``
        for the k-th pair (i, j) of ``RATIO_PAIRS``. Division by zero yields
        ``inf`` or ``nan`` rather than an error.

    Raises:
        InvalidInputError: If there are not exactly six measurements.
    """
    data = np.asarray(measurements, dtype=np.float64)
    if data.ndim != 1 or data.shape[0] != MEASUREMENT_SIZE:
        raise InvalidInputError(
            f"Expected {MEASUREMENT_SIZE} measurements, got {data.size}"
        )

    with np.errstate(divide="ignore", invalid="ignore"):
        return data[_NUMERATORS] / data[_DENOMINATORS]

def convert_dataset(raw: Mapping[K, Sequence[float]]) -> Dict[K, np.ndarray]:
    """Convert raw measurements of every face into ratio vectors.

    Keys and their order are preserved. The input mapping is left untouched.
    """
    return {label: compute_ratios(measurements) for label, measurements in raw.items()}
