"""Core ratio and matching functionality"""
from .exceptions import FaceMatchError, InvalidInputError, NotFoundError
from .ratios import (
    MEASUREMENT_SIZE,
    MEASUREMENT_NAMES,
    RATIO_PAIRS,
    RATIO_SIZE,
    compute_ratios,
    convert_dataset
)
from .matching import score, find_best_match, rank_matches, match_measurements

__all__ = [
    'FaceMatchError',
    'InvalidInputError',
    'NotFoundError',
    'MEASUREMENT_SIZE',
    'MEASUREMENT_NAMES',
    'RATIO_PAIRS',
    'RATIO_SIZE',
    'compute_ratios',
    'convert_dataset',
    'score',
    'find_best_match',
    'rank_matches',
    'match_measurements'
]
