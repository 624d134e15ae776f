"""Nearest-face matching over ratio vectors.

Faces are compared with the sum of squared relative differences between
their ratio vectors. The relative difference is always taken against the
reference (dataset) vector, so the score is not symmetric.
"""

import math
from typing import List, Mapping, Sequence

import numpy as np

from ..models.types import MatchResult, ScoreEntry
from .exceptions import InvalidInputError, NotFoundError
from .ratios import compute_ratios


def score(reference: Sequence[float], query: Sequence[float]) -> float:
    """Compare two ratio vectors - the lower the score, the better.

    Args:
        reference: Ratio vector of a dataset entry. Used as the denominator.
        query: Ratio vector of the face being identified.

    Returns:
        Sum of ``((query[i] - reference[i]) / reference[i]) ** 2``. Zero means
        the vectors are identical. May be ``inf`` or ``nan`` when the
        reference holds zeros or non-finite values.

    Raises:
        InvalidInputError: If the vectors differ in length.
    """
    ref = np.asarray(reference, dtype=np.float64)
    qry = np.asarray(query, dtype=np.float64)
    if ref.shape != qry.shape or ref.ndim != 1:
        raise InvalidInputError(
            f"Cannot compare vectors of length {ref.size} and {qry.size}"
        )

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(np.sum(((qry - ref) / ref) ** 2))

def find_best_match(
    dataset: Mapping[str, Sequence[float]],
    query: Sequence[float],
    diagnostics: bool = False,
) -> MatchResult:
    """Find the dataset entry closest to the query.

    Entries are scanned in the mapping's iteration order and the best entry
    only changes on a strictly lower score, so the first of several tied
    entries wins. ``nan`` never compares lower than anything and can only be
    returned when no entry scores below ``inf``; in that case the first entry
    is returned.

    Args:
        dataset: Label to reference ratio vector.
        query: Ratio vector of the face being identified.
        diagnostics: Also return every ``(label, score)`` pair in scan order.

    Returns:
        Match result with the best label and its score.

    Raises:
        NotFoundError: If the dataset is empty.
        InvalidInputError: If a reference and the query differ in length.
    """
    if not dataset:
        raise NotFoundError("Dataset is empty, no face to match against")

    min_difference = math.inf
    best_label = None
    first = None
    table: List[ScoreEntry] = []

    for label, reference in dataset.items():
        difference = score(reference, query)
        if first is None:
            first = (label, difference)
        if diagnostics:
            table.append({'label': label, 'score': difference})
        if difference < min_difference:
            min_difference = difference
            best_label = label

    if best_label is None:
        best_label, min_difference = first

    result: MatchResult = {'label': best_label, 'score': min_difference}
    if diagnostics:
        result['scores'] = table
    return result

def rank_matches(
    dataset: Mapping[str, Sequence[float]],
    query: Sequence[float],
) -> List[ScoreEntry]:
    """Score every entry and sort best first.

    Ties keep their scan order and ``nan`` scores sort last.
    """
    entries: List[ScoreEntry] = [
        {'label': label, 'score': score(reference, query)}
        for label, reference in dataset.items()
    ]
    entries.sort(key=_rank_key)
    return entries

def _rank_key(entry: ScoreEntry):
    value = entry['score']
    if math.isnan(value):
        return (1, 0.0)
    return (0, value)

def match_measurements(
    dataset: Mapping[str, Sequence[float]],
    measurements: Sequence[float],
    diagnostics: bool = False,
) -> MatchResult:
    """Convert raw query measurements to ratios and find the best match."""
    return find_best_match(dataset, compute_ratios(measurements), diagnostics)
