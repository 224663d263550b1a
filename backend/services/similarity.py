"""Cosine similarity over fixed-length user feature vectors."""

from collections.abc import Sequence

import numpy as np
from sklearn.metrics.pairwise import cosine_similarity as sklearn_cosine


class VectorLengthMismatchError(ValueError):
    """Raised when two feature vectors of different length are compared."""


def cosine_similarity(vec_a: Sequence[float], vec_b: Sequence[float]) -> float:
    """dot / (|a| * |b|), or 0.0 when either vector has zero norm.

    Vectors of unequal length are rejected rather than truncated.
    """
    if len(vec_a) != len(vec_b):
        raise VectorLengthMismatchError(
            f"Feature vectors must have the same length ({len(vec_a)} != {len(vec_b)})"
        )
    if len(vec_a) == 0:
        return 0.0

    a = np.asarray(vec_a, dtype=float).reshape(1, -1)
    b = np.asarray(vec_b, dtype=float).reshape(1, -1)
    if not np.any(a) or not np.any(b):
        return 0.0

    # sklearn normalizes rows; zero rows are handled above
    return float(sklearn_cosine(a, b)[0][0])
