import numpy as np
import pytest

from services.similarity import VectorLengthMismatchError, cosine_similarity


def test_cosine_similarity_identical():
    vec = [10.0, 0.0, 55.5, 3.0]
    assert cosine_similarity(vec, vec) == pytest.approx(1.0)


def test_cosine_similarity_orthogonal():
    assert cosine_similarity([1.0, 0.0], [0.0, 1.0]) == pytest.approx(0.0)


def test_cosine_similarity_scaled():
    assert cosine_similarity([1.0, 2.0, 3.0], [2.0, 4.0, 6.0]) == pytest.approx(1.0)


def test_cosine_similarity_known_value():
    # dot = 11, |a| = sqrt(5), |b| = 5
    assert cosine_similarity([1.0, 2.0], [3.0, 4.0]) == pytest.approx(11 / (5 ** 0.5 * 5))


def test_cosine_similarity_zero_vector():
    assert cosine_similarity([0.0, 0.0, 0.0], [1.0, 2.0, 3.0]) == 0.0
    assert cosine_similarity([1.0, 2.0, 3.0], [0.0, 0.0, 0.0]) == 0.0


def test_cosine_similarity_empty():
    assert cosine_similarity([], []) == 0.0


def test_cosine_similarity_length_mismatch():
    with pytest.raises(VectorLengthMismatchError):
        cosine_similarity([1.0, 2.0, 3.0], [1.0, 2.0])


def test_length_mismatch_is_value_error():
    with pytest.raises(ValueError):
        cosine_similarity([1.0], [])


def test_cosine_similarity_numpy_input():
    vec = np.array([1.0, 2.0])
    assert cosine_similarity(vec, vec) == pytest.approx(1.0)
    assert cosine_similarity(np.array([]), np.array([])) == 0.0
