"""Testing the validation and the scaling of the input weights"""

import numpy as np
import pytest

from vosealias.distribution.errors import (
    EmptyWeights,
    InvalidInput,
    MissingWeights,
    NegativeWeight,
    NonIterableWeights,
    NonNumericWeight,
)
from vosealias.distribution.variate.alias import (
    VoseAliasMethod,
    scale_for_alias_method,
    validate_weights,
)


def test_missing_weights():
    with pytest.raises(MissingWeights):
        VoseAliasMethod(None)


def test_empty_weights():
    with pytest.raises(EmptyWeights):
        VoseAliasMethod([])


@pytest.mark.parametrize(
    "weights",
    [
        ["a", "monkey"],
        ["0.5", "0.5"],
        [0.5, None],
        [0.1, float("nan")],
        [float("inf"), 1.0],
        [0.2, -np.inf],
        [1 + 2j],
        [10**400, 1],
    ],
)
def test_non_numeric_weight(weights):
    with pytest.raises(NonNumericWeight):
        VoseAliasMethod(weights)


def test_non_numeric_weight_reports_index():
    with pytest.raises(NonNumericWeight) as excinfo:
        validate_weights([0.1, 0.2, float("nan"), 0.3])
    assert excinfo.value.index == 2
    assert "index 2" in str(excinfo.value)


def test_non_iterable_weights():
    with pytest.raises(NonIterableWeights):
        VoseAliasMethod(5)
    with pytest.raises(InvalidInput):
        VoseAliasMethod(0.5)


def test_negative_weight():
    with pytest.raises(NegativeWeight) as excinfo:
        VoseAliasMethod([0.5, -0.1, 0.6])
    assert excinfo.value.index == 1


@pytest.mark.parametrize(
    "weights", [None, [], 3, ["a"], [float("nan")], [10**400], [-1.0]]
)
def test_invalid_input_is_a_value_error(weights):
    with pytest.raises(InvalidInput):
        VoseAliasMethod(weights)
    with pytest.raises(ValueError):
        VoseAliasMethod(weights)


def test_accepted_inputs():
    assert VoseAliasMethod(np.array([10, 20, 30, 40])).size() == 4
    assert VoseAliasMethod((w for w in [5, 5])).size() == 2
    assert VoseAliasMethod([np.float32(0.25), np.int64(3)]).size() == 2


def test_input_is_not_modified():
    weights = [0.1, 0.2, 0.3]
    VoseAliasMethod(weights)
    assert weights == [0.1, 0.2, 0.3]

    array_weights = np.array([10.0, 20.0, 30.0, 40.0])
    VoseAliasMethod(array_weights)
    assert np.array_equal(array_weights, [10.0, 20.0, 30.0, 40.0])


@pytest.mark.parametrize(
    "weights, expected",
    [
        ([10, 20, 30, 40], [0.1, 0.2, 0.3, 0.4]),
        ([5, 5], [0.5, 0.5]),
        ([0.5, 0.5], [0.5, 0.5]),
        ([0.1, 0.2, 0.3, 0.4], [0.1, 0.2, 0.3, 0.4]),
        ([0.1, 0.2, 0.3], [0.1, 0.2, 0.3, 0.4]),
        ([1.0], [1.0]),
        ([0.0, 0.0, 0.0], [0.0, 0.0, 0.0, 1.0]),
        ([1e308, 1e308], [0.5, 0.5]),
        ([0.5e308, 1.5e308, 1.0], [0.25, 0.75, 0.0]),
    ],
)
def test_scale_for_alias_method(weights, expected):
    probabilities, n = scale_for_alias_method(validate_weights(weights))
    assert n == len(expected)
    assert np.allclose(probabilities, expected)
    assert np.isclose(np.sum(probabilities), 1.0)


def test_large_finite_weights():
    sampler = VoseAliasMethod([1e308, 1e308])
    assert sampler.size() == 2
    assert np.allclose(sampler.probabilities(), [0.5, 0.5])


def test_scale_adds_exactly_one_outcome():
    probabilities, n = scale_for_alias_method(validate_weights([0.25, 0.25]))
    assert n == 3
    assert probabilities[-1] == pytest.approx(0.5)
