"""Errors raised when building a sampler from an invalid set of weights

All of them derive from `ValueError` so that callers can catch the generic exception.
"""


class InvalidInput(ValueError):
    """Base class for the invalid weights errors"""


class MissingWeights(InvalidInput):
    """No weights were given"""

    def __init__(self):
        super().__init__("weights must be provided, got None")


class EmptyWeights(InvalidInput):
    """The weights sequence has no element: the average probability 1/n is undefined"""

    def __init__(self):
        super().__init__("weights must contain at least one element")


class NonIterableWeights(InvalidInput):
    """The weights are not a sequence of numbers"""

    def __init__(self, weights):
        super().__init__(
            "weights must be a sequence of numbers, got {t}".format(t=type(weights).__name__)
        )
        self.weights = weights


class NonNumericWeight(InvalidInput):
    """One of the weights is not a finite real number"""

    def __init__(self, index: int, value):
        super().__init__(
            "all weights must be finite real numbers, got {value!r} at index {index}".format(
                value=value, index=index
            )
        )
        self.index = index
        self.value = value


class NegativeWeight(InvalidInput):
    """One of the weights is strictly negative"""

    def __init__(self, index: int, value: float):
        super().__init__(
            "all weights must be positive, got {value!r} at index {index}".format(
                value=value, index=index
            )
        )
        self.index = index
        self.value = value
