"""Handling of parameters with constraint, for example positivity.

This is done by specifying the setter/getter properties of the parameter.
"""

from functools import partial


def argument_with_condition(argument_name, condition, message):
    def sp_getter(instance):
        return instance.__dict__[argument_name]

    def sp_setter(instance, value):
        if condition(value):
            instance.__dict__[argument_name] = value
        else:
            raise ValueError(argument_name + ": " + message)

    return property(sp_getter, sp_setter)


strictly_positive = partial(
    argument_with_condition,
    condition=lambda x: x > 0,
    message="expected a strictly positive value",
)

optional_positive_integer = partial(
    argument_with_condition,
    condition=lambda x: x is None or (isinstance(x, int) and x >= 0),
    message="expected None or a positive integer",
)
