# Copyright (c) 2024, Juanwu Lu.
# Released under the BSD 3-Clause License.
# Please see the LICENSE file that should have been included as part of this
# project source code.
"""Logarithms in arbitrary bases.

Every function reduces to :func:`log_in_base` through one of the identities

.. math::

    \\log_b(x^p) = p\\log_b(x), \\qquad
    \\log_{b^p}(x) = \\frac{1}{p}\\log_b(x),

or by dividing a numerator/denominator pair before delegating. Arguments are
validated before any logarithm is evaluated and violations raise
:class:`InvalidArgument`.

.. note::

    All computations use IEEE 754 double precision through :func:`math.log`.
    `NaN` values and bases fail the positivity checks, while infinite inputs
    pass validation and yield IEEE 754 special values.
"""
from __future__ import annotations

import math

from .typing import Real
from .utils.logging import get_pylogger

logger = get_pylogger(__name__, level_from_env=False)


class InvalidArgument(ValueError):
    """Raised when an argument violates a logarithm precondition."""


def log_in_base(value: Real, base: Real) -> float:
    """Computes the logarithm of `value` in base `base`.

    .. note::

        \\log_{b}(x) = \\frac{\\ln(x)}{\\ln(b)}

    Args:
        value (Real): The operand, must be `> 0`.
        base (Real): The base, must be `> 0` and `!= 1`.

    Returns:
        float: The logarithm of `value` in base `base`.

    Raises:
        InvalidArgument: If `base <= 0`, `base == 1`, or `value <= 0`.
    """
    _check_argument(base > 0, f"base must be > 0: {base}")
    _check_argument(base != 1, "base must not be equal to 1")
    _check_argument(value > 0, f"value must be > 0: {value}")

    return math.log(value) / math.log(base)


def log_with_powered_value(value: Real, power: Real, base: Real) -> float:
    """Computes the logarithm of `value` raised to `power` in base `base`.

    Args:
        value (Real): The operand before exponentiation, must be `> 0`.
        power (Real): The exponent applied to `value`.
        base (Real): The base, must be `> 0` and `!= 1`.

    Returns:
        float: `power` times the logarithm of `value` in base `base`.
    """
    return power * log_in_base(value, base)


def log_with_powered_base(value: Real, base: Real, power: Real) -> float:
    """Computes the logarithm of `value` in base `base` raised to `power`.

    A zero `power` is accepted and gives an infinite or `NaN` result
    following IEEE 754 division by zero.

    Args:
        value (Real): The operand, must be `> 0`.
        base (Real): The base before exponentiation, must be `> 0` and `!= 1`.
        power (Real): The exponent applied to `base`, must not be `1`.

    Returns:
        float: The logarithm of `value` in base `base ** power`.

    Raises:
        InvalidArgument: If `power == 1` or `value`/`base` are invalid.
    """
    _check_argument(power != 1, "power must not be 1")
    if power == 0:
        # float division raises on zero, keep the IEEE 754 signed infinity
        reciprocal = math.copysign(math.inf, power)
    else:
        reciprocal = 1 / power

    return reciprocal * log_in_base(value, base)


def log_of_quotient(
    value_numerator: Real, value_denominator: Real, base: Real
) -> float:
    """Computes the logarithm of `value_numerator / value_denominator`.

    Args:
        value_numerator (Real): Numerator of the operand.
        value_denominator (Real): Denominator of the operand, must not be `0`.
        base (Real): The base, must be `> 0` and `!= 1`.

    Returns:
        float: The logarithm of the quotient in base `base`.

    Raises:
        InvalidArgument: If `value_denominator == 0`, or if the quotient or
            `base` are invalid.
    """
    _check_argument(
        value_denominator != 0,
        f"value_denominator must not be zero: {value_denominator}",
    )
    return log_in_base(value_numerator / value_denominator, base)


def log_with_base_quotient(
    value: Real, base_numerator: Real, base_denominator: Real
) -> float:
    """Computes the logarithm of `value` in base
    `base_numerator / base_denominator`.

    Args:
        value (Real): The operand, must be `> 0`.
        base_numerator (Real): Numerator of the base.
        base_denominator (Real): Denominator of the base, must not be `0`.

    Returns:
        float: The logarithm of `value` in the quotient base.

    Raises:
        InvalidArgument: If `base_denominator == 0`, or if `value` or the
            quotient base are invalid.
    """
    _check_argument(
        base_denominator != 0,
        f"base_denominator must not be zero: {base_denominator}",
    )
    return log_in_base(value, base_numerator / base_denominator)


def log_of_quotient_and_base_quotient(
    value_numerator: Real,
    value_denominator: Real,
    base_numerator: Real,
    base_denominator: Real,
) -> float:
    """Computes the logarithm of a quotient operand in a quotient base.

    The value denominator is checked before the base denominator.

    Args:
        value_numerator (Real): Numerator of the operand.
        value_denominator (Real): Denominator of the operand, must not be `0`.
        base_numerator (Real): Numerator of the base.
        base_denominator (Real): Denominator of the base, must not be `0`.

    Returns:
        float: The logarithm of `value_numerator / value_denominator` in base
        `base_numerator / base_denominator`.

    Raises:
        InvalidArgument: If either denominator is `0`, or if the resulting
            operand or base are invalid.
    """
    _check_argument(
        value_denominator != 0,
        f"value_denominator must not be zero: {value_denominator}",
    )
    _check_argument(
        base_denominator != 0,
        f"base_denominator must not be zero: {base_denominator}",
    )
    return log_in_base(
        value_numerator / value_denominator,
        base_numerator / base_denominator,
    )


def _check_argument(condition: bool, message: str) -> None:
    if not condition:
        logger.debug("Rejected argument: %s", message)
        raise InvalidArgument(message)
