"""Numeric range predicate used by the code-point classifiers."""

from __future__ import annotations

import math

from marklex.errors import InvalidArgumentError


def is_in_range(
    num: float,
    low: float = -math.inf,
    high: float = math.inf,
    *,
    include_low: bool = False,
    include_high: bool = False,
) -> bool:
    """Check whether ``num`` lies between ``low`` and ``high``.

    Bounds are exclusive unless ``include_low`` / ``include_high`` is set.

    Args:
        num: Number to test
        low: Lower bound (default: -inf)
        high: Upper bound (default: inf)
        include_low: Use ``low <= num`` instead of ``low < num``
        include_high: Use ``num <= high`` instead of ``num < high``

    Returns:
        True if ``num`` satisfies both bounds

    Raises:
        InvalidArgumentError: If ``low >= high``

    Example:
        >>> is_in_range(33, 33, 47, include_low=True, include_high=True)
        True
        >>> is_in_range(33, 33, 47)
        False
    """
    if low >= high:
        raise InvalidArgumentError("low", "must be less than 'high'", received=(low, high))

    above = low <= num if include_low else low < num
    below = num <= high if include_high else num < high
    return above and below
