"""Password entropy in bits."""

import math

from .base import get_base
from .length import get_length


def _log2(x: float) -> float:
    if x == 0:
        return -math.inf
    if x < 0 or math.isnan(x):
        return math.nan
    return math.log2(x)


def _divide(numerator: float, denominator: float) -> float:
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def log_x(base: float, n: float) -> float:
    """Return log of ``n`` in ``base``; a zero base yields 0."""
    if base == 0:
        return 0.0
    return _divide(_log2(n), _log2(base))


def log_pow(exp_base: float, power: int, log_base: float) -> float:
    """Return log_{log_base}(exp_base ** power) without forming the power."""
    step = log_x(log_base, exp_base)
    total = 0.0
    for _ in range(power):
        total += step
    return total


def get_entropy(password: str) -> float:
    """Return the estimated entropy of ``password`` in bits."""
    return log_pow(float(get_base(password)), get_length(password), 2)