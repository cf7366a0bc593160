"""Simple probability density functions used to shape hand ranges."""

from __future__ import annotations

import math


class ExponentialDistribution:
    """Exponential density ``lam * exp(-lam * x)`` with rate ``lam``."""

    def __init__(self, lam: float) -> None:
        self.lam = float(lam)

    def __call__(self, x: float) -> float:
        return self.lam * math.exp(-(self.lam * x))

    def __repr__(self) -> str:
        return f"ExponentialDistribution(lam={self.lam!r})"


class GaussianDistribution:
    """Normal density with mean ``mean`` and standard deviation ``std_dev``."""

    _SQRT_2PI = math.sqrt(2 * math.pi)

    def __init__(self, mean: float, std_dev: float) -> None:
        self.mean = float(mean)
        self.std_dev = float(std_dev)
        self._base = 1.0 / (self.std_dev * self._SQRT_2PI)

    def __call__(self, x: float) -> float:
        exponent = -((x - self.mean) ** 2) / (2 * self.std_dev * self.std_dev)
        return self._base * math.exp(exponent)

    def __repr__(self) -> str:
        return f"GaussianDistribution(mean={self.mean!r}, std_dev={self.std_dev!r})"