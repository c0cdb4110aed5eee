"""Minimal-standard random number generator and the distributions built on it."""

from __future__ import annotations

import math

DEFAULT_SEED = 1002002

_MASK64 = (1 << 64) - 1
_MODULUS = 0x7FFFFFFF
_MULTIPLIER = 16807
_PI = 3.14159265


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _trunc_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    r = abs(a) % abs(b)
    return -r if a < 0 else r


class RandomNumbers:
    """Park-Miller linear congruential generator (16807 z mod 2**31 - 1)."""

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        self._state = 1
        self.seed(seed)

    def seed(self, seed: int) -> None:
        """Reset the generator; a seed of zero is replaced by one."""
        self._state = (seed if seed != 0 else 1) & _MASK64

    def next_rand(self) -> int:
        """Advance the generator and return the new state."""
        s = self._state
        lo = (_MULTIPLIER * (s & 0xFFFF)) & _MASK64
        hi = (_MULTIPLIER * (s >> 16)) & _MASK64
        lo = (lo + ((hi & 0x7FFF) << 16)) & _MASK64
        lo = (lo + (hi >> 15)) & _MASK64
        if lo > _MODULUS:
            lo -= _MODULUS
        self._state = lo
        return lo

    def rand_int(self, low: int, high: int) -> int:
        """Integer in ``[low, high)``; ``low`` when the bounds are equal."""
        if low == high:
            return low
        rnd = _to_int32(self.next_rand())
        return _trunc_mod(rnd, high - low) + low

    def rand_int_different_than(self, low: int, high: int, diff: int) -> int:
        """Like :meth:`rand_int`, redrawing up to 20 times to avoid ``diff``."""
        if low == high:
            return low
        num = self.rand_int(low, high)
        retries = 0
        while num == diff and retries < 20:
            retries += 1
            num = self.rand_int(low, high)
        return num

    def rand01(self) -> float:
        """Uniform value in ``(0, 1]``."""
        return self.next_rand() / 2147483647.0

    def rand_normal(self, mean: float, std_dev: float) -> float:
        """Normal variate by the Box-Muller method."""
        u = 0.0
        while u == 0.0:
            u = self.rand01()
        radius = math.sqrt(-2.0 * math.log(u))
        theta = 0.0
        while theta == 0.0:
            theta = 2.0 * _PI * self.rand01()
        return radius * math.cos(theta) * std_dev + mean

    def rand_beta(self, alpha: float, beta: float) -> float:
        """Beta variate: Johnk's method for small shapes, gamma ratio otherwise."""
        if alpha <= 1.0 and beta <= 1.0:
            return self.rand_beta_johnk(alpha, beta)
        return self.rand_beta_marsaglia_tsang(alpha, beta)

    def rand_beta_johnk(self, alpha: float, beta: float) -> float:
        """Rejection sampler after Johnk; returns the accepted power sum."""
        while True:
            u1 = self.rand01()
            u2 = self.rand01()
            total = u1 ** (1.0 / alpha) + u2 ** (1.0 / beta)
            if total <= 1.0:
                return total

    def rand_beta_marsaglia_tsang(self, alpha: float, beta: float) -> float:
        """Beta variate as the ratio of two gamma variates."""
        gamma_alpha = self.rand_gamma(alpha)
        gamma_beta = self.rand_gamma(beta)
        return gamma_alpha / (gamma_alpha + gamma_beta)

    def rand_gamma(self, alpha: float) -> float:
        """Gamma(alpha, 1) variate by Marsaglia and Tsang's method."""
        boosted = alpha < 1.0
        if boosted:
            alpha += 1.0
        d = alpha - 1.0 / 3.0
        c = 1.0 / math.sqrt(9.0 * d)
        while True:
            x = self.rand_normal(0.0, 1.0)
            u = self.rand01()
            v = (1.0 + c * x) ** 3
            if v <= 0:
                continue
            if u < 1.0 - 0.0331 * x ** 4:
                break
            if math.log(u) < 0.5 * x * x + d * (1.0 - v + math.log(v)):
                break
        gamma = d * v
        if boosted:
            gamma *= u ** (1.0 / (alpha - 1.0))
        return gamma