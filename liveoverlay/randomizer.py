"""Random numbers drawn from a piecewise linear density between two bounds."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from dataclasses import dataclass

_OFFSET = 0.002
_UNIT_BREAKPOINTS = (0.0, 1.0)
_UNIT_DENSITIES = (1.0, 1.0)


@dataclass(frozen=True)
class _Segment:
    start: float
    end: float
    start_density: float
    end_density: float
    area: float

    def sample(self, fraction: float) -> float:
        p, q = self.start_density, self.end_density
        # Inverse of the trapezoid's cumulative area, written to stay stable when p == q.
        t = fraction * (p + q) / (p + math.sqrt(p * p + fraction * (q * q - p * p)))
        return self.start + (self.end - self.start) * t


def _build_segments(breakpoints: Sequence[float], densities: Sequence[float]) -> list[_Segment]:
    if len(breakpoints) < 2 or len(breakpoints) != len(densities):
        raise ValueError("need at least two breakpoints, one density for each")
    if any(d < 0 for d in densities):
        raise ValueError("densities must not be negative")
    segments = []
    for (a, p), (b, q) in zip(zip(breakpoints, densities), zip(breakpoints[1:], densities[1:])):
        if not b > a:
            raise ValueError("breakpoints must be strictly increasing")
        segments.append(_Segment(float(a), float(b), float(p), float(q), (p + q) / 2.0 * (b - a)))
    if sum(s.area for s in segments) <= 0:
        raise ValueError("the distribution has no weight")
    return segments


class NumericRandomizer:
    """Draws values between two bounds from a uniform (piecewise linear) distribution."""

    def __init__(self, minimum=0.0, maximum=1.0, rng: random.Random | None = None):
        self._cast = int if isinstance(minimum, int) and isinstance(maximum, int) else float
        self._minimum = self._cast(minimum)
        self._maximum = self._cast(maximum)
        self._rng = rng if rng is not None else random.Random()
        self._set_distribution((self._minimum, self._maximum), (1.0, 1.0))

    def _set_distribution(self, breakpoints: Sequence[float], densities: Sequence[float]) -> None:
        self._segments = _build_segments(breakpoints, densities)
        self._total_area = sum(s.area for s in self._segments)

    def _on_new_boundaries(self) -> None:
        self._set_distribution((self._minimum, self._maximum), (1.0, 1.0))

    def _draw(self, rng: random.Random) -> float:
        remaining = rng.random() * self._total_area
        for segment in self._segments:
            if segment.area > 0 and remaining < segment.area:
                return segment.sample(remaining / segment.area)
            remaining -= segment.area
        return self._segments[-1].end

    def __call__(self, rng: random.Random | None = None):
        return self.generate(rng)

    def generate(self, rng: random.Random | None = None):
        """Return one value, using ``rng`` if given, else the randomizer's own generator."""
        value = self._draw(rng if rng is not None else self._rng) + _OFFSET
        return self._cast(value)

    @property
    def minimum(self):
        return self._minimum

    @property
    def maximum(self):
        return self._maximum

    def set_boundaries(self, minimum, maximum) -> None:
        """Change the bounds; nothing happens when they are unchanged."""
        minimum, maximum = self._cast(minimum), self._cast(maximum)
        if minimum == self._minimum and maximum == self._maximum:
            return
        self._minimum = minimum
        self._maximum = maximum
        self._on_new_boundaries()


class WeightedNumericRandomizer(NumericRandomizer):
    """A randomizer whose density is given by weights spread evenly over the range.

    With fewer than two weights the distribution falls back to the unit interval.
    """

    def __init__(
        self,
        minimum=0.0,
        maximum=1.0,
        weights: Sequence[float] = (1.0, 1.0),
        rng: random.Random | None = None,
    ):
        super().__init__(minimum, maximum, rng)
        self._weights = [float(w) for w in weights]
        self._on_new_boundaries()

    def _on_new_boundaries(self) -> None:
        count = len(self._weights)
        if count > 1:
            difference = self._maximum - self._minimum
            breakpoints = [difference * i / (count - 1) + float(self._minimum) for i in range(count)]
            self._set_distribution(breakpoints, self._weights)
        else:
            self._set_distribution(_UNIT_BREAKPOINTS, _UNIT_DENSITIES)

    @property
    def weights(self) -> list[float]:
        return list(self._weights)

    def set_weight_distribution(self, weights: Sequence[float]) -> None:
        self._weights = [float(w) for w in weights]
        self._on_new_boundaries()

    def set_boundaries_and_weights(self, minimum, maximum, weights: Sequence[float]) -> None:
        self._minimum = self._cast(minimum)
        self._maximum = self._cast(maximum)
        self.set_weight_distribution(weights)