"""Sine-wave plus noise series synthesizer."""

from __future__ import annotations

import logging

import numpy as np

from .exceptions import InvalidInput
from .interface import SeriesSynthesizer
from .models import SeriesPoint, is_valid_price

logger = logging.getLogger(__name__)


class SineWaveSynthesizer(SeriesSynthesizer):
    """Bounded oscillation around a base price.

    Math:
        value(i) = base * (1 + (sin(i / PERIOD) + u(i)) / DAMPING)

    Where:
        i        = ordinal index of the point
        u(i)     = uniform draw in [-PERTURBATION, PERTURBATION]
        DAMPING  = 50, so each point sits within about +/-2.2% of base

    Points are computed independently from ``i``; no state is carried from one
    point to the next, so the walk can neither drift to zero nor run away.
    """

    PERIOD = 3.0
    PERTURBATION = 0.1
    DAMPING = 50.0

    def __init__(self, rng: np.random.Generator | None = None) -> None:
        # Not thread-safe: callers sharing a synthesizer across threads must serialize
        self._rng = rng if rng is not None else np.random.default_rng()

    def generate(self, base: float, point_count: int) -> tuple[SeriesPoint, ...]:
        if not is_valid_price(base):
            raise InvalidInput(f"Base price must be positive and finite, got {base}")
        if round(self.envelope(base)[0], 2) <= 0:
            # Every point would round to 0.00
            raise InvalidInput(f"Base price {base} is too small to quote in cents")
        if point_count < 0:
            raise InvalidInput(f"Point count must be non-negative, got {point_count}")
        if point_count == 0:
            return ()

        idx = np.arange(point_count)
        noise = self._rng.uniform(-self.PERTURBATION, self.PERTURBATION, point_count)
        values = base * (1 + (np.sin(idx / self.PERIOD) + noise) / self.DAMPING)

        logger.debug("Synthesized %d points around %.2f", point_count, base)
        return tuple(
            SeriesPoint(index=int(i), value=round(float(v), 2)) for i, v in zip(idx, values)
        )

    @classmethod
    def envelope(cls, base: float) -> tuple[float, float]:
        """(low, high) bounds every generated value stays within, before rounding."""
        spread = (1 + cls.PERTURBATION) / cls.DAMPING
        return base * (1 - spread), base * (1 + spread)
