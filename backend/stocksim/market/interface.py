"""Abstract interface for series synthesizers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .models import SeriesPoint


class SeriesSynthesizer(ABC):
    """Contract for anything that fabricates a price series.

    Implementations are pure apart from drawing on their own random source.
    InstrumentFactory calls ``generate`` once per RangeKind with the same base
    price, so ranges never depend on one another.

    Usage:
        synth = SineWaveSynthesizer(rng=np.random.default_rng(42))
        points = synth.generate(190.0, 24)
    """

    @abstractmethod
    def generate(self, base: float, point_count: int) -> tuple[SeriesPoint, ...]:
        """Return exactly ``point_count`` points indexed 0..point_count-1.

        ``point_count == 0`` yields an empty tuple. A non-positive ``base``
        raises InvalidInput.
        """
