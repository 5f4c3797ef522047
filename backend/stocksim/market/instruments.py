"""Builds Instrument records from a base price."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from types import MappingProxyType

import numpy as np

from .exceptions import InvalidInput
from .interface import SeriesSynthesizer
from .models import (
    CANONICAL_RANGE,
    Instrument,
    InstrumentSpec,
    Market,
    RangeKind,
    SeriesPoint,
    is_valid_price,
    parse_enum,
)

logger = logging.getLogger(__name__)


def change_percent(first: float, last: float) -> float:
    """Percentage change from first to last, rounded to 2 decimals."""
    if first == 0:
        return 0.0
    return round((last - first) / first * 100, 2)


def volatility(points: Sequence[SeriesPoint]) -> float:
    """Population std dev of point-to-point percent returns, rounded to 4 decimals."""
    if len(points) < 2:
        return 0.0
    values = np.array([p.value for p in points], dtype=float)
    returns = np.diff(values) / values[:-1] * 100
    return round(float(np.std(returns)), 4)


class InstrumentFactory:
    """Turns (symbol, name, market, base price) into a fully derived Instrument.

    Every RangeKind is synthesized independently from the same base price.
    """

    def __init__(self, synthesizer: SeriesSynthesizer) -> None:
        self._synth = synthesizer

    def build(
        self,
        symbol: str,
        display_name: str,
        market: Market | str,
        base_price: float,
    ) -> Instrument:
        market = parse_enum(Market, market, "market")
        if not is_valid_price(base_price):
            raise InvalidInput(
                f"{symbol}: base price must be positive and finite, got {base_price}"
            )

        series = {
            range_kind: tuple(self._synth.generate(base_price, range_kind.point_count))
            for range_kind in RangeKind
        }

        canonical = series[CANONICAL_RANGE]
        if not canonical:
            raise InvalidInput(f"{symbol}: {CANONICAL_RANGE.value} series is empty")
        values = [p.value for p in canonical]

        instrument = Instrument(
            symbol=symbol,
            display_name=display_name,
            market=market,
            series=MappingProxyType(series),
            last_value=values[-1],
            change_percent=change_percent(values[0], values[-1]),
            day_high=max(values),
            day_low=min(values),
            volatility=volatility(canonical),
        )
        logger.debug(
            "Built %s/%s: last=%.2f change=%.2f%%",
            market.value,
            symbol,
            instrument.last_value,
            instrument.change_percent,
        )
        return instrument

    def build_from_spec(self, spec: InstrumentSpec) -> Instrument:
        return self.build(spec.symbol, spec.display_name, spec.market, spec.base_price)
