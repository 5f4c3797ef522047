"""Data models for synthetic market data."""

from __future__ import annotations

import math
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TypeVar

from .exceptions import InvalidInput

E = TypeVar("E", bound=Enum)


def is_valid_price(value: float) -> bool:
    """True for finite, strictly positive prices. NaN and infinities are rejected."""
    return math.isfinite(value) and value > 0


def parse_enum(enum_cls: type[E], value: E | str, label: str | None = None) -> E:
    """Coerce a member or its string value (any case) to ``enum_cls``.

    Raises InvalidInput for anything that is not a member.
    """
    if isinstance(value, enum_cls):
        return value
    text = str(value).strip()
    for candidate in (text, text.upper(), text.lower()):
        try:
            return enum_cls(candidate)
        except ValueError:
            continue
    raise InvalidInput(f"Unknown {label or enum_cls.__name__}: {value!r}")


class Market(str, Enum):
    """Markets an equity can be listed on. Declaration order is the lookup order."""

    BMV = "BMV"  # Bolsa Mexicana de Valores
    BNY = "BNY"  # New York


class RangeKind(str, Enum):
    """Time granularity of a generated series."""

    INTRADAY = "1D"
    WEEKLY = "1W"
    MONTHLY = "1M"

    @property
    def point_count(self) -> int:
        return _POINT_COUNTS[self]


_POINT_COUNTS: dict[RangeKind, int] = {
    RangeKind.INTRADAY: 24,
    RangeKind.WEEKLY: 7,
    RangeKind.MONTHLY: 30,
}

# Summary fields are derived from this range
CANONICAL_RANGE = RangeKind.INTRADAY


class Trend(str, Enum):
    UP = "up"
    DOWN = "down"
    ALL = "all"


class QuoteKind(str, Enum):
    """Quoting convention for a currency exchange-rate table."""

    SPOT = "spot"
    FIX = "fix"
    CASH = "cash"
    CRYPTO = "crypto"


class InstrumentKind(str, Enum):
    """Discriminant shared by every record a dashboard table can render."""

    EQUITY = "equity"
    EXCHANGE_RATE = "exchange_rate"


@dataclass(frozen=True, slots=True)
class SeriesPoint:
    """One sample of a generated series. ``index`` is an ordinal, not a timestamp."""

    index: int
    value: float

    def to_dict(self) -> dict:
        return {"index": self.index, "value": self.value}


@dataclass(frozen=True, slots=True)
class InstrumentSpec:
    """Build input for one instrument."""

    symbol: str
    display_name: str
    market: Market
    base_price: float


@dataclass(frozen=True, slots=True)
class Instrument:
    """Immutable equity record with a synthesized history for every range.

    ``last_value``, ``change_percent``, ``day_high``, ``day_low`` and
    ``volatility`` are all derived from the intraday series.
    """

    symbol: str
    display_name: str
    market: Market
    series: Mapping[RangeKind, tuple[SeriesPoint, ...]]
    last_value: float
    change_percent: float
    day_high: float
    day_low: float
    volatility: float

    @property
    def kind(self) -> InstrumentKind:
        return InstrumentKind.EQUITY

    @property
    def direction(self) -> str:
        """'up', 'down', or 'flat'."""
        if self.change_percent > 0:
            return "up"
        elif self.change_percent < 0:
            return "down"
        return "flat"

    def series_dict(self, range_kind: RangeKind | None = None) -> dict[str, list[dict]]:
        """Serialize the series, optionally only one range."""
        kinds = [range_kind] if range_kind is not None else list(RangeKind)
        return {rk.value: [p.to_dict() for p in self.series[rk]] for rk in kinds}

    def to_summary(self, range_kind: RangeKind | None = None) -> dict:
        """Row shape used by list views."""
        return {
            "kind": self.kind.value,
            "symbol": self.symbol,
            "display_name": self.display_name,
            "market": self.market.value,
            "last_value": self.last_value,
            "change_percent": self.change_percent,
            "series": self.series_dict(range_kind),
        }

    def to_dict(self) -> dict:
        """Serialize for JSON transmission."""
        result = self.to_summary()
        result.update(
            {
                "day_high": self.day_high,
                "day_low": self.day_low,
                "volatility": self.volatility,
                "direction": self.direction,
            }
        )
        return result


@dataclass(frozen=True, slots=True)
class ExchangeRate:
    currency_code: str
    rate: float
    variation_percent: float
    volume: int

    @property
    def kind(self) -> InstrumentKind:
        return InstrumentKind.EXCHANGE_RATE

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "currency_code": self.currency_code,
            "rate": self.rate,
            "variation_percent": self.variation_percent,
            "volume": self.volume,
        }


def _freeze(mapping: Mapping) -> Mapping:
    return MappingProxyType({key: tuple(values) for key, values in mapping.items()})


@dataclass(frozen=True, slots=True)
class MarketDataset:
    """One fully built, immutable snapshot of every instrument and rate table.

    Regenerating produces a new MarketDataset; nothing mutates an existing one.
    """

    instruments_by_market: Mapping[Market, tuple[Instrument, ...]]
    exchange_rates_by_kind: Mapping[QuoteKind, tuple[ExchangeRate, ...]]
    currency_codes: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        # Frozen dataclass: object.__setattr__ is the only way in
        object.__setattr__(self, "instruments_by_market", _freeze(self.instruments_by_market))
        object.__setattr__(self, "exchange_rates_by_kind", _freeze(self.exchange_rates_by_kind))
        object.__setattr__(self, "currency_codes", tuple(self.currency_codes))

    def instruments(self) -> Iterator[Instrument]:
        """Every instrument, markets in declaration order, then stored order."""
        for market in Market:
            yield from self.instruments_by_market.get(market, ())

    def __len__(self) -> int:
        return sum(len(items) for items in self.instruments_by_market.values())
