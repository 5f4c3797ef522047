"""Read-only queries over a published MarketDataset."""

from __future__ import annotations

from .exceptions import InvalidInput, NotFound
from .models import (
    ExchangeRate,
    Instrument,
    Market,
    MarketDataset,
    QuoteKind,
    Trend,
    parse_enum,
)
from .store import DatasetStore


class QueryService:
    """Filters and lookups for the dashboard.

    Bound either to a fixed MarketDataset or to a DatasetStore. With a store,
    each call reads the current snapshot once, so a concurrent regenerate()
    never mixes two datasets inside one result.
    """

    def __init__(self, source: MarketDataset | DatasetStore) -> None:
        self._source = source

    def _snapshot(self) -> MarketDataset:
        if isinstance(self._source, DatasetStore):
            return self._source.snapshot
        return self._source

    def list_instruments(
        self,
        market: Market | str | None = None,
        trend: Trend | str = Trend.ALL,
        search_text: str | None = None,
        limit: int | None = None,
    ) -> list[Instrument]:
        """Instruments in stored order, narrowed by market, trend, text, then limit.

        ``search_text`` is a case-insensitive substring of symbol or display
        name. A ``limit`` larger than the result is fine; below 1 is not.
        """
        market = parse_enum(Market, market, "market") if market is not None else None
        trend = parse_enum(Trend, trend if trend is not None else Trend.ALL, "trend")
        if limit is not None and (
            isinstance(limit, bool) or not isinstance(limit, int) or limit < 1
        ):
            raise InvalidInput(f"limit must be a positive integer, got {limit!r}")

        snapshot = self._snapshot()
        if market is not None:
            items = list(snapshot.instruments_by_market.get(market, ()))
        else:
            items = list(snapshot.instruments())

        if trend is Trend.UP:
            items = [i for i in items if i.change_percent > 0]
        elif trend is Trend.DOWN:
            items = [i for i in items if i.change_percent < 0]

        needle = (search_text or "").strip().lower()
        if needle:
            items = [
                i for i in items
                if needle in i.symbol.lower() or needle in i.display_name.lower()
            ]

        if limit is not None:
            items = items[:limit]
        return items

    def get_instrument(self, symbol: str) -> Instrument:
        """Case-insensitive exact symbol match.

        Markets are searched in declaration order (BMV, then BNY); the first
        hit wins when a symbol is listed on both.
        """
        wanted = symbol.strip().upper()
        for instrument in self._snapshot().instruments():
            if instrument.symbol.upper() == wanted:
                return instrument
        raise NotFound(f"Instrument not found: {symbol!r}")

    def list_exchange_rates(self, kind: QuoteKind | str = QuoteKind.SPOT) -> list[ExchangeRate]:
        kind = parse_enum(QuoteKind, kind, "quote kind")
        snapshot = self._snapshot()
        if kind not in snapshot.exchange_rates_by_kind:
            raise InvalidInput(f"No exchange-rate table for {kind.value!r}")
        return list(snapshot.exchange_rates_by_kind[kind])

    def list_markets(self) -> list[Market]:
        return list(Market)

    def currency_codes(self) -> list[str]:
        return list(self._snapshot().currency_codes)
