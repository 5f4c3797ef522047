"""HTTP endpoints for the dashboard."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException

from .exceptions import InvalidInput, NotFound
from .models import QuoteKind, RangeKind, parse_enum
from .query import QueryService
from .store import DatasetStore

logger = logging.getLogger(__name__)


def create_market_router(store: DatasetStore) -> APIRouter:
    """Create the market data router bound to a dataset store.

    This factory pattern lets us inject the store without globals. Handlers are
    plain functions: FastAPI runs them in its threadpool, so a regenerate()
    holding the store lock never stalls the event loop.
    """
    router = APIRouter(prefix="/api", tags=["market"])
    queries = QueryService(store)

    @router.get("/stocks")
    def list_stocks(
        market: str | None = None,
        trend: str = "all",
        q: str = "",
        limit: str | None = None,
        range: str | None = None,
    ) -> list[dict[str, Any]]:
        """Instrument summaries, e.g. GET /api/stocks?market=BMV&trend=up&limit=5.

        ``range`` (1D, 1W or 1M) narrows each summary's series to one range.
        """
        try:
            range_kind = parse_enum(RangeKind, range, "range") if range else None
            limit_value = _parse_limit(limit)
            items = queries.list_instruments(
                market=market or None,
                trend=trend,
                search_text=q,
                limit=limit_value,
            )
        except InvalidInput as e:
            raise HTTPException(status_code=400, detail=str(e)) from e
        return [item.to_summary(range_kind) for item in items]

    @router.get("/stocks/{symbol}")
    def get_stock(symbol: str) -> dict[str, Any]:
        try:
            return queries.get_instrument(symbol).to_dict()
        except NotFound as e:
            raise HTTPException(status_code=404, detail="Not found") from e

    @router.get("/markets")
    def list_markets() -> dict[str, list[str]]:
        return {"markets": [m.value for m in queries.list_markets()]}

    @router.get("/exchange")
    def list_exchange(kind: str = "spot") -> dict[str, Any]:
        """Exchange-rate table for one quote kind (spot, fix, cash, crypto)."""
        try:
            quote_kind = parse_enum(QuoteKind, kind, "quote kind")
            rates = queries.list_exchange_rates(quote_kind)
        except InvalidInput as e:
            raise HTTPException(status_code=400, detail="invalid kind") from e
        return {
            "kind": quote_kind.value,
            "rates": [r.to_dict() for r in rates],
            "currency_codes": queries.currency_codes(),
        }

    @router.post("/dataset/regenerate")
    def regenerate() -> dict[str, int]:
        """Build and publish a new snapshot. Readers switch over atomically."""
        try:
            store.regenerate()
        except InvalidInput as e:
            logger.error("Dataset regeneration failed: %s", e)
            raise HTTPException(status_code=400, detail=str(e)) from e
        return {"version": store.version}

    return router


def _parse_limit(raw: str | None) -> int | None:
    """Query-string limit to int. Non-numeric text is InvalidInput, like limit=0."""
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        raise InvalidInput(f"limit must be a positive integer, got {raw!r}") from None
