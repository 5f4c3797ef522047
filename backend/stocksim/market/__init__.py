"""Synthetic market data subsystem for the stock simulator dashboard.

Public API:
    SeriesSynthesizer     - Abstract interface for series generators
    SineWaveSynthesizer   - Seeded sine-plus-noise synthesizer
    InstrumentFactory     - Builds one Instrument across every RangeKind
    build_dataset         - Builds an immutable MarketDataset snapshot
    DatasetStore          - Publishes snapshots by atomic reference swap
    QueryService          - Read-only filters and lookups over a snapshot
    create_dataset_store  - Factory configured from environment variables
    create_market_router  - FastAPI router factory for the dashboard API
"""

from .dataset import InvalidSpecPolicy, build_dataset, build_exchange_rates
from .exceptions import InvalidInput, MarketDataError, NotFound
from .factory import create_dataset_store
from .instruments import InstrumentFactory
from .interface import SeriesSynthesizer
from .models import (
    ExchangeRate,
    Instrument,
    InstrumentKind,
    InstrumentSpec,
    Market,
    MarketDataset,
    QuoteKind,
    RangeKind,
    SeriesPoint,
    Trend,
)
from .query import QueryService
from .routes import create_market_router
from .store import DatasetStore
from .synthesizer import SineWaveSynthesizer

__all__ = [
    "SeriesSynthesizer",
    "SineWaveSynthesizer",
    "InstrumentFactory",
    "build_dataset",
    "build_exchange_rates",
    "InvalidSpecPolicy",
    "DatasetStore",
    "QueryService",
    "create_dataset_store",
    "create_market_router",
    "MarketDataError",
    "InvalidInput",
    "NotFound",
    "ExchangeRate",
    "Instrument",
    "InstrumentKind",
    "InstrumentSpec",
    "Market",
    "MarketDataset",
    "QuoteKind",
    "RangeKind",
    "SeriesPoint",
    "Trend",
]
