"""Builds complete MarketDataset snapshots."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from enum import Enum

import numpy as np

from .exceptions import InvalidInput
from .instruments import InstrumentFactory
from .interface import SeriesSynthesizer
from .models import (
    ExchangeRate,
    Instrument,
    InstrumentSpec,
    Market,
    MarketDataset,
    QuoteKind,
    is_valid_price,
    parse_enum,
)
from .seed_prices import (
    BASE_RATE,
    CURRENCY_CODES,
    KIND_MULTIPLIERS,
    RATE_STEP,
    VARIATION_RANGE,
    VOLUME_RANGE,
)
from .synthesizer import SineWaveSynthesizer

logger = logging.getLogger(__name__)


class InvalidSpecPolicy(str, Enum):
    """What build_dataset does with a spec whose base price is not positive.

    ABORT: raise InvalidInput, nothing is returned (default).
    SKIP:  log a warning and leave the instrument out.
    """

    ABORT = "abort"
    SKIP = "skip"


def base_rate(position: int, kind: QuoteKind) -> float:
    """Deterministic part of an exchange rate, rounded to 4 decimals."""
    return round((BASE_RATE + position * RATE_STEP) * KIND_MULTIPLIERS[kind], 4)


def build_exchange_rates(
    kind: QuoteKind | str,
    currency_codes: Sequence[str] = CURRENCY_CODES,
    rng: np.random.Generator | None = None,
) -> tuple[ExchangeRate, ...]:
    """One rate table for ``kind``, in ``currency_codes`` order."""
    kind = parse_enum(QuoteKind, kind, "quote kind")
    rng = rng if rng is not None else np.random.default_rng()

    low, high = VARIATION_RANGE
    vol_low, vol_high = VOLUME_RANGE
    return tuple(
        ExchangeRate(
            currency_code=code,
            rate=base_rate(position, kind),
            variation_percent=round(float(rng.uniform(low, high)), 2),
            volume=int(rng.integers(vol_low, vol_high, endpoint=True)),
        )
        for position, code in enumerate(currency_codes)
    )


def build_dataset(
    instrument_specs: Iterable[InstrumentSpec],
    currency_codes: Sequence[str] = CURRENCY_CODES,
    quote_kinds: Iterable[QuoteKind | str] = tuple(QuoteKind),
    *,
    synthesizer: SeriesSynthesizer | None = None,
    rng: np.random.Generator | None = None,
    on_invalid: InvalidSpecPolicy | str = InvalidSpecPolicy.ABORT,
) -> MarketDataset:
    """Build a new, independent snapshot.

    Instruments are partitioned by market in input order; every Market has an
    entry even when empty. ``rng`` feeds both the default synthesizer and the
    exchange-rate tables, so a seeded generator reproduces the whole dataset.
    When ``synthesizer`` is given it brings its own random source.

    Raises InvalidInput under the ABORT policy as soon as one spec is invalid.
    Nothing partially built escapes.
    """
    policy = parse_enum(InvalidSpecPolicy, on_invalid, "invalid spec policy")
    kinds = [parse_enum(QuoteKind, k, "quote kind") for k in quote_kinds]
    specs = list(instrument_specs)

    # Validate everything before drawing a single random number
    valid_specs: list[InstrumentSpec] = []
    for spec in specs:
        parse_enum(Market, spec.market, "market")
        if is_valid_price(spec.base_price):
            valid_specs.append(spec)
        elif policy is InvalidSpecPolicy.ABORT:
            raise InvalidInput(
                f"{spec.symbol}: base price must be positive and finite, got {spec.base_price}"
            )
        else:
            logger.warning(
                "Skipping %s: base price must be positive and finite, got %s",
                spec.symbol,
                spec.base_price,
            )

    rng = rng if rng is not None else np.random.default_rng()
    factory = InstrumentFactory(synthesizer or SineWaveSynthesizer(rng=rng))

    by_market: dict[Market, list[Instrument]] = {market: [] for market in Market}
    skipped = len(specs) - len(valid_specs)
    for spec in valid_specs:
        try:
            instrument = factory.build_from_spec(spec)
        except InvalidInput as e:
            # The synthesizer can still refuse a price, e.g. one too small to quote
            if policy is InvalidSpecPolicy.ABORT:
                raise
            logger.warning("Skipping %s: %s", spec.symbol, e)
            skipped += 1
            continue
        by_market[instrument.market].append(instrument)

    rates = {kind: build_exchange_rates(kind, currency_codes, rng) for kind in kinds}

    dataset = MarketDataset(
        instruments_by_market=by_market,
        exchange_rates_by_kind=rates,
        currency_codes=tuple(currency_codes),
    )
    logger.debug(
        "Built dataset: %d instruments (%d skipped), %d rate tables",
        len(dataset),
        skipped,
        len(rates),
    )
    return dataset
