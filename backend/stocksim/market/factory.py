"""Factory for the process-wide dataset store."""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence

import numpy as np

from .dataset import InvalidSpecPolicy, build_dataset
from .exceptions import InvalidInput
from .models import InstrumentSpec, parse_enum
from .seed_prices import CURRENCY_CODES, DEFAULT_INSTRUMENTS
from .store import DatasetStore

logger = logging.getLogger(__name__)


def _read_seed() -> int | None:
    raw = os.environ.get("STOCKSIM_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise InvalidInput(f"STOCKSIM_SEED must be an integer, got {raw!r}") from None


def create_dataset_store(
    instrument_specs: Sequence[InstrumentSpec] = DEFAULT_INSTRUMENTS,
    currency_codes: Sequence[str] = CURRENCY_CODES,
) -> DatasetStore:
    """Create a DatasetStore configured from environment variables.

    - STOCKSIM_SEED set → every build draws from one seeded generator, so the
      sequence of published snapshots is reproducible
    - STOCKSIM_INVALID_SPEC_POLICY = abort (default) | skip

    Returns an empty store; the first read (or regenerate()) builds the data.
    """
    seed = _read_seed()
    policy = parse_enum(
        InvalidSpecPolicy,
        os.environ.get("STOCKSIM_INVALID_SPEC_POLICY", "").strip() or InvalidSpecPolicy.ABORT,
        "STOCKSIM_INVALID_SPEC_POLICY",
    )
    rng = np.random.default_rng(seed)
    specs = tuple(instrument_specs)
    codes = tuple(currency_codes)

    def builder():
        return build_dataset(specs, codes, rng=rng, on_invalid=policy)

    if seed is None:
        logger.info("Dataset store: %d instruments, unseeded, policy=%s", len(specs), policy.value)
    else:
        logger.info("Dataset store: %d instruments, seed=%d, policy=%s", len(specs), seed, policy.value)
    return DatasetStore(builder)
