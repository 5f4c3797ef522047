"""Fixtures for market data tests.

``ScriptedSynthesizer`` replaces the random synthesizer so filters and derived
fields can be asserted against exact numbers.
"""

import numpy as np
import pytest

from stocksim.market.dataset import build_dataset
from stocksim.market.interface import SeriesSynthesizer
from stocksim.market.models import InstrumentSpec, Market, RangeKind, SeriesPoint


class ScriptedSynthesizer(SeriesSynthesizer):
    """Returns a fixed intraday series per base price, flat series otherwise."""

    def __init__(self, scripts: dict[float, list[float]] | None = None) -> None:
        self.scripts = scripts or {}
        self.calls: list[tuple[float, int]] = []

    def generate(self, base, point_count):
        self.calls.append((base, point_count))
        if point_count == RangeKind.INTRADAY.point_count and base in self.scripts:
            values = self.scripts[base]
        else:
            values = [base] * point_count
        return tuple(SeriesPoint(index=i, value=v) for i, v in enumerate(values))


# (symbol, name, market, base, intraday script) -> change percent noted on the right
SCRIPTED_SPECS = [
    ("AMXL", "América Móvil L", Market.BMV, 10.0, [10.0, 10.5, 11.0]),  # +10.00
    ("WALMEX", "Walmart de México", Market.BMV, 20.0, [20.0, 19.0]),  # -5.00
    ("CEMEXCPO", "Cemex CPO", Market.BMV, 30.0, None),  # 0.00
    ("AAPL", "Apple", Market.BNY, 40.0, [40.0, 42.0]),  # +5.00
    ("MSFT", "Microsoft", Market.BNY, 50.0, [50.0, 45.0]),  # -10.00
    ("AMXL", "America Movil ADR", Market.BNY, 60.0, [60.0, 66.0]),  # +10.00
]


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def make_synth():
    """The ScriptedSynthesizer class, for tests that need their own scripts."""
    return ScriptedSynthesizer


@pytest.fixture
def scripted_synth():
    return ScriptedSynthesizer(
        {base: script for _, _, _, base, script in SCRIPTED_SPECS if script is not None}
    )


@pytest.fixture
def specs():
    return [
        InstrumentSpec(symbol, name, market, base)
        for symbol, name, market, base, _ in SCRIPTED_SPECS
    ]


@pytest.fixture
def dataset(specs, scripted_synth, rng):
    return build_dataset(
        specs,
        ("USD", "EUR"),
        synthesizer=scripted_synth,
        rng=rng,
    )
