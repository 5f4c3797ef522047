"""Default instrument catalog and exchange-rate parameters."""

from .models import InstrumentSpec, Market, QuoteKind

# Base prices for the dashboard's default watchlists (local currency)
BMV_STOCKS: tuple[InstrumentSpec, ...] = tuple(
    InstrumentSpec(symbol, name, Market.BMV, base)
    for symbol, name, base in [
        ("AMXL", "América Móvil L", 17.2),
        ("WALMEX", "WALMEX", 64.7),
        ("GMEXICO", "Grupo México", 109.5),
        ("BIMBOA", "Bimbo A", 92.3),
        ("CEMEXCPO", "Cemex CPO", 12.1),
        ("FEMSAUBD", "FEMSA", 224.2),
        ("GAPB", "GAP B", 250.8),
        ("ASURB", "ASUR B", 417.6),
        ("KOFUBL", "Coca-Cola FEMSA", 133.2),
        ("ALFAA", "ALFA A", 17.9),
    ]
)

BNY_STOCKS: tuple[InstrumentSpec, ...] = tuple(
    InstrumentSpec(symbol, name, Market.BNY, base)
    for symbol, name, base in [
        ("AAPL", "Apple", 205.0),
        ("MSFT", "Microsoft", 410.0),
        ("AMZN", "Amazon", 180.0),
        ("GOOGL", "Alphabet", 155.0),
        ("META", "Meta", 510.0),
        ("TSLA", "Tesla", 195.0),
        ("NVDA", "NVIDIA", 1100.0),
        ("JPM", "JPMorgan", 205.0),
        ("V", "Visa", 280.0),
        ("PG", "Procter & Gamble", 170.0),
    ]
)

DEFAULT_INSTRUMENTS: tuple[InstrumentSpec, ...] = BMV_STOCKS + BNY_STOCKS

# Order matters: a code's position feeds its base rate
CURRENCY_CODES: tuple[str, ...] = (
    "USD", "EUR", "JPY", "GBP", "CAD", "CHF", "CNY", "BRL", "ARS", "MXN",
)

# rate(i) = (BASE_RATE + i * RATE_STEP) * KIND_MULTIPLIERS[kind]
BASE_RATE = 15.0
RATE_STEP = 0.3
KIND_MULTIPLIERS: dict[QuoteKind, float] = {
    QuoteKind.SPOT: 1.0,
    QuoteKind.FIX: 1.0,
    QuoteKind.CASH: 1.0,
    QuoteKind.CRYPTO: 1.1,  # Explicit markup, not derived from instrument data
}

# Randomized fields of each exchange-rate row
VARIATION_RANGE = (-2.0, 2.0)  # percent
VOLUME_RANGE = (1_000_000, 1_000_000_000)  # inclusive
