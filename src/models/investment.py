"""Investment return options for the lease-and-invest portfolio.

A choice is either a catalog benchmark with a fixed historical-average return
or a custom return entered by the user.
"""

from dataclasses import dataclass
from decimal import Decimal

CUSTOM_KEY = "custom"


@dataclass(frozen=True)
class Benchmark:
    symbol: str
    name: str
    annual_return_pct: Decimal  # Historical average, nominal


@dataclass(frozen=True)
class CustomReturn:
    annual_return_pct: Decimal
    name: str = "Custom"


InvestmentChoice = Benchmark | CustomReturn

BENCHMARKS: dict[str, Benchmark] = {
    "SPY": Benchmark(symbol="SPY", name="S&P 500", annual_return_pct=Decimal("12.5")),
    "QQQ": Benchmark(symbol="QQQ", name="Nasdaq 100", annual_return_pct=Decimal("16.5")),
}

DEFAULT_CUSTOM_RETURN = Decimal("10")


def investment_choice(key: str, custom_return_pct: Decimal | None = None) -> InvestmentChoice:
    """Resolve a catalog key (or "custom") to an investment choice.

    Raises KeyError for keys outside the catalog.
    """
    if key.lower() == CUSTOM_KEY:
        rate = DEFAULT_CUSTOM_RETURN if custom_return_pct is None else custom_return_pct
        return CustomReturn(annual_return_pct=rate)
    return BENCHMARKS[key.upper()]
