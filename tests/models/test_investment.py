from decimal import Decimal

import pytest

from src.models.investment import Benchmark, CustomReturn, investment_choice


class TestInvestmentChoice:
    def test_benchmark_lookup(self):
        choice = investment_choice("SPY")
        assert isinstance(choice, Benchmark)
        assert choice.name == "S&P 500"
        assert choice.annual_return_pct == Decimal("12.5")

    def test_lookup_is_case_insensitive(self):
        assert investment_choice("qqq") == investment_choice("QQQ")

    def test_custom(self):
        choice = investment_choice("custom", Decimal("8"))
        assert isinstance(choice, CustomReturn)
        assert choice.annual_return_pct == Decimal("8")

    def test_custom_default_rate(self):
        assert investment_choice("Custom").annual_return_pct == Decimal("10")

    def test_unknown_option(self):
        with pytest.raises(KeyError):
            investment_choice("VTI")
