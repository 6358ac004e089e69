from dataclasses import replace
from decimal import Decimal

from src.engine.buy import buy_year, holding_costs, vehicle_value
from src.engine.preliminary import resolve_preliminary_values
from src.models.results import AmortizationYearRecord


def _debt_year(year=2, interest="1000", principal="5000", balance="10000"):
    return AmortizationYearRecord(
        year=year,
        interest_paid=Decimal(interest),
        principal_paid=Decimal(principal),
        ending_balance=Decimal(balance),
        total_paid=Decimal("12000"),
    )


class TestVehicleValue:
    def test_first_year(self, canonical_buy):
        assert vehicle_value(canonical_buy, 1) == Decimal("29750")

    def test_strictly_decreasing_and_positive(self, canonical_buy):
        values = [vehicle_value(canonical_buy, y) for y in range(0, 31)]
        for i in range(1, len(values)):
            assert values[i] < values[i - 1]
            assert values[i] > 0

    def test_no_depreciation(self, canonical_buy):
        buy = replace(canonical_buy, depreciation_pct=Decimal("0"))
        assert vehicle_value(buy, 10) == Decimal("35000")


class TestHoldingCosts:
    def test_components(self, canonical_buy):
        costs = holding_costs(canonical_buy)
        assert costs.insurance_registration == Decimal("875")
        assert costs.maintenance == Decimal("525")
        assert costs.fixed_costs == Decimal("2000")
        assert costs.total == Decimal("3400")


class TestBuyYear:
    def test_first_year_includes_upfront_cash(self, canonical_buy, canonical_lease):
        pre = resolve_preliminary_values(canonical_buy, canonical_lease)
        record = buy_year(1, canonical_buy, _debt_year(year=1), pre)
        # 7000 down + 1050 fees + 6000 loan + 3400 holding
        assert record.cash_outflow == Decimal("17450")
        assert record.adjusted_cash_outflow == Decimal("17450")

    def test_later_year_excludes_upfront_cash(self, canonical_buy, canonical_lease):
        pre = resolve_preliminary_values(canonical_buy, canonical_lease)
        record = buy_year(2, canonical_buy, _debt_year(), pre)
        assert record.loan_payment == Decimal("6000")
        assert record.cash_outflow == Decimal("9400")

    def test_no_tax_savings_without_deduction(self, canonical_buy, canonical_lease):
        pre = resolve_preliminary_values(canonical_buy, canonical_lease)
        record = buy_year(2, canonical_buy, _debt_year(), pre)
        assert record.tax_savings == Decimal("0")

    def test_interest_deduction(self, canonical_buy, canonical_lease):
        buy = replace(canonical_buy, deduct_loan_interest=True)
        pre = resolve_preliminary_values(buy, canonical_lease)
        record = buy_year(2, buy, _debt_year(), pre)
        assert record.tax_savings == Decimal("240")  # 1000 interest * 24%
        assert record.adjusted_cash_outflow == Decimal("9160")

    def test_first_pass_has_no_side_portfolio(self, canonical_buy, canonical_lease):
        pre = resolve_preliminary_values(canonical_buy, canonical_lease)
        record = buy_year(2, canonical_buy, _debt_year(), pre)
        assert record.excess_portfolio == Decimal("0")
        assert record.excess_cost_basis == Decimal("0")
        assert record.tax_on_excess_gain == Decimal("0")

    def test_side_portfolio_from_lease_surplus(self, canonical_buy, canonical_lease):
        pre = resolve_preliminary_values(canonical_buy, canonical_lease)
        record = buy_year(
            2, canonical_buy, _debt_year(), pre, lease_cash_outflow=Decimal("12000")
        )
        # Contribution = 12000 - 9400 = 2600, grown 12.5%
        assert record.excess_cost_basis == Decimal("2600")
        assert record.excess_portfolio == Decimal("2925")
        assert record.excess_gain == Decimal("325")
        assert record.tax_on_excess_gain == Decimal("48.75")

    def test_side_portfolio_carries_forward(self, canonical_buy, canonical_lease):
        pre = resolve_preliminary_values(canonical_buy, canonical_lease)
        prior = buy_year(
            2, canonical_buy, _debt_year(), pre, lease_cash_outflow=Decimal("12000")
        )
        record = buy_year(
            3, canonical_buy, _debt_year(year=3), pre,
            lease_cash_outflow=Decimal("12000"), previous=prior,
        )
        assert record.excess_cost_basis == Decimal("5200")
        assert record.excess_portfolio == (Decimal("2925") + Decimal("2600")) * Decimal("1.125")

    def test_no_contribution_when_lease_is_cheaper(self, canonical_buy, canonical_lease):
        pre = resolve_preliminary_values(canonical_buy, canonical_lease)
        record = buy_year(
            2, canonical_buy, _debt_year(), pre, lease_cash_outflow=Decimal("6000")
        )
        assert record.excess_cost_basis == Decimal("0")
        assert record.excess_portfolio == Decimal("0")

    def test_net_worth_hold(self, canonical_buy, canonical_lease):
        pre = resolve_preliminary_values(canonical_buy, canonical_lease)
        record = buy_year(
            2, canonical_buy, _debt_year(), pre, lease_cash_outflow=Decimal("12000")
        )
        # 35000 * 0.85^2 = 25287.50
        assert record.vehicle_value == Decimal("25287.5")
        assert record.net_worth_hold == Decimal("25287.5") - Decimal("10000") + Decimal("2925")

    def test_depreciation_loss_is_not_taxed(self, canonical_buy, canonical_lease):
        pre = resolve_preliminary_values(canonical_buy, canonical_lease)
        record = buy_year(2, canonical_buy, _debt_year(), pre)
        assert record.capital_gain == Decimal("-9712.5")
        assert record.taxable_gain == Decimal("0")
        assert record.tax_on_gain == Decimal("0")

    def test_net_worth_cash_out(self, canonical_buy, canonical_lease):
        pre = resolve_preliminary_values(canonical_buy, canonical_lease)
        record = buy_year(
            2, canonical_buy, _debt_year(), pre, lease_cash_outflow=Decimal("12000")
        )
        proceeds = Decimal("25287.5") * Decimal("0.95")
        expected = proceeds - Decimal("10000") + Decimal("2925") - Decimal("48.75")
        assert record.net_worth_cash_out == expected

    def test_appreciating_asset_is_taxed(self, canonical_buy, canonical_lease):
        """Negative depreciation (a collectible) produces a taxable gain."""
        buy = replace(canonical_buy, depreciation_pct=Decimal("-10"))
        pre = resolve_preliminary_values(buy, canonical_lease)
        record = buy_year(1, buy, _debt_year(year=1), pre)
        assert record.capital_gain == Decimal("3500")
        assert record.taxable_gain == Decimal("3500")
        assert record.tax_on_gain == Decimal("525")
