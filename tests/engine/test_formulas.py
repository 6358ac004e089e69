from dataclasses import replace

from src.engine.formulas import build_formulas
from src.engine.preliminary import resolve_preliminary_values


class TestBuildFormulas:
    def test_monthly_payment(self, canonical_buy, canonical_lease):
        pre = resolve_preliminary_values(canonical_buy, canonical_lease)
        f = build_formulas(canonical_buy, canonical_lease, pre)
        assert "$28,000.00" in f.monthly_payment
        assert "^60" in f.monthly_payment
        assert "$534.8" in f.monthly_payment

    def test_depreciation_and_growth(self, canonical_buy, canonical_lease):
        pre = resolve_preliminary_values(canonical_buy, canonical_lease)
        f = build_formulas(canonical_buy, canonical_lease, pre)
        assert "$35,000.00" in f.vehicle_depreciation
        assert "15%" in f.vehicle_depreciation
        assert "12.5%" in f.investment_growth

    def test_deduction_off(self, canonical_buy, canonical_lease):
        pre = resolve_preliminary_values(canonical_buy, canonical_lease)
        f = build_formulas(canonical_buy, canonical_lease, pre)
        assert "not claimed" in f.loan_interest_deduction

    def test_deduction_on(self, canonical_buy, canonical_lease):
        buy = replace(canonical_buy, deduct_loan_interest=True)
        pre = resolve_preliminary_values(buy, canonical_lease)
        f = build_formulas(buy, canonical_lease, pre)
        assert "24%" in f.loan_interest_deduction

    def test_capital_gains(self, canonical_buy, canonical_lease):
        pre = resolve_preliminary_values(canonical_buy, canonical_lease)
        f = build_formulas(canonical_buy, canonical_lease, pre)
        assert "15%" in f.vehicle_capital_gains
        assert "15%" in f.investment_capital_gains
