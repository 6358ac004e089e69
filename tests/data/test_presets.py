from decimal import Decimal

import pytest

from src.data.presets import PRESETS, apply_preset, get_preset, list_presets
from src.models.parameters import BuyParameters, LeaseParameters


class TestPresets:
    def test_catalog(self):
        ids = [p.id for p in list_presets()]
        assert ids == ["default", "economy", "midrange", "luxury", "suv"]

    def test_default_matches_parameter_defaults(self):
        buy, lease = apply_preset(get_preset("default"))
        assert buy == BuyParameters()
        assert lease == LeaseParameters()

    def test_unknown_preset(self):
        with pytest.raises(KeyError):
            get_preset("minivan")

    def test_presets_override_known_fields_only(self):
        for preset in PRESETS.values():
            for key in preset.buy:
                assert hasattr(BuyParameters(), key)
            for key in preset.lease:
                assert hasattr(LeaseParameters(), key)


class TestApplyPreset:
    def test_overrides_named_fields(self):
        buy, lease = apply_preset(get_preset("luxury"))
        assert buy.vehicle_price == Decimal("60000")
        assert buy.loan_rate_pct == Decimal("6.0")
        assert buy.depreciation_pct == Decimal("12")
        assert lease.monthly_lease == Decimal("800")

    def test_keeps_unnamed_fields(self):
        custom = BuyParameters(selling_cost_pct=Decimal("8"), marginal_tax_pct=Decimal("32"))
        buy, _ = apply_preset(get_preset("economy"), buy=custom)
        assert buy.vehicle_price == Decimal("25000")
        assert buy.selling_cost_pct == Decimal("8")
        assert buy.marginal_tax_pct == Decimal("32")

    def test_resets_mirror_option(self):
        lease = LeaseParameters(mirror_depreciation=True)
        _, applied = apply_preset(get_preset("suv"), lease=lease)
        assert applied.mirror_depreciation is False
        assert applied.investment == lease.investment
