import inspect
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from src.api.app import app
from src.api.deps import get_settings
from src.api.routes import projection as projection_routes
from src.config import Settings


@pytest.fixture
def client():
    return TestClient(app)


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


class TestProjectionRoute:
    def test_defaults(self, client):
        resp = client.post("/api/v1/projection", json={})
        assert resp.status_code == 200
        body = resp.json()
        assert body["projection_years"] == 5
        assert len(body["yearly_results"]) == 5
        assert Decimal(body["preliminary"]["loan_amount"]) == Decimal("28000")
        assert body["outcome"]["winner"] in ("buy", "lease", "tie")

    def test_values_rounded_to_cents(self, client):
        body = client.post("/api/v1/projection", json={}).json()
        payment = Decimal(body["preliminary"]["monthly_payment"])
        assert payment == payment.quantize(Decimal("0.01"))
        assert abs(payment - Decimal("534.83")) < Decimal("0.05")

    def test_cash_out_outcome(self, client):
        body = client.post(
            "/api/v1/projection", json={"settings": {"show_cash_out": True}}
        ).json()
        final = body["yearly_results"][-1]
        assert body["outcome"]["cash_out"] is True
        assert body["outcome"]["buy_net_worth"] == final["buy"]["net_worth_cash_out"]

    def test_custom_investment(self, client):
        body = client.post(
            "/api/v1/projection",
            json={"lease": {"investment_option": "custom", "custom_return_pct": "7"}},
        ).json()
        assert Decimal(body["preliminary"]["investment_return_pct"]) == Decimal("7")

    def test_negligible_loan_rate(self, client):
        resp = client.post("/api/v1/projection", json={"buy": {"loan_rate_pct": "1E-30"}})
        assert resp.status_code == 200
        payment = Decimal(resp.json()["preliminary"]["monthly_payment"])
        assert payment == Decimal("466.67")

    def test_invalid_loan_term(self, client):
        resp = client.post("/api/v1/projection", json={"buy": {"loan_term_years": 4}})
        assert resp.status_code == 422

    def test_invalid_percentage(self, client):
        resp = client.post("/api/v1/projection", json={"buy": {"down_payment_pct": 120}})
        assert resp.status_code == 422

    def test_unknown_investment(self, client):
        resp = client.post("/api/v1/projection", json={"lease": {"investment_option": "VTI"}})
        assert resp.status_code == 422
        assert "VTI" in resp.json()["detail"]

    def test_horizon_limit(self, client):
        resp = client.post("/api/v1/projection", json={"settings": {"projection_years": 0}})
        assert resp.status_code == 422


class TestScheduleRoute:
    def test_schedule(self, client):
        resp = client.post("/api/v1/projection/schedule", json={"settings": {"projection_years": 7}})
        assert resp.status_code == 200
        body = resp.json()
        assert len(body["schedule"]) == 7
        assert Decimal(body["schedule"][4]["ending_balance"]) == Decimal("0")
        assert Decimal(body["schedule"][6]["interest_paid"]) == Decimal("0")


class TestBreakevenRoute:
    def test_breakeven(self, client):
        resp = client.post("/api/v1/projection/breakeven", json={})
        assert resp.status_code == 200
        body = resp.json()
        assert Decimal(body["breakeven_monthly_lease"]) > 0
        assert Decimal(body["current_monthly_lease"]) == Decimal("500")
        assert body["cash_out"] is True

    def test_no_root_below_ceiling(self, client):
        app.dependency_overrides[get_settings] = lambda: Settings(
            breakeven_lease_ceiling=Decimal("1")
        )
        try:
            resp = client.post("/api/v1/projection/breakeven", json={})
        finally:
            app.dependency_overrides.clear()
        assert resp.status_code == 422

    def test_search_runs_in_threadpool(self):
        # CPU-bound solver must not block the event loop
        assert not inspect.iscoroutinefunction(projection_routes.breakeven)


class TestPresetRoutes:
    def test_list(self, client):
        resp = client.get("/api/v1/presets")
        assert resp.status_code == 200
        assert len(resp.json()) == 5

    def test_get(self, client):
        resp = client.get("/api/v1/presets/suv")
        assert resp.status_code == 200
        body = resp.json()
        assert body["name"] == "SUV"
        assert Decimal(body["buy"]["vehicle_price"]) == Decimal("45000")

    def test_unknown(self, client):
        resp = client.get("/api/v1/presets/minivan")
        assert resp.status_code == 404
