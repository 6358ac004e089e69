"""CLI client for the Buy vs Lease Analyzer API: posts a projection and prints a terminal report.

Usage:
    python vehicle-analyzer/analyze_vehicle.py --price 35000 --rate 5.5 --term 5 --lease 500
    python vehicle-analyzer/analyze_vehicle.py --preset luxury --years 7 --cash-out --breakeven
"""

import argparse
import asyncio
import sys
from decimal import Decimal

import httpx


# ── Helpers ──────────────────────────────────────────────────────────────────

def _dollar(v) -> str:
    return f"${float(v):,.0f}"


def _header(title: str) -> None:
    print(f"\n{'=' * 64}")
    print(f"  {title}")
    print(f"{'=' * 64}")


# ── Report sections ──────────────────────────────────────────────────────────

def print_preliminary(data: dict) -> None:
    pre = data["preliminary"]
    _header("Financing")
    print(f"  Down Payment:       {_dollar(pre['down_payment'])}")
    print(f"  Dealer Fees:        {_dollar(pre['dealer_fees'])}")
    print(f"  Loan Amount:        {_dollar(pre['loan_amount'])}")
    print(f"  Monthly Payment:    ${float(pre['monthly_payment']):,.2f}")
    print(f"  Investment Return:  {float(pre['investment_return_pct']):.2f}%")


def print_yearly_table(data: dict) -> None:
    rows = data.get("yearly_results", [])
    if not rows:
        return
    cash_out = data["show_cash_out"]
    nw_key = "net_worth_cash_out" if cash_out else "net_worth_hold"
    if not data["show_yearly_detail"]:
        rows = rows[-1:]

    _header("Yearly Projection (cash out)" if cash_out else "Yearly Projection")
    print(
        f"  {'Yr':>3}  {'Vehicle':>10}  {'Loan Bal':>10}  {'Buy Out':>10}  "
        f"{'Buy NW':>10}  {'Lease Out':>10}  {'Portfolio':>10}  {'Lease NW':>10}"
    )
    print(f"  {'---':>3}" + f"  {'-' * 10}" * 7)
    for yr in rows:
        buy, lease = yr["buy"], yr["lease"]
        print(
            f"  {yr['year']:>3}  {_dollar(buy['vehicle_value']):>10}  "
            f"{_dollar(buy['loan_balance']):>10}  {_dollar(buy['adjusted_cash_outflow']):>10}  "
            f"{_dollar(buy[nw_key]):>10}  {_dollar(lease['cash_outflow']):>10}  "
            f"{_dollar(lease['portfolio_value']):>10}  {_dollar(lease[nw_key]):>10}"
        )


def print_outcome(data: dict) -> None:
    out = data["outcome"]
    _header("Outcome")
    print(f"  Buy Net Worth:      {_dollar(out['buy_net_worth'])}")
    print(f"  Lease Net Worth:    {_dollar(out['lease_net_worth'])}")
    if out["winner"] == "tie":
        print("  Verdict:            Both strategies finish level")
    else:
        label = "Buy" if out["winner"] == "buy" else "Lease & invest"
        print(f"  Verdict:            {label} ahead by {_dollar(abs(float(out['difference'])))}")


def print_formulas(data: dict) -> None:
    _header("Formulas")
    for line in data["formulas"].values():
        print(f"  {line}")


def print_breakeven(data: dict) -> None:
    _header("Break-even Lease")
    print(f"  Current Lease:      ${float(data['current_monthly_lease']):,.2f}/mo")
    print(f"  Break-even Lease:   ${float(data['breakeven_monthly_lease']):,.2f}/mo")


# ── Main ─────────────────────────────────────────────────────────────────────

async def _post(client: httpx.AsyncClient, url: str, payload: dict) -> dict:
    try:
        resp = await client.post(url, json=payload)
    except httpx.ConnectError:
        print(f"Error: Could not connect to API at {url}", file=sys.stderr)
        print("Is the server running? Start with: uvicorn src.api.app:app --reload", file=sys.stderr)
        sys.exit(1)
    except httpx.TimeoutException:
        print("Error: Request timed out", file=sys.stderr)
        sys.exit(1)

    if resp.status_code != 200:
        print(f"Error: API returned {resp.status_code}", file=sys.stderr)
        try:
            detail = resp.json().get("detail", resp.text)
        except ValueError:
            detail = resp.text
        print(f"  {detail}", file=sys.stderr)
        sys.exit(1)

    return resp.json()


async def _get_preset(client: httpx.AsyncClient, api_url: str, preset_id: str) -> dict:
    try:
        resp = await client.get(f"{api_url}/api/v1/presets/{preset_id}")
    except httpx.ConnectError:
        print(f"Error: Could not connect to API at {api_url}", file=sys.stderr)
        sys.exit(1)
    if resp.status_code == 404:
        print(f"Error: Unknown preset '{preset_id}'", file=sys.stderr)
        sys.exit(1)
    resp.raise_for_status()
    return resp.json()


async def main() -> None:
    parser = argparse.ArgumentParser(
        description="Compare buying a vehicle against leasing and investing"
    )
    parser.add_argument("--preset", help="Vehicle preset id (default, economy, midrange, luxury, suv)")
    parser.add_argument("--price", type=Decimal, help="Vehicle price")
    parser.add_argument("--down", type=Decimal, help="Down payment (%%)")
    parser.add_argument("--rate", type=Decimal, help="Loan interest rate (%%)")
    parser.add_argument("--term", type=int, choices=[3, 5, 7, 10], help="Loan term in years")
    parser.add_argument("--depreciation", type=Decimal, help="Annual depreciation (%%)")
    parser.add_argument("--lease", type=Decimal, help="Monthly lease payment")
    parser.add_argument("--lease-growth", type=Decimal, help="Annual lease growth (%%)")
    parser.add_argument("--investment", help="SPY, QQQ or custom")
    parser.add_argument("--custom-return", type=Decimal, help="Custom investment return (%%)")
    parser.add_argument("--years", type=int, help="Projection years")
    parser.add_argument("--yearly", action="store_true", help="Show every projection year")
    parser.add_argument("--cash-out", action="store_true", help="Compare liquidation net worth")
    parser.add_argument("--breakeven", action="store_true", help="Also solve for the break-even lease")
    parser.add_argument(
        "--api-url",
        default="http://localhost:8000",
        help="API base URL (default: http://localhost:8000)",
    )

    args = parser.parse_args()

    buy: dict = {}
    lease: dict = {}

    async with httpx.AsyncClient(timeout=30) as client:
        if args.preset:
            preset = await _get_preset(client, args.api_url, args.preset)
            buy.update(preset["buy"])
            lease.update(preset["lease"])

        # Only include non-None overrides
        buy_map = {"price": "vehicle_price", "down": "down_payment_pct", "rate": "loan_rate_pct",
                   "term": "loan_term_years", "depreciation": "depreciation_pct"}
        lease_map = {"lease": "monthly_lease", "lease_growth": "lease_growth_pct",
                     "investment": "investment_option", "custom_return": "custom_return_pct"}
        for target, field_map in ((buy, buy_map), (lease, lease_map)):
            for cli_name, api_name in field_map.items():
                val = getattr(args, cli_name)
                if val is not None:
                    target[api_name] = val if not isinstance(val, Decimal) else str(val)

        payload: dict = {
            "buy": buy,
            "lease": lease,
            "settings": {"show_yearly_detail": args.yearly, "show_cash_out": args.cash_out},
        }
        if args.years is not None:
            payload["settings"]["projection_years"] = args.years

        data = await _post(client, f"{args.api_url}/api/v1/projection", payload)
        breakeven = None
        if args.breakeven:
            breakeven = await _post(
                client,
                f"{args.api_url}/api/v1/projection/breakeven",
                {**payload, "cash_out": args.cash_out},
            )

    # Print report
    print_preliminary(data)
    print_yearly_table(data)
    print_outcome(data)
    print_formulas(data)
    if breakeven:
        print_breakeven(breakeven)
    print()


if __name__ == "__main__":
    asyncio.run(main())
