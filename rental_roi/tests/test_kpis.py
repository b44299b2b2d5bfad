from rental_roi.core.kpis import kpi_table
from rental_roi.core.model import InvestmentInputs, compute_investment


def test_nine_kpis_in_display_order():
    res = compute_investment(InvestmentInputs(purchase_price=105_000, monthly_rent=1_100, financed_fraction=0.5))
    kpis = kpi_table(res)
    assert [k.key for k in kpis] == [
        "gross_yield",
        "net_yield",
        "monthly_cash_flow",
        "price_to_earnings",
        "debt_service_to_rent_ratio",
        "cash_flow_to_rent_ratio",
        "cash_on_cash_return",
        "return_on_capital_employed",
        "total_return",
    ]
    assert [k.key for k in kpis if k.highlight] == [
        "gross_yield",
        "net_yield",
        "monthly_cash_flow",
        "return_on_capital_employed",
        "total_return",
    ]


def test_ratings_for_profitable_deal():
    res = compute_investment(InvestmentInputs(purchase_price=105_000, monthly_rent=1_100, financed_fraction=0.5))
    kpis = {k.key: k for k in kpi_table(res)}
    assert all(k.is_good for k in kpis.values())
    assert kpis["gross_yield"].display == "11.4%"
    assert kpis["price_to_earnings"].display == "8,75"


def test_ratings_for_losing_deal():
    res = compute_investment(
        InvestmentInputs(purchase_price=300_000, monthly_rent=500, financed_fraction=0.9, annual_interest_rate=0.05)
    )
    kpis = {k.key: k for k in kpi_table(res)}
    assert not kpis["monthly_cash_flow"].is_good
    assert not kpis["debt_service_to_rent_ratio"].is_good
    assert not kpis["price_to_earnings"].is_good
    assert kpis["monthly_cash_flow"].display.startswith("-")


def test_zero_per_is_not_good():
    kpis = {k.key: k for k in kpi_table(compute_investment(InvestmentInputs()))}
    assert kpis["price_to_earnings"].value == 0
    assert not kpis["price_to_earnings"].is_good
    assert kpis["monthly_cash_flow"].is_good
