from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .model import InvestmentResult
from .utils import euro, number, percent


@dataclass(frozen=True)
class Kpi:
    key: str
    label: str
    value: float
    display: str
    is_good: bool
    highlight: bool = False


def kpi_table(result: InvestmentResult) -> List[Kpi]:
    """The nine profitability KPIs in display order, formatted and rated."""
    r = result
    return [
        Kpi("gross_yield", "Rentabilidad Bruta", r.gross_yield, percent(r.gross_yield, 1), r.gross_yield > 0, True),
        Kpi("net_yield", "Rentabilidad Neta", r.net_yield, percent(r.net_yield, 1), r.net_yield > 0, True),
        Kpi(
            "monthly_cash_flow",
            "Cash-Flow Mensual",
            r.monthly_cash_flow,
            euro(r.monthly_cash_flow),
            r.monthly_cash_flow >= 0,
            True,
        ),
        Kpi(
            "price_to_earnings",
            "PER",
            r.price_to_earnings,
            number(r.price_to_earnings, 2),
            0 < r.price_to_earnings < 15,
        ),
        Kpi(
            "debt_service_to_rent_ratio",
            "% Hipoteca / Alquiler",
            r.debt_service_to_rent_ratio,
            percent(r.debt_service_to_rent_ratio, 1),
            r.debt_service_to_rent_ratio < 0.5,
        ),
        Kpi(
            "cash_flow_to_rent_ratio",
            "Cash-Flow / Alquiler",
            r.cash_flow_to_rent_ratio,
            percent(r.cash_flow_to_rent_ratio, 1),
            r.cash_flow_to_rent_ratio > 0,
        ),
        Kpi(
            "cash_on_cash_return",
            "Cash on Cash",
            r.cash_on_cash_return,
            percent(r.cash_on_cash_return, 1),
            r.cash_on_cash_return > 0,
        ),
        Kpi(
            "return_on_capital_employed",
            "ROCE",
            r.return_on_capital_employed,
            percent(r.return_on_capital_employed, 2),
            r.return_on_capital_employed > 0,
            True,
        ),
        Kpi(
            "total_return",
            "Rentabilidad Total",
            r.total_return,
            percent(r.total_return, 2),
            r.total_return > 0,
            True,
        ),
    ]
