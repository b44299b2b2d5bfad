from __future__ import annotations

from dataclasses import dataclass
from typing import List

import pandas as pd

from .amortization import MONTHS_IN_YEAR
from .utils import round_half_up


DEFAULT_HORIZON_YEARS = 10


@dataclass(frozen=True)
class ProjectionPoint:
    period_label: str
    period_cash_flow: int
    cumulative_cash_flow: int


def project_cash_flow(
    base_monthly_cash_flow: float,
    annual_appreciation_rate: float,
    horizon_years: int = DEFAULT_HORIZON_YEARS,
) -> List[ProjectionPoint]:
    """Project yearly cash flow with flat compounding growth.

    Year 1 is twelve times the monthly cash flow; each later year grows the
    previous (unrounded) year by ``annual_appreciation_rate``. Yearly figures
    are rounded before they are accumulated.
    """
    points: List[ProjectionPoint] = []
    yearly = base_monthly_cash_flow * MONTHS_IN_YEAR
    cumulative = 0
    for year in range(1, int(horizon_years) + 1):
        if year > 1:
            yearly *= 1 + annual_appreciation_rate
        period = round_half_up(yearly)
        cumulative += period
        points.append(
            ProjectionPoint(
                period_label=f"Año {year}",
                period_cash_flow=period,
                cumulative_cash_flow=cumulative,
            )
        )
    return points


def projection_frame(points: List[ProjectionPoint]) -> pd.DataFrame:
    """Tabulate a projection as year, label, cash_flow, cumulative_cash_flow."""
    return pd.DataFrame(
        [
            {
                "year": year,
                "label": p.period_label,
                "cash_flow": p.period_cash_flow,
                "cumulative_cash_flow": p.cumulative_cash_flow,
            }
            for year, p in enumerate(points, start=1)
        ],
        columns=["year", "label", "cash_flow", "cumulative_cash_flow"],
    )
