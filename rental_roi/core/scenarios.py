from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import List, Optional

from .model import InvestmentInputs, InvestmentResult, compute_investment
from .projection import DEFAULT_HORIZON_YEARS, ProjectionPoint, project_cash_flow
from .taxes import tax_rate_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Analysis:
    inputs: InvestmentInputs
    community: Optional[str]
    tax_rate: float
    result: InvestmentResult
    projection: List[ProjectionPoint]


def run_analysis(
    inputs: InvestmentInputs,
    community: Optional[str] = None,
    horizon_years: int = DEFAULT_HORIZON_YEARS,
) -> Analysis:
    """Run tax lookup, calculator and projector on one set of inputs.

    When ``community`` is given, its ITP rate replaces ``inputs.tax_rate`` on
    a copy; the caller's inputs are left untouched.
    """
    if community is not None:
        inputs = dataclasses.replace(inputs, tax_rate=tax_rate_for(community))
    result = compute_investment(inputs)
    projection = project_cash_flow(result.monthly_cash_flow, inputs.annual_appreciation_rate, horizon_years)
    logger.debug(
        "analysis community=%s tax_rate=%.3f monthly_cash_flow=%.2f horizon=%d",
        community,
        inputs.tax_rate,
        result.monthly_cash_flow,
        horizon_years,
    )
    return Analysis(
        inputs=inputs,
        community=community,
        tax_rate=inputs.tax_rate,
        result=result,
        projection=projection,
    )
