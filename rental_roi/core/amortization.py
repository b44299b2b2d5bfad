from __future__ import annotations

import math
from typing import Final, Tuple


MONTHS_IN_YEAR: Final[int] = 12


def compute_monthly_payment(annual_rate: float, term_years: float, principal: float) -> float:
    """Compute the fixed monthly payment for a fully amortizing loan.

    Parameters
    ----------
    annual_rate : float
        Nominal annual interest rate as a decimal (e.g., 0.02 for 2%).
    term_years : float
        Loan term in years.
    principal : float
        Initial loan amount.

    Returns
    -------
    float
        The constant monthly payment. ``0.0`` when there is no loan, and a
        straight-line split of the principal when the rate is not positive.
    """
    if principal <= 0 or term_years <= 0:
        return 0.0
    n_months = term_years * MONTHS_IN_YEAR
    if annual_rate <= 0:
        return principal / n_months
    monthly_rate = annual_rate / MONTHS_IN_YEAR
    # (1 + r)**n - 1 without cancellation; stays nonzero for any r > 0
    growth = math.expm1(n_months * math.log1p(monthly_rate))
    return principal * monthly_rate * (growth + 1) / growth


def average_split(monthly_payment: float, principal: float, term_years: float) -> Tuple[float, float]:
    """Split a monthly payment into average interest and principal parts.

    Total interest over the loan is spread evenly across every month, so the
    split is the same for the whole term (no declining-balance schedule).
    Returns ``(interest, principal)`` per month.
    """
    if principal > 0 and term_years > 0:
        n_months = term_years * MONTHS_IN_YEAR
        interest = (monthly_payment * MONTHS_IN_YEAR * term_years - principal) / n_months
    else:
        interest = 0.0
    return interest, monthly_payment - interest
