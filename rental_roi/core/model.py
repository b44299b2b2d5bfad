from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .amortization import MONTHS_IN_YEAR, average_split, compute_monthly_payment
from .utils import round_half_up, safe_divide


@dataclass
class InvestmentInputs:
    # Purchase
    purchase_price: float = 0.0
    tax_rate: float = 0.10  # regional transfer tax (ITP), fraction of price
    closing_costs: float = 0.0
    mortgage_setup_costs: float = 0.0
    renovation_cost: float = 0.0
    agent_commission: float = 0.0
    furniture_cost: float = 0.0

    # Income
    monthly_rent: float = 0.0
    annual_appreciation_rate: float = 0.0

    # Financing
    financed_fraction: float = 0.0  # share of purchase price covered by the loan
    loan_term_years: float = 30
    annual_interest_rate: float = 0.02

    # Annual operating expenses
    annual_property_tax: float = 0.0
    annual_insurance: float = 0.0
    annual_community_fees: float = 0.0
    annual_maintenance: float = 0.0
    annual_vacancy_loss: float = 0.0

    def annual_expenses(self) -> float:
        return (
            self.annual_property_tax
            + self.annual_insurance
            + self.annual_community_fees
            + self.annual_maintenance
            + self.annual_vacancy_loss
        )


@dataclass(frozen=True)
class InvestmentResult:
    # Purchase
    property_tax: float
    total_purchase_cost: float

    # Financing
    loan_amount: float
    equity_required: float
    monthly_payment: float
    annual_payment: float
    average_monthly_interest: float
    average_annual_interest: float
    average_monthly_principal: float
    average_annual_principal: float

    # Expenses & income
    total_monthly_expenses: float
    total_annual_expenses: float
    annual_income: float

    # KPIs
    gross_yield: float
    net_yield: float
    monthly_cash_flow: float
    annual_cash_flow: float
    price_to_earnings: float
    debt_service_to_rent_ratio: float
    cash_flow_to_rent_ratio: float
    cash_on_cash_return: float
    return_on_capital_employed: float
    total_return: float


def compute_investment(inputs: InvestmentInputs) -> InvestmentResult:
    """Compute purchase, financing, expense and profitability figures.

    Mirrors the rental calculator spreadsheet cell for cell. Ratios whose
    denominator is not positive are reported as 0.
    """
    # ------------------------- Purchase ------------------------- #
    property_tax = inputs.purchase_price * inputs.tax_rate
    total_purchase_cost = (
        inputs.purchase_price
        + property_tax
        + inputs.closing_costs
        + inputs.mortgage_setup_costs
        + inputs.renovation_cost
        + inputs.agent_commission
        + inputs.furniture_cost
    )

    # ------------------------- Financing ------------------------- #
    loan_amount = inputs.purchase_price * inputs.financed_fraction
    equity_required = total_purchase_cost - loan_amount
    monthly_payment = compute_monthly_payment(
        inputs.annual_interest_rate, inputs.loan_term_years, loan_amount
    )
    avg_interest, avg_principal = average_split(monthly_payment, loan_amount, inputs.loan_term_years)

    # ------------------------- Expenses & income ------------------------- #
    total_annual_expenses = inputs.annual_expenses()
    total_monthly_expenses = total_annual_expenses / MONTHS_IN_YEAR
    annual_income = inputs.monthly_rent * MONTHS_IN_YEAR

    # ------------------------- KPIs ------------------------- #
    net_operating = annual_income - total_annual_expenses - avg_interest * MONTHS_IN_YEAR
    monthly_cash_flow = inputs.monthly_rent - monthly_payment - total_monthly_expenses

    # Appreciation only counts when there is equity to earn it on
    if equity_required > 0:
        total_return = safe_divide(net_operating, equity_required) + inputs.annual_appreciation_rate
    else:
        total_return = 0.0

    return InvestmentResult(
        property_tax=property_tax,
        total_purchase_cost=total_purchase_cost,
        loan_amount=loan_amount,
        equity_required=equity_required,
        monthly_payment=monthly_payment,
        annual_payment=monthly_payment * MONTHS_IN_YEAR,
        average_monthly_interest=avg_interest,
        average_annual_interest=avg_interest * MONTHS_IN_YEAR,
        average_monthly_principal=avg_principal,
        average_annual_principal=avg_principal * MONTHS_IN_YEAR,
        total_monthly_expenses=total_monthly_expenses,
        total_annual_expenses=total_annual_expenses,
        annual_income=annual_income,
        gross_yield=safe_divide(annual_income, total_purchase_cost),
        net_yield=safe_divide(net_operating, total_purchase_cost),
        monthly_cash_flow=monthly_cash_flow,
        annual_cash_flow=monthly_cash_flow * MONTHS_IN_YEAR,
        price_to_earnings=safe_divide(total_purchase_cost, annual_income),
        debt_service_to_rent_ratio=safe_divide(monthly_payment, inputs.monthly_rent),
        cash_flow_to_rent_ratio=safe_divide(monthly_cash_flow, inputs.monthly_rent),
        cash_on_cash_return=safe_divide(MONTHS_IN_YEAR * monthly_cash_flow, equity_required),
        return_on_capital_employed=safe_divide(
            MONTHS_IN_YEAR * (monthly_cash_flow + avg_principal), equity_required
        ),
        total_return=total_return,
    )


def monthly_breakdown(inputs: InvestmentInputs, result: InvestmentResult) -> List[Tuple[str, int]]:
    """Monthly outgoings by item, in whole euros, zero items dropped."""
    items = [
        ("Hipoteca", result.monthly_payment),
        ("Impuestos", inputs.annual_property_tax / MONTHS_IN_YEAR),
        ("Seguros", inputs.annual_insurance / MONTHS_IN_YEAR),
        ("Comunidad", inputs.annual_community_fees / MONTHS_IN_YEAR),
        ("Mantenimiento", inputs.annual_maintenance / MONTHS_IN_YEAR),
    ]
    rounded = [(name, round_half_up(value)) for name, value in items]
    return [(name, value) for name, value in rounded if value > 0]
