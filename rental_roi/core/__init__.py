from .amortization import compute_monthly_payment, average_split
from .model import InvestmentInputs, InvestmentResult, compute_investment, monthly_breakdown
from .projection import ProjectionPoint, project_cash_flow, projection_frame
from .taxes import COMMUNITIES, DEFAULT_TAX_RATE, ITP_RATES, tax_rate_for
from .utils import safe_divide, round_half_up, euro, percent, number
from .scenarios import Analysis, run_analysis

__all__ = [
	"compute_monthly_payment",
	"average_split",
	"InvestmentInputs",
	"InvestmentResult",
	"compute_investment",
	"monthly_breakdown",
	"ProjectionPoint",
	"project_cash_flow",
	"projection_frame",
	"COMMUNITIES",
	"DEFAULT_TAX_RATE",
	"ITP_RATES",
	"tax_rate_for",
	"safe_divide",
	"round_half_up",
	"euro",
	"percent",
	"number",
	"Analysis",
	"run_analysis",
]
