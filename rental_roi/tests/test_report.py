import dataclasses
import datetime

import pytest

from rental_roi.core.model import InvestmentInputs, compute_investment
from rental_roi.core.projection import project_cash_flow
from rental_roi.core.report import ReportError, build_report, report_filename, spanish_date


def _inputs() -> InvestmentInputs:
    return InvestmentInputs(
        purchase_price=105_000,
        closing_costs=4_000,
        renovation_cost=20_000,
        agent_commission=1_500,
        furniture_cost=4_000,
        monthly_rent=1_100,
        annual_appreciation_rate=0.02,
        financed_fraction=0.5,
        annual_property_tax=800,
        annual_insurance=300,
        annual_community_fees=300,
    )


def test_build_report_returns_pdf():
    inputs = _inputs()
    result = compute_investment(inputs)
    pdf = build_report(
        inputs,
        result,
        address="Calle Mayor 1",
        community="Cataluña",
        tax_rate=0.10,
        projection=project_cash_flow(result.monthly_cash_flow, 0.02),
        today=datetime.date(2026, 10, 18),
    )
    assert pdf.startswith(b"%PDF")
    assert len(pdf) > 1_000


def test_build_report_without_projection():
    inputs = InvestmentInputs()
    pdf = build_report(inputs, compute_investment(inputs), address="", community="Navarra", tax_rate=0.06)
    assert pdf.startswith(b"%PDF")


def test_non_finite_figures_are_rejected():
    inputs = _inputs()
    broken = dataclasses.replace(compute_investment(inputs), net_yield=float("nan"))
    with pytest.raises(ReportError, match="net_yield"):
        build_report(inputs, broken, address="x", community="Galicia", tax_rate=0.09)


def test_report_error_is_value_error():
    assert issubclass(ReportError, ValueError)


def test_report_filename():
    name = report_filename("Calle Mayor, 1 (2º)", datetime.date(2026, 10, 18))
    assert name == "Informe_Inversion_Calle_Mayor__1__2___2026-10-18.pdf"


def test_spanish_date():
    assert spanish_date(datetime.date(2026, 10, 18)) == "18 de octubre de 2026"
    assert spanish_date(datetime.date(2025, 1, 5)) == "05 de enero de 2025"
