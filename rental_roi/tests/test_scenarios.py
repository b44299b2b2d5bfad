import dataclasses

import pytest

from rental_roi.core.model import InvestmentInputs, compute_investment
from rental_roi.core.projection import project_cash_flow
from rental_roi.core.scenarios import run_analysis


def test_community_rate_replaces_tax_rate_on_a_copy():
    inputs = InvestmentInputs(purchase_price=100_000, tax_rate=0.10, monthly_rent=700)
    analysis = run_analysis(inputs, community="Comunidad de Madrid")
    assert analysis.tax_rate == 0.06
    assert analysis.inputs.tax_rate == 0.06
    assert analysis.result.property_tax == pytest.approx(6_000)
    assert inputs.tax_rate == 0.10


def test_without_community_keeps_inputs_rate():
    inputs = InvestmentInputs(purchase_price=100_000, tax_rate=0.07)
    analysis = run_analysis(inputs)
    assert analysis.community is None
    assert analysis.tax_rate == 0.07
    assert analysis.inputs is inputs


def test_unknown_community_uses_default_rate():
    analysis = run_analysis(InvestmentInputs(purchase_price=50_000), community="Atlántida")
    assert analysis.tax_rate == 0.08


def test_pipeline_matches_individual_steps():
    inputs = InvestmentInputs(
        purchase_price=105_000,
        monthly_rent=1_100,
        financed_fraction=0.5,
        annual_appreciation_rate=0.02,
        annual_property_tax=800,
    )
    analysis = run_analysis(inputs, horizon_years=5)
    result = compute_investment(inputs)
    assert analysis.result == result
    assert analysis.projection == project_cash_flow(result.monthly_cash_flow, 0.02, 5)


def test_rerun_is_idempotent():
    inputs = InvestmentInputs(purchase_price=80_000, monthly_rent=600, financed_fraction=0.8)
    snapshot = dataclasses.asdict(inputs)
    first = run_analysis(inputs, community="Galicia")
    second = run_analysis(inputs, community="Galicia")
    assert first == second
    assert dataclasses.asdict(inputs) == snapshot
