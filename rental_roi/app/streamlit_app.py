from __future__ import annotations

import logging
import os
import sys
from typing import Tuple

import pandas as pd
import streamlit as st

# Ensure package import works on Streamlit Cloud when CWD != repo root
_THIS_DIR = os.path.dirname(__file__)
_REPO_ROOT = os.path.abspath(os.path.join(_THIS_DIR, "..", ".."))
if _REPO_ROOT not in sys.path:
    sys.path.insert(0, _REPO_ROOT)

from rental_roi.core import plots
from rental_roi.core.kpis import kpi_table
from rental_roi.core.model import InvestmentInputs, monthly_breakdown
from rental_roi.core.projection import projection_frame
from rental_roi.core.report import ReportError, build_report, report_filename
from rental_roi.core.scenarios import Analysis, run_analysis
from rental_roi.core.taxes import COMMUNITIES
from rental_roi.core.utils import euro, number, percent
from config import (
    ADDRESS,
    COMMUNITY,
    PURCHASE_PRICE,
    CLOSING_COSTS,
    MORTGAGE_SETUP_COSTS,
    RENOVATION_COST,
    AGENT_COMMISSION,
    FURNITURE_COST,
    MONTHLY_RENT,
    ANNUAL_APPRECIATION_RATE,
    FINANCED_PCT,
    LOAN_TERM_YEARS,
    ANNUAL_INTEREST_RATE,
    ANNUAL_PROPERTY_TAX,
    ANNUAL_INSURANCE,
    ANNUAL_COMMUNITY_FEES,
    ANNUAL_MAINTENANCE,
    ANNUAL_VACANCY_LOSS,
    PROJECTION_YEARS,
    LOG_LEVEL,
)

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

st.set_page_config(page_title="Calculadora de Rentabilidad", layout="wide")


def _pct_input(label: str, value: float, step: float = 0.1) -> float:
    raw = st.sidebar.number_input(label, min_value=0.0, max_value=100.0, value=value * 100.0, step=step, format="%0.1f")
    return raw / 100.0


def sidebar_inputs() -> Tuple[InvestmentInputs, str, str]:
    st.sidebar.header("1 · Localización")
    address = st.sidebar.text_input("Dirección", value=ADDRESS, placeholder="Calle, número...")
    community_index = COMMUNITIES.index(COMMUNITY) if COMMUNITY in COMMUNITIES else 0
    community = st.sidebar.selectbox("Comunidad Autónoma", COMMUNITIES, index=community_index)

    st.sidebar.header("2 · Coste de Compra")
    purchase_price = st.sidebar.number_input("Precio de compra (€)", min_value=0, value=int(PURCHASE_PRICE), step=5_000)
    closing_costs = st.sidebar.number_input("Gastos (Notaría, registro…)", min_value=0, value=int(CLOSING_COSTS), step=500)
    mortgage_setup_costs = st.sidebar.number_input("Gastos hipoteca", min_value=0, value=int(MORTGAGE_SETUP_COSTS), step=500)
    renovation_cost = st.sidebar.number_input("Coste reforma", min_value=0, value=int(RENOVATION_COST), step=1_000)
    agent_commission = st.sidebar.number_input("Comisión compra", min_value=0, value=int(AGENT_COMMISSION), step=500)
    furniture_cost = st.sidebar.number_input("Mobiliario y otros", min_value=0, value=int(FURNITURE_COST), step=500)

    st.sidebar.header("3 · Ingresos")
    monthly_rent = st.sidebar.number_input("Cuota alquiler mensual (€)", min_value=0, value=int(MONTHLY_RENT), step=50)
    annual_appreciation_rate = _pct_input("Revalorización anual (%)", ANNUAL_APPRECIATION_RATE)

    st.sidebar.header("4 · Financiación")
    financed_fraction = _pct_input("% Financiado", FINANCED_PCT, step=1.0)
    loan_term_years = int(st.sidebar.number_input("Plazo hipoteca (años)", min_value=0, value=int(LOAN_TERM_YEARS), step=1))
    annual_interest_rate = _pct_input("Tipo de interés (%)", ANNUAL_INTEREST_RATE)

    st.sidebar.header("5 · Gastos Anuales")
    annual_property_tax = st.sidebar.number_input("Impuestos (IBI, basuras…)", min_value=0, value=int(ANNUAL_PROPERTY_TAX), step=100)
    annual_insurance = st.sidebar.number_input("Seguros", min_value=0, value=int(ANNUAL_INSURANCE), step=50)
    annual_community_fees = st.sidebar.number_input("Comunidad propietarios", min_value=0, value=int(ANNUAL_COMMUNITY_FEES), step=50)
    annual_maintenance = st.sidebar.number_input("Mantenimiento", min_value=0, value=int(ANNUAL_MAINTENANCE), step=50)
    annual_vacancy_loss = st.sidebar.number_input("Períodos vacío", min_value=0, value=int(ANNUAL_VACANCY_LOSS), step=50)

    inputs = InvestmentInputs(
        purchase_price=float(purchase_price),
        closing_costs=float(closing_costs),
        mortgage_setup_costs=float(mortgage_setup_costs),
        renovation_cost=float(renovation_cost),
        agent_commission=float(agent_commission),
        furniture_cost=float(furniture_cost),
        monthly_rent=float(monthly_rent),
        annual_appreciation_rate=annual_appreciation_rate,
        financed_fraction=financed_fraction,
        loan_term_years=loan_term_years,
        annual_interest_rate=annual_interest_rate,
        annual_property_tax=float(annual_property_tax),
        annual_insurance=float(annual_insurance),
        annual_community_fees=float(annual_community_fees),
        annual_maintenance=float(annual_maintenance),
        annual_vacancy_loss=float(annual_vacancy_loss),
    )
    return inputs, address, community


def render_kpis(analysis: Analysis):
    st.subheader("KPIs de Rentabilidad")
    kpis = kpi_table(analysis.result)
    for start in range(0, len(kpis), 3):
        cols = st.columns(3)
        for col, kpi in zip(cols, kpis[start:start + 3]):
            with col:
                st.metric(kpi.label, kpi.display, help=None if kpi.is_good else "Fuera del rango recomendado")


def render_summary(analysis: Analysis):
    res = analysis.result
    c1, c2, c3 = st.columns(3)
    with c1:
        st.markdown("**Compra**")
        st.write(f"ITP aplicable: {percent(analysis.tax_rate, 1)}")
        st.write(f"Impuesto ITP: {euro(res.property_tax)}")
        st.write(f"TOTAL COMPRA: {euro(res.total_purchase_cost)}")
    with c2:
        st.markdown("**Financiación**")
        st.write(f"Hipoteca: {euro(res.loan_amount)}")
        st.write(f"Capital a aportar: {euro(res.equity_required)}")
        st.write(f"Cuota hipoteca: {euro(res.monthly_payment)}/mes")
    with c3:
        st.markdown("**Ingresos y gastos**")
        st.write(f"Ingreso anual: {euro(res.annual_income)}")
        st.write(f"TOTAL GASTOS: {euro(res.total_annual_expenses)}/año")

    st.subheader("Detalle Financiación")
    detail = pd.DataFrame(
        [
            {"Concepto": "Cuota Hipoteca", "Mensual": euro(res.monthly_payment), "Anual": euro(res.annual_payment)},
            {
                "Concepto": "Intereses (promedio)",
                "Mensual": euro(res.average_monthly_interest),
                "Anual": euro(res.average_annual_interest),
            },
            {
                "Concepto": "Amortización (promedio)",
                "Mensual": euro(res.average_monthly_principal),
                "Anual": euro(res.average_annual_principal),
            },
        ]
    )
    st.dataframe(detail, use_container_width=True, hide_index=True)

    st.subheader("Resumen de la Inversión")
    summary = pd.DataFrame(
        [
            {"Concepto": "Inversión total", "Valor": euro(res.total_purchase_cost)},
            {"Concepto": "Capital propio", "Valor": euro(res.equity_required)},
            {"Concepto": "Ingreso anual", "Valor": euro(res.annual_income)},
            {"Concepto": "Gastos anuales", "Valor": euro(res.total_annual_expenses)},
            {"Concepto": "Cash-Flow anual", "Valor": euro(res.annual_cash_flow)},
            {"Concepto": "Recuperación (años)", "Valor": number(res.price_to_earnings, 1)},
        ]
    )
    st.dataframe(summary, use_container_width=True, hide_index=True)


def render_graphs(analysis: Analysis):
    st.subheader("Gráficos")
    c1, c2 = st.columns(2)
    with c1:
        breakdown = monthly_breakdown(analysis.inputs, analysis.result)
        st.plotly_chart(plots.expense_breakdown_bars(breakdown), use_container_width=True)
    with c2:
        frame = projection_frame(analysis.projection)
        title = f"Proyección Cash-Flow ({len(analysis.projection)} años)"
        st.plotly_chart(plots.cashflow_projection_chart(frame, title=title), use_container_width=True)
        st.download_button(
            "Exportar CSV proyección",
            data=frame.to_csv(index=False).encode("utf-8"),
            file_name="proyeccion_cash_flow.csv",
            mime="text/csv",
        )


def render_report(analysis: Analysis, address: str):
    st.subheader("Informe")
    if st.button("Generar PDF"):
        try:
            pdf = build_report(
                analysis.inputs,
                analysis.result,
                address=address,
                community=analysis.community or "",
                tax_rate=analysis.tax_rate,
                projection=analysis.projection,
            )
        except ReportError as exc:
            logger.error("report generation failed: %s", exc)
            st.error(f"No se pudo generar el informe: {exc}")
            return
        st.download_button("Descargar PDF", data=pdf, file_name=report_filename(address), mime="application/pdf")


def main():
    st.title("Calculadora de Rentabilidad")
    st.caption("Analiza la rentabilidad de tu inversión inmobiliaria")
    inputs, address, community = sidebar_inputs()
    # Every widget change reruns the script, so results are always fresh
    analysis = run_analysis(inputs, community=community, horizon_years=PROJECTION_YEARS)

    tabs = st.tabs(["KPIs", "Resumen", "Gráficos"])
    with tabs[0]:
        render_kpis(analysis)
    with tabs[1]:
        render_summary(analysis)
    with tabs[2]:
        render_graphs(analysis)

    st.divider()
    render_report(analysis, address)


if __name__ == "__main__":
    main()
