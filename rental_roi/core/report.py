from __future__ import annotations

import datetime
import io
import logging
import math
import numbers
import re
from typing import List, Optional, Sequence

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import HRFlowable, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from .kpis import kpi_table
from .model import InvestmentInputs, InvestmentResult
from .projection import ProjectionPoint
from .utils import euro, number, percent

logger = logging.getLogger(__name__)


PRIMARY = colors.HexColor("#c4513d")
DARK = colors.HexColor("#2d2d2d")
GRAY = colors.HexColor("#666666")
GOOD = colors.HexColor("#5a7d5a")
BAD = colors.HexColor("#dc2626")
PANEL = colors.HexColor("#faf8f5")
BORDER = colors.HexColor("#e0d8d0")

MONTHS_ES = [
    "enero", "febrero", "marzo", "abril", "mayo", "junio",
    "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
]

REQUIRED_FIELDS = (
    "property_tax",
    "total_purchase_cost",
    "equity_required",
    "loan_amount",
    "monthly_payment",
    "annual_payment",
    "total_annual_expenses",
    "annual_income",
    "annual_cash_flow",
    "gross_yield",
    "net_yield",
    "monthly_cash_flow",
    "price_to_earnings",
    "debt_service_to_rent_ratio",
    "cash_flow_to_rent_ratio",
    "cash_on_cash_return",
    "return_on_capital_employed",
    "total_return",
)


class ReportError(ValueError):
    """Raised when the figures handed to the report cannot be rendered."""


def _check_result(result: InvestmentResult) -> None:
    for name in REQUIRED_FIELDS:
        value = getattr(result, name, None)
        if not isinstance(value, numbers.Real) or not math.isfinite(value):
            raise ReportError(f"report field {name!r} is not a finite number: {value!r}")


def spanish_date(day: datetime.date) -> str:
    return f"{day.day:02d} de {MONTHS_ES[day.month - 1]} de {day.year}"


def report_filename(address: str, today: Optional[datetime.date] = None) -> str:
    today = today or datetime.date.today()
    slug = re.sub(r"[^a-zA-Z0-9]", "_", address)
    return f"Informe_Inversion_{slug}_{today.isoformat()}.pdf"


def _section(title: str, styles) -> List:
    return [
        Paragraph(title, styles["ReportSection"]),
        HRFlowable(width="100%", thickness=0.5, color=PRIMARY),
        Spacer(1, 6),
    ]


def _label_value_table(rows: Sequence[Sequence[str]], col_widths: Sequence[float]) -> Table:
    table = Table([list(r) for r in rows], colWidths=list(col_widths))
    table.setStyle(
        TableStyle(
            [
                ("FONTSIZE", (0, 0), (-1, -1), 9),
                ("TEXTCOLOR", (0, 0), (-1, -1), GRAY),
                ("ALIGN", (1, 0), (1, -1), "RIGHT"),
                ("FONTNAME", (1, 0), (1, -1), "Helvetica-Bold"),
                ("TEXTCOLOR", (1, 0), (1, -1), DARK),
            ]
        )
    )
    if len(rows[0]) == 4:
        table.setStyle(
            TableStyle(
                [
                    ("ALIGN", (3, 0), (3, -1), "RIGHT"),
                    ("FONTNAME", (3, 0), (3, -1), "Helvetica-Bold"),
                    ("TEXTCOLOR", (3, 0), (3, -1), DARK),
                ]
            )
        )
    return table


def _kpi_grid(result: InvestmentResult) -> Table:
    kpis = kpi_table(result)
    cells = []
    commands = [
        ("BOX", (0, 0), (-1, -1), 0.3, BORDER),
        ("INNERGRID", (0, 0), (-1, -1), 0.3, BORDER),
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
    ]
    label_style = ParagraphStyle("KpiLabel", fontName="Helvetica", fontSize=7, textColor=GRAY)
    for idx, kpi in enumerate(kpis):
        row, col = divmod(idx, 3)
        value_style = ParagraphStyle(
            f"KpiValue{idx}",
            fontName="Helvetica-Bold",
            fontSize=12,
            leading=15,
            textColor=GOOD if kpi.is_good else BAD,
        )
        if row >= len(cells):
            cells.append([])
        cells[row].append([Paragraph(kpi.label.upper(), label_style), Paragraph(kpi.display, value_style)])
        if kpi.highlight:
            commands.append(("BACKGROUND", (col, row), (col, row), PANEL))
    return Table(cells, colWidths=[56 * mm] * 3, style=commands)


def _draw_frame(canvas, doc) -> None:
    width, height = A4
    canvas.saveState()
    canvas.setFillColor(PRIMARY)
    canvas.rect(0, 0, width, 12 * mm, stroke=0, fill=1)
    canvas.setFillColor(colors.white)
    canvas.setFont("Helvetica", 8)
    canvas.drawCentredString(width / 2, 5 * mm, "Calculadora de Rentabilidad Inmobiliaria")
    canvas.restoreState()


def build_report(
    inputs: InvestmentInputs,
    result: InvestmentResult,
    *,
    address: str,
    community: str,
    tax_rate: float,
    projection: Optional[Sequence[ProjectionPoint]] = None,
    today: Optional[datetime.date] = None,
) -> bytes:
    """Render the investment report as A4 PDF bytes.

    Raises ``ReportError`` if any figure the report prints is missing or not
    finite.
    """
    _check_result(result)
    today = today or datetime.date.today()

    styles = getSampleStyleSheet()
    styles.add(ParagraphStyle("ReportSection", parent=styles["Heading2"], textColor=DARK, spaceAfter=2))
    styles.add(ParagraphStyle("ReportSubtitle", parent=styles["Normal"], textColor=GRAY))

    story: List = []
    story.append(Paragraph("Calculadora de Rentabilidad", styles["Title"]))
    story.append(Paragraph(f"Informe de Inversión Inmobiliaria · {spanish_date(today)}", styles["ReportSubtitle"]))
    story.append(Spacer(1, 12))

    story.extend(_section("Datos de la Propiedad", styles))
    story.append(
        _label_value_table(
            [
                ["Dirección:", address],
                ["Comunidad:", f"{community} (ITP: {percent(tax_rate, 1)})"],
            ],
            [35 * mm, 135 * mm],
        )
    )
    story.append(Spacer(1, 10))

    story.extend(_section("Datos de Entrada", styles))
    left = [
        ("Precio de compra:", euro(inputs.purchase_price)),
        ("Gastos (Notaría, etc.):", euro(inputs.closing_costs)),
        ("Gastos hipoteca:", euro(inputs.mortgage_setup_costs)),
        ("Coste reforma:", euro(inputs.renovation_cost)),
        ("Comisión:", euro(inputs.agent_commission)),
        ("Mobiliario:", euro(inputs.furniture_cost)),
        ("Impuesto ITP:", euro(result.property_tax)),
    ]
    right = [
        ("Cuota alquiler mensual:", euro(inputs.monthly_rent)),
        ("Revalorización anual:", percent(inputs.annual_appreciation_rate)),
        ("% Financiado:", percent(inputs.financed_fraction)),
        ("Plazo hipoteca:", f"{number(inputs.loan_term_years, 0)} años"),
        ("Tipo de interés:", percent(inputs.annual_interest_rate)),
        ("Gastos anuales:", euro(result.total_annual_expenses)),
        ("", ""),
    ]
    story.append(
        _label_value_table(
            [[a, b, c, d] for (a, b), (c, d) in zip(left, right)],
            [45 * mm, 35 * mm, 50 * mm, 40 * mm],
        )
    )
    story.append(Spacer(1, 8))
    total = Table(
        [["TOTAL COMPRA:", euro(result.total_purchase_cost)]],
        colWidths=[120 * mm, 50 * mm],
        style=[
            ("BACKGROUND", (0, 0), (-1, -1), PANEL),
            ("FONTNAME", (0, 0), (-1, -1), "Helvetica-Bold"),
            ("TEXTCOLOR", (1, 0), (1, 0), PRIMARY),
            ("ALIGN", (1, 0), (1, 0), "RIGHT"),
        ],
    )
    story.append(total)
    story.append(Spacer(1, 12))

    story.extend(_section("KPIs de Rentabilidad", styles))
    story.append(_kpi_grid(result))
    story.append(Spacer(1, 12))

    story.extend(_section("Detalle de Financiación", styles))
    story.append(
        _label_value_table(
            [
                ["Capital a aportar:", euro(result.equity_required)],
                ["Hipoteca:", euro(result.loan_amount)],
                ["Cuota hipoteca:", f"{euro(result.monthly_payment)} / mes"],
                ["Cuota hipoteca anual:", euro(result.annual_payment)],
            ],
            [60 * mm, 50 * mm],
        )
    )
    story.append(Spacer(1, 12))

    if projection:
        story.extend(_section("Proyección de Cash-Flow", styles))
        rows = [["Año", "Cash-Flow", "Acumulado"]] + [
            [p.period_label, euro(p.period_cash_flow), euro(p.cumulative_cash_flow)] for p in projection
        ]
        story.append(
            Table(
                rows,
                colWidths=[40 * mm, 45 * mm, 45 * mm],
                style=[
                    ("FONTSIZE", (0, 0), (-1, -1), 9),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("LINEBELOW", (0, 0), (-1, 0), 0.5, PRIMARY),
                    ("ALIGN", (1, 0), (-1, -1), "RIGHT"),
                ],
            )
        )
        story.append(Spacer(1, 12))

    story.extend(_section("Resumen de la Inversión", styles))
    summary = [
        ("Inversión total", euro(result.total_purchase_cost), DARK),
        ("Capital propio", euro(result.equity_required), DARK),
        ("Ingreso anual", euro(result.annual_income), GOOD),
        ("Gastos anuales", euro(result.total_annual_expenses), BAD),
        ("Cash-Flow anual", euro(result.annual_cash_flow), GOOD if result.annual_cash_flow >= 0 else BAD),
        ("Recuperación (años)", number(result.price_to_earnings, 1), DARK),
    ]
    summary_style = [
        ("FONTSIZE", (0, 0), (-1, -1), 10),
        ("TEXTCOLOR", (0, 0), (0, -1), GRAY),
        ("FONTNAME", (1, 0), (1, -1), "Helvetica-Bold"),
        ("ALIGN", (1, 0), (1, -1), "RIGHT"),
        ("LINEBELOW", (0, 0), (-1, -1), 0.2, BORDER),
    ]
    for idx, (_, _, color) in enumerate(summary):
        summary_style.append(("TEXTCOLOR", (1, idx), (1, idx), color))
    story.append(Table([[label, value] for label, value, _ in summary], colWidths=[110 * mm, 60 * mm], style=summary_style))

    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        leftMargin=20 * mm,
        rightMargin=20 * mm,
        topMargin=20 * mm,
        bottomMargin=20 * mm,
        title="Informe de Inversión Inmobiliaria",
    )
    doc.build(story, onFirstPage=_draw_frame, onLaterPages=_draw_frame)
    logger.info("built investment report for %r (%d bytes)", address, buffer.tell())
    return buffer.getvalue()
