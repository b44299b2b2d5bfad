from __future__ import annotations

from typing import List, Tuple
import pandas as pd
import plotly.graph_objects as go


PRIMARY = "#c4513d"
BREAKDOWN_COLORS = ["#c4513d", "#d97952", "#e8a07a", "#b8442f", "#9c3928"]


def expense_breakdown_bars(breakdown: List[Tuple[str, int]], title: str = "Desglose mensual") -> go.Figure:
    names = [name for name, _ in breakdown]
    values = [value for _, value in breakdown]
    colors = [BREAKDOWN_COLORS[i % len(BREAKDOWN_COLORS)] for i in range(len(breakdown))]
    fig = go.Figure(
        go.Bar(
            x=values,
            y=names,
            orientation="h",
            marker_color=colors,
            hovertemplate="%{x} €<extra>Mensual</extra>",
        )
    )
    fig.update_layout(title=title, xaxis_title="€ / mes", yaxis=dict(autorange="reversed"))
    return fig


def cashflow_projection_chart(frame: pd.DataFrame, title: str = "Proyección Cash-Flow") -> go.Figure:
    """Yearly cash flow as bars with the cumulative total as a filled area."""
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=frame["label"],
            y=frame["cumulative_cash_flow"],
            mode="lines",
            fill="tozeroy",
            line=dict(color=PRIMARY, width=2),
            fillcolor="rgba(196, 81, 61, 0.1)",
            name="Acumulado",
        )
    )
    fig.add_bar(x=frame["label"], y=frame["cash_flow"], name="Cash-Flow Anual", marker_color="#d97952")
    fig.update_layout(title=title, xaxis_title="Año", yaxis_title="€")
    return fig
