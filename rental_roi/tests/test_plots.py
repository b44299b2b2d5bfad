from rental_roi.core import plots
from rental_roi.core.projection import project_cash_flow, projection_frame


def test_expense_breakdown_bars():
    fig = plots.expense_breakdown_bars([("Hipoteca", 194), ("Impuestos", 67)])
    bar = fig.data[0]
    assert list(bar.y) == ["Hipoteca", "Impuestos"]
    assert list(bar.x) == [194, 67]
    assert bar.orientation == "h"


def test_cashflow_projection_chart_has_area_and_bars():
    frame = projection_frame(project_cash_flow(100, 0.02, 3))
    fig = plots.cashflow_projection_chart(frame)
    names = [trace.name for trace in fig.data]
    assert names == ["Acumulado", "Cash-Flow Anual"]
    assert list(fig.data[0].y) == [1200, 2424, 3672]
    assert list(fig.data[1].x) == ["Año 1", "Año 2", "Año 3"]
