import io
from xml.sax.saxutils import escape
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from mealboard.domain.Plan import Plan
from mealboard.logic.board.views import board_view

HEADER_COLOR = colors.HexColor("#37474F")
PLANNED_COLOR = colors.HexColor("#E8F5E9")


def _board_rows(view):
    rows = [["Night", "Meal", "Span"]]
    planned_rows, continuation_rows = [], []
    for row_no, day in enumerate(view["days"], start=1):
        meal = day["meal"]
        if meal is None:
            rows.append([day["label"], "-", ""])
            continue
        planned_rows.append(row_no)
        span = meal["span"]
        if meal["continuation"]:
            span += " (night 2)"
            continuation_rows.append(row_no)
        rows.append([day["label"], meal["title"], span])
    return rows, planned_rows, continuation_rows


def generate_pdf_for_week(plan: Plan) -> bytes:
    """Printable week: one row per night, then the grocery lines not yet checked off."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=landscape(A4),
        rightMargin=24, leftMargin=24, topMargin=24, bottomMargin=24
    )

    styles = getSampleStyleSheet()
    view = board_view(plan)
    elements = [
        Paragraph("Weekly Meal Board", styles["Title"]),
        Paragraph(view["progress"]["text"], styles["Normal"]),
        Spacer(1, 16),
    ]

    rows, planned_rows, continuation_rows = _board_rows(view)
    style = [
        ("BACKGROUND", (0, 0), (-1, 0), HEADER_COLOR),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("ALIGN", (0, 0), (0, -1), "CENTER"),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("LINEBELOW", (0, 0), (-1, -1), 0.25, colors.lightgrey),
    ]
    style += [("BACKGROUND", (0, r), (-1, r), PLANNED_COLOR) for r in planned_rows]
    style += [("FONTNAME", (1, r), (-1, r), "Helvetica-Oblique") for r in continuation_rows]
    table = Table(rows, colWidths=[80, 420, 160], repeatRows=1)
    table.setStyle(TableStyle(style))
    elements.append(table)

    lines = plan.build_grocery_list().unchecked(plan.checked_items)
    elements.append(Spacer(1, 16))
    elements.append(Paragraph("Grocery list", styles["Heading2"]))
    if lines:
        for line in lines:
            elements.append(Paragraph(escape(f"- {line.text}"), styles["Normal"]))
    else:
        elements.append(Paragraph("Nothing left to buy.", styles["Normal"]))

    doc.build(elements)
    return buf.getvalue()
