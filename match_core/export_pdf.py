# match_core/export_pdf.py
from __future__ import annotations
import io
import pandas as pd
from reportlab.lib.pagesizes import letter, landscape
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import SimpleDocTemplate, Paragraph, Table, TableStyle

PDF_COLUMNS = ["attendee", "partner", "score", "mutual",
               "attendee_interest", "partner_interest", "attendee_role", "partner_role"]


def render_pdf(pairs_df, title: str = "Optimal Attendee Pairs") -> bytes:
    """Pair table (from io.pairs_to_dataframe) as a landscape PDF, split across pages as needed."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(buf, pagesize=landscape(letter),
                            leftMargin=40, rightMargin=40, topMargin=40, bottomMargin=40)

    cols = [c for c in PDF_COLUMNS if c in pairs_df.columns]
    data = [cols]
    for _, row in pairs_df[cols].iterrows():
        data.append(["" if pd.isna(v) else str(v) for v in row.tolist()])

    t = Table(data, repeatRows=1, colWidths=[doc.width / len(cols)] * len(cols))
    t.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.lightgrey),
        ("TEXTCOLOR", (0,0), (-1,0), colors.black),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,-1), 9),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
        ("ALIGN", (0,0), (-1,-1), "LEFT"),
        ("VALIGN", (0,0), (-1,-1), "MIDDLE"),
    ]))

    styles = getSampleStyleSheet()
    doc.build([Paragraph(title, styles["Title"]), t])
    return buf.getvalue()
