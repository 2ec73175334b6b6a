# FILE: tests/test_export_pdf.py
from match_core.export_pdf import render_pdf
from match_core.generator import generate_attendees
from match_core.io import pairs_to_dataframe
from match_core.matcher import match_attendees


def test_render_pdf():
    attendees = generate_attendees(40, seed=1)
    pdf = render_pdf(pairs_to_dataframe(match_attendees(attendees), attendees))
    assert pdf.startswith(b"%PDF")
    assert len(pdf) > 1000
