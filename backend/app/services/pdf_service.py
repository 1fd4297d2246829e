from fpdf import FPDF

from app.services.match_service import MatchResult


def _latin1(text: str) -> str:
    """Encode to latin-1, replacing unsupported chars. fpdf built-in fonts are latin-1 only."""
    return text.encode("latin-1", errors="replace").decode("latin-1")


def generate_match_report_pdf(
    result: MatchResult,
    generated_at: str,
    resume_name: str | None = None,
) -> bytes:
    """Render a match result as a one-page PDF report."""
    pdf = FPDF()
    pdf.set_margins(20, 20, 20)
    pdf.add_page()

    # Title
    pdf.set_font("Helvetica", "B", 18)
    pdf.multi_cell(0, 10, "Resume Match Report", align="L")
    pdf.ln(2)

    # Metadata
    pdf.set_font("Helvetica", "", 11)
    pdf.set_text_color(80, 80, 80)
    if resume_name:
        pdf.cell(0, 7, _latin1(f"Resume: {resume_name}"), new_x="LMARGIN", new_y="NEXT")
    pdf.cell(0, 7, _latin1(f"Generated: {generated_at}"), new_x="LMARGIN", new_y="NEXT")

    # Score
    pdf.ln(3)
    pdf.set_font("Helvetica", "B", 14)
    pdf.set_text_color(0, 0, 0)
    pdf.cell(0, 9, f"Match Score: {result.match_score}%", new_x="LMARGIN", new_y="NEXT")
    pdf.set_font("Helvetica", "", 11)
    pdf.set_text_color(80, 80, 80)
    pdf.cell(
        0, 7,
        f"{result.matched_count} of {result.target_count} job keywords found in the resume",
        new_x="LMARGIN", new_y="NEXT",
    )

    # Divider
    pdf.ln(3)
    pdf.set_draw_color(200, 200, 200)
    pdf.line(20, pdf.get_y(), 190, pdf.get_y())
    pdf.ln(5)

    # Missing keywords
    pdf.set_font("Helvetica", "B", 12)
    pdf.set_text_color(0, 0, 0)
    pdf.cell(0, 8, "Missing Keywords", new_x="LMARGIN", new_y="NEXT")
    pdf.set_font("Helvetica", "", 10)
    body = ", ".join(result.missing_keywords) if result.missing_keywords else "None"
    pdf.multi_cell(0, 5, _latin1(body))

    return bytes(pdf.output())
