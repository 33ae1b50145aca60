import re
from datetime import date

from fpdf import FPDF
from fpdf.enums import XPos, YPos

_REPLACEMENTS = {
    "‘": "'", "’": "'", "“": '"', "”": '"',
    "–": "-", "—": "-", "•": "-", "…": "...", "€": "EUR ",
}
_HEADING = re.compile(r"^#{1,6}\s+(.*)$")
_BULLET = re.compile(r"^\s*[*-]\s+(.*)$")


def to_latin1(text: str) -> str:
    # core PDF fonts only cover latin-1
    for char, replacement in _REPLACEMENTS.items():
        text = text.replace(char, replacement)
    return text.encode("latin-1", "replace").decode("latin-1")


def _write(pdf, text, size=11, style="", height=6):
    pdf.set_font("Helvetica", style=style, size=size)
    pdf.multi_cell(0, height, to_latin1(text), markdown=True, new_x=XPos.LMARGIN, new_y=YPos.NEXT)


def build_report_pdf(title: str, body: str) -> bytes:
    """Render a markdown-ish report (headings, bullets, **bold**) to PDF bytes."""
    pdf = FPDF()
    pdf.set_auto_page_break(auto=True, margin=15)
    pdf.add_page()
    _write(pdf, title, size=16, style="B", height=10)
    _write(pdf, f"Cyber Legal Experts - {date.today():%B %d, %Y}", size=9, height=6)
    pdf.ln(4)

    for line in body.splitlines():
        if not line.strip():
            pdf.ln(3)
            continue
        heading = _HEADING.match(line)
        if heading:
            pdf.ln(2)
            _write(pdf, heading.group(1).strip("* "), size=13, style="B", height=8)
            continue
        bullet = _BULLET.match(line)
        if bullet:
            _write(pdf, f"  - {bullet.group(1)}")
            continue
        _write(pdf, line)
    return bytes(pdf.output())
