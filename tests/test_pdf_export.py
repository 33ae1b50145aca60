import fitz

from pdf_export import build_report_pdf, to_latin1


def test_to_latin1_replaces_typographic_characters():
    assert to_latin1("“Quoted” – fine…") == '"Quoted" - fine...'
    assert to_latin1("€20 million") == "EUR 20 million"


def test_to_latin1_replaces_unsupported_characters():
    assert to_latin1("データ") == "???"


def test_build_report_pdf_renders_markdown_text():
    body = "## Key Risks\n\n* **Liability** is uncapped\n- Termination is one-sided\n\nPlain closing line — done."
    data = build_report_pdf("Document Analysis", body)

    assert data.startswith(b"%PDF")
    with fitz.open(stream=data, filetype="pdf") as pdf:
        text = "".join(page.get_text() for page in pdf)
    assert "Document Analysis" in text
    assert "Key Risks" in text
    assert "Liability" in text
    assert "Termination is one-sided" in text


def test_build_report_pdf_handles_long_reports():
    body = "\n".join(f"Paragraph {i}: the processor shall notify the controller without undue delay."
                     for i in range(200))
    with fitz.open(stream=build_report_pdf("Long", body), filetype="pdf") as pdf:
        assert pdf.page_count > 1
