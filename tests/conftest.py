import io

import docx
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

BRAND_DEAL_TEXT = (
    "INFLUENCER COLLABORATION AGREEMENT\n"
    "This agreement is made between GlowUp Cosmetics (the Brand) and "
    "Priya Sharma (the Creator).\n"
    "The Creator shall publish three Instagram reels and two stories for the "
    "brand campaign.\n"
    "Deliverables: 3 reels and 2 stories, following the agreed posting schedule.\n"
    "Payment: the Brand shall pay a fee of Rs. 50,000 within 14 days of the "
    "content going live.\n"
    "The influencer retains ownership of all content created under this agreement."
)

LEGAL_NOTICE_TEXT = (
    "LEGAL NOTICE\n"
    "To the Defendant, on behalf of the Plaintiff named below. You are hereby "
    "directed to respond within fifteen days of receipt of this notice, failing "
    "which further proceedings will be initiated."
)


@pytest.fixture()
def brand_deal_text() -> str:
    return BRAND_DEAL_TEXT


@pytest.fixture()
def legal_notice_text() -> str:
    return LEGAL_NOTICE_TEXT


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def brand_deal_pdf_bytes() -> bytes:
    """Generate a PDF carrying the brand deal contract, one line per row."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.setFont("Helvetica", 9)
    y = 720
    for line in BRAND_DEAL_TEXT.splitlines():
        c.drawString(40, y, line)
        y -= 18
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_docx_bytes() -> bytes:
    """Generate a DOCX with two paragraphs and a two-column table."""
    document = docx.Document()
    document.add_paragraph("Sponsorship agreement")
    document.add_paragraph("")
    document.add_paragraph("Deliverables are listed below")
    table = document.add_table(rows=2, cols=2)
    table.cell(0, 0).text = "Deliverable"
    table.cell(0, 1).text = "Fee"
    table.cell(1, 0).text = "Instagram reel"
    table.cell(1, 1).text = "Rs. 20,000"
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def empty_docx_bytes() -> bytes:
    document = docx.Document()
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()
