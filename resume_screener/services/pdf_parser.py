import io

import pdfplumber


def extract_text(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file, one page after another."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip()
