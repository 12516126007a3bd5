from __future__ import annotations

import tempfile
from pathlib import Path

from bs4 import BeautifulSoup, Comment
from fpdf import FPDF

from .config import DOCUMENT_TITLE, PDF_TEMP_DIR
from .logging_utils import get_logger

log = get_logger(__name__)

PAGE_FORMAT = "A4"
MARGIN_MM = 10

# Built-in PDF fonts only cover Latin-1.
_ASCII_REPLACEMENTS = {
    "\u00a0": " ",
    "\u2007": " ",
    "\u2009": " ",
    "\u200b": "",
    "\u2010": "-",
    "\u2011": "-",
    "\u2012": "-",
    "\u2013": "-",
    "\u2014": "--",
    "\u2015": "--",
    "\u2212": "-",
    "\u2026": "...",
    "\u2018": "'",
    "\u2019": "'",
    "\u201c": "\"",
    "\u201d": "\"",
    "\u2022": "*",
    "\u2190": "<-",
    "\u2192": "->",
    "\u2194": "<->",
    "\u21d0": "<=",
    "\u21d2": "=>",
    "\u21d4": "<=>",
    "\u25b6": ">",
    "\u25bc": "v",
}

_DROP_TAGS = ("head", "style", "script", "noscript", "img", "svg", "input")


class RenderError(RuntimeError):
    pass


def _normalize_ascii(text: str) -> str:
    out = text
    for key, val in _ASCII_REPLACEMENTS.items():
        out = out.replace(key, val)
    return out


def _sanitize_pdf_text(text: str) -> str:
    cleaned = _normalize_ascii(text)
    return cleaned.encode("latin-1", "replace").decode("latin-1")


def _prepare_body(html: str) -> str:
    """Reduce a full page to body markup the fpdf2 HTML writer can lay out."""
    soup = BeautifulSoup(html or "", "html.parser")
    for t in soup(list(_DROP_TAGS)):
        t.decompose()
    for c in soup.find_all(string=lambda s: isinstance(s, Comment)):
        c.extract()
    # Inline CSS may name fonts the core font set does not have.
    for t in soup.find_all(True):
        for attr in ("style", "face"):
            if attr in t.attrs:
                del t.attrs[attr]
    # The fpdf2 table writer only accepts plain text inside cells.
    for cell in soup.find_all(["td", "th"]):
        for br in cell.find_all("br"):
            br.replace_with(" ")
        cell.string = cell.get_text(" ", strip=True)
    root = soup.body or soup
    for s in list(root.find_all(string=True)):
        cleaned = _sanitize_pdf_text(str(s))
        if cleaned != str(s):
            s.replace_with(cleaned)
    return root.decode_contents()


def render_pdf(html: str, *, title: str = DOCUMENT_TITLE, temp_dir: Path | None = None) -> bytes:
    """Lay out an assembled HTML page as an A4 PDF with 10mm margins.

    Either the whole document is produced or RenderError is raised.
    """
    body = _prepare_body(html)
    if not body.strip():
        raise RenderError("Nothing to render: the page body is empty")

    pdf = FPDF(format=PAGE_FORMAT, unit="mm")
    pdf.set_margins(MARGIN_MM, MARGIN_MM, MARGIN_MM)
    pdf.set_auto_page_break(auto=True, margin=MARGIN_MM)
    pdf.set_title(_sanitize_pdf_text(title))
    pdf.set_creator("cv-render-gateway")

    try:
        pdf.add_page()
        pdf.write_html(body)
        with tempfile.TemporaryDirectory(dir=temp_dir or PDF_TEMP_DIR) as tmp:
            out_path = Path(tmp) / "document.pdf"
            pdf.output(str(out_path))
            data = out_path.read_bytes()
    except Exception as e:
        raise RenderError(f"PDF rendering failed: {type(e).__name__}: {e}") from e

    if not data.startswith(b"%PDF"):
        raise RenderError("PDF rendering produced no document")
    log.debug("Rendered PDF: %d pages, %d bytes", pdf.pages_count, len(data))
    return data
