from __future__ import annotations

import asyncio
from typing import Awaitable, Callable

from .fetcher import FetchError, fetch_markdown
from .logging_utils import get_logger
from .markdown_render import ConversionError, convert, strip_collapsible
from .page import assemble
from .pdf_export import RenderError, render_pdf
from .schemas import RenderOptions
from .templates import TemplateResolver

log = get_logger(__name__)

Fetch = Callable[[str], Awaitable[str]]
Converter = Callable[[str], str]
PdfRenderer = Callable[[str], bytes]

# Known failure kinds all come from the upstream document or a rendering
# library, so each maps to 502.
ERROR_RESPONSES: dict[type[Exception], tuple[int, str]] = {
    FetchError: (502, "Error descargando Markdown"),
    ConversionError: (502, "Error convirtiendo Markdown"),
    RenderError: (502, "Error generando PDF"),
}
UNEXPECTED_ERROR_RESPONSE = (502, "Error procesando el documento")


def error_response(exc: Exception) -> tuple[int, str]:
    """Map a pipeline failure to (status code, plaintext body)."""
    for kind, (status, label) in ERROR_RESPONSES.items():
        if isinstance(exc, kind):
            log.warning("%s: %s", label, exc)
            return status, f"{label}: {exc}"
    log.exception("Unexpected pipeline failure", exc_info=exc)
    status, label = UNEXPECTED_ERROR_RESPONSE
    return status, f"{label}: {exc}"


class DocumentRenderer:
    """Fetch → strip → convert → style → transform, and optionally to PDF.

    Collaborators are passed in so a request can be served against fakes.
    Instances hold no per-request state and may be built per request.
    """

    def __init__(
        self,
        fetch: Fetch = fetch_markdown,
        converter: Converter = convert,
        templates: TemplateResolver | None = None,
        pdf_renderer: PdfRenderer = render_pdf,
    ) -> None:
        self.fetch = fetch
        self.converter = converter
        self.templates = templates or TemplateResolver()
        self.pdf_renderer = pdf_renderer

    async def render_html(self, options: RenderOptions) -> str:
        markdown = await self.fetch(options.source_url)
        if not options.with_details:
            markdown = strip_collapsible(markdown)

        stylesheet = self.templates.load_stylesheet(options.template)
        html = assemble(self.converter(markdown), stylesheet)

        transform = self.templates.load_transform(options.template)
        if transform is not None:
            html = transform(html)
        return html

    async def render_pdf(self, options: RenderOptions) -> bytes:
        html = await self.render_html(options)
        return await asyncio.to_thread(self.pdf_renderer, html)
