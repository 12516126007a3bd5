from __future__ import annotations

from html import escape

from fastapi import Depends, FastAPI, HTTPException, Response
from fastapi.responses import HTMLResponse, PlainTextResponse

from .config import PDF_FILENAME, ROOT_PATH
from .logging_utils import get_logger
from .pipeline import DocumentRenderer, error_response
from .schemas import DETAIL_LEVELS, RenderOptions
from .templates import TemplateResolver

log = get_logger(__name__)

app = FastAPI(title="cv-render-gateway", root_path=ROOT_PATH)

_INDEX_CSS = """
  body{font-family:system-ui, -apple-system, Segoe UI, Roboto, Helvetica, Arial, sans-serif; padding:24px}
  h1{font-size:1.4rem}
  ul{line-height:1.8}
  code{background:#f6f8fa; padding:2px 6px; border-radius:4px}
"""

# (label, lang, output, verb for the links)
_INDEX_ROWS = (
    ("ES HTML", "es", "html", "Ver"),
    ("ES PDF", "es", "pdf", "Descargar"),
    ("EN HTML", "en", "html", "Ver"),
    ("EN PDF", "en", "pdf", "Descargar"),
)


def get_templates() -> TemplateResolver:
    return TemplateResolver()


def get_renderer(templates: TemplateResolver = Depends(get_templates)) -> DocumentRenderer:
    return DocumentRenderer(templates=templates)


def _render_options(lang: str, detail: str, template: str, output: str) -> RenderOptions:
    if detail not in DETAIL_LEVELS:
        raise HTTPException(status_code=404, detail="Not Found")
    return RenderOptions(lang=lang, with_details=DETAIL_LEVELS[detail], template=template, output=output)


def _index_html(templates: list[str]) -> str:
    parts = [
        '<!doctype html><html lang="es"><meta charset="utf-8"><title>Templates</title>',
        f"<style>{_INDEX_CSS}</style><body>",
        "<h1>Templates disponibles</h1>",
    ]
    if not templates:
        parts.append("<p>No hay templates. Crea archivos <code>.css</code> en <code>/templates</code>.</p>")
    else:
        parts.append("<ul>")
        for name in templates:
            t = escape(name, quote=True)
            parts.append(f"<li><code>{t}</code> <ul>")
            for label, lang, output, verb in _INDEX_ROWS:
                parts.append(
                    f'<li>- {label} '
                    f'<a href="./{lang}/small/{t}/{output}" target="_blank">{verb} compacto</a>, '
                    f'<a href="./{lang}/full/{t}/{output}" target="_blank">{verb} completo</a></li>'
                )
            parts.append("</ul></li>")
        parts.append("</ul>")
    parts.append(
        '<hr><p>También puedes probar sin template: '
        '<a href="./es/full/plain/pdf" target="_blank">./es/full/plain/pdf</a></p>'
    )
    parts.append("</body></html>")
    return "".join(parts)


@app.get("/", response_class=HTMLResponse)
def index(templates: TemplateResolver = Depends(get_templates)) -> HTMLResponse:
    return HTMLResponse(_index_html(templates.list_templates()))


@app.get("/{lang}/{detail}/{template}/html")
async def render_html(
    lang: str,
    detail: str,
    template: str,
    renderer: DocumentRenderer = Depends(get_renderer),
) -> Response:
    options = _render_options(lang, detail, template, "html")
    log.info("Render html lang=%s detail=%s template=%s", options.normalized_lang, options.detail, template)
    try:
        html = await renderer.render_html(options)
    except Exception as e:
        status, body = error_response(e)
        return PlainTextResponse(body, status_code=status)
    return HTMLResponse(html, headers={"Content-Language": options.content_language})


@app.get("/{lang}/{detail}/{template}/pdf")
async def render_pdf(
    lang: str,
    detail: str,
    template: str,
    renderer: DocumentRenderer = Depends(get_renderer),
) -> Response:
    options = _render_options(lang, detail, template, "pdf")
    log.info("Render pdf lang=%s detail=%s template=%s", options.normalized_lang, options.detail, template)
    try:
        pdf = await renderer.render_pdf(options)
    except Exception as e:
        status, body = error_response(e)
        return PlainTextResponse(body, status_code=status)
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={
            "Content-Language": options.content_language,
            "Content-Disposition": f'inline; filename="{PDF_FILENAME}"',
        },
    )
