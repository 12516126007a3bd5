from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from backend.app.config import TEMPLATES_DIR
from backend.app.pipeline import DocumentRenderer, error_response
from backend.app.schemas import DETAIL_LEVELS, RenderOptions
from backend.app.templates import TemplateResolver


def log(msg: str) -> None:
    print(msg, file=sys.stderr)


async def render(options: RenderOptions, templates_dir: Path) -> bytes:
    renderer = DocumentRenderer(templates=TemplateResolver(templates_dir))
    if options.output == "pdf":
        return await renderer.render_pdf(options)
    html = await renderer.render_html(options)
    return html.encode("utf-8")


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Render the remote CV Markdown to HTML or PDF.")
    ap.add_argument("--lang", type=str, default="es", choices=["es", "en"], help="Document language variant")
    ap.add_argument("--detail", type=str, default="full", choices=sorted(DETAIL_LEVELS), help="small strips <details> blocks")
    ap.add_argument("--template", type=str, default="", help="Template name (stylesheet/transform); empty for none")
    ap.add_argument("--format", dest="output", type=str, default="html", choices=["html", "pdf"], help="Output format")
    ap.add_argument("--templates-dir", type=Path, default=TEMPLATES_DIR, help="Directory holding <name>.css files")
    ap.add_argument("--out", type=Path, default=None, help="Output file (HTML defaults to stdout)")
    ap.add_argument("--list-templates", action="store_true", help="Print available templates and exit")
    args = ap.parse_args(argv)

    if args.list_templates:
        for name in TemplateResolver(args.templates_dir).list_templates():
            print(name)
        return 0

    if args.output == "pdf" and args.out is None:
        ap.error("--out is required for --format pdf")

    options = RenderOptions(
        lang=args.lang,
        with_details=DETAIL_LEVELS[args.detail],
        template=args.template or None,
        output=args.output,
    )
    try:
        data = asyncio.run(render(options, args.templates_dir))
    except Exception as e:
        _, body = error_response(e)
        log(body)
        return 1

    if args.out is None:
        sys.stdout.write(data.decode("utf-8"))
    else:
        args.out.write_bytes(data)
        log(f"Wrote {len(data)} bytes to {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
