from __future__ import annotations

from .config import DOCUMENT_TITLE

BASE_CSS = """
body{font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, "Helvetica Neue", Arial, "Noto Sans", "Liberation Sans", sans-serif; line-height:1.45; color:#111; margin:0; padding:0;}
.container{max-width:900px; margin:0 auto; padding:32px;}
h1,h2,h3{margin-top:1.2em}
h1{font-size:1.8rem} h2{font-size:1.4rem} h3{font-size:1.15rem}
code, pre{font-family: ui-monospace, SFMono-Regular, Menlo, Monaco, Consolas, "Liberation Mono", "Courier New", monospace}
table{border-collapse:collapse} th,td{border:1px solid #ddd; padding:6px}
details{margin: .75rem 0}
summary{cursor:pointer; font-weight:600}
@media print {
  a[href]:after{content:""}
  details[open] summary{margin-bottom:.25rem}
  .container{max-width:100%; padding:0 12mm}
}
"""


def assemble(fragment: str, stylesheet: str | None = None, *, title: str = DOCUMENT_TITLE) -> str:
    """Wrap an HTML fragment in a full page with base and template styling.

    The template stylesheet, when given, gets its own <style> block after the
    base one so its rules win on equal specificity.
    """
    template_style = f"<style>\n{stylesheet}\n</style>" if stylesheet else ""
    return (
        "<!doctype html>\n"
        '<html lang="es">\n'
        "<head>\n"
        '  <meta charset="utf-8">\n'
        '  <meta name="viewport" content="width=device-width,initial-scale=1">\n'
        f"  <title>{title}</title>\n"
        f"  <style>{BASE_CSS}</style>\n"
        f"  {template_style}\n"
        "</head>\n"
        "<body>\n"
        '  <main class="container">\n'
        f"{fragment}\n"
        "  </main>\n"
        "</body>\n"
        "</html>\n"
    )
