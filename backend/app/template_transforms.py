from __future__ import annotations

import re
from typing import Callable

HtmlTransform = Callable[[str], str]

_BODY_OPEN_RE = re.compile(r"(<body[^>]*>)", re.IGNORECASE)
_STYLE_CLOSE_RE = re.compile(r"</style>", re.IGNORECASE)
_DETAILS_OPEN_RE = re.compile(r"<details>", re.IGNORECASE)

_ELEGANT_HEADER = """
<header style="display:flex;justify-content:space-between;align-items:center;padding:8mm 12mm;border-bottom:1px solid #ddd; margin-bottom:8mm;">
  <div style="font-family:Georgia,serif;font-size:20pt;letter-spacing:.3px;">Ruben Civeira Iglesias</div>
  <div style="font-size:9pt;color:#666;">Líder Técnico · PMP®</div>
</header>
"""

_ELEGANT_CSS = """
@page { margin-top: 20mm; margin-bottom: 15mm; }
body::before{
  content:"Ruben Civeira CV";
  position:fixed; top:50%; left:50%;
  transform:translate(-50%,-50%) rotate(-30deg);
  color:#000; opacity:0.05; font-size:48pt; font-family:Georgia,serif; z-index:-1;
  pointer-events:none;
}
summary::marker{ content: ""; }
summary::before{ content:"▶ "; }
details[open] > summary::before{ content:"▼ "; }
"""


def open_all_details(html: str) -> str:
    return _DETAILS_OPEN_RE.sub("<details open>", html)


def elegant(html: str) -> str:
    """Serif name header, faint watermark, and every collapsible forced open."""
    html = _BODY_OPEN_RE.sub(lambda m: m.group(1) + _ELEGANT_HEADER, html, count=1)
    html = _STYLE_CLOSE_RE.sub(lambda m: _ELEGANT_CSS + "\n</style>", html, count=1)
    return open_all_details(html)


TEMPLATE_TRANSFORMS: dict[str, HtmlTransform] = {
    "elegant": elegant,
}
