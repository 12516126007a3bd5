from __future__ import annotations

import re

from markdown_it import MarkdownIt
from mdit_py_plugins.attrs import attrs_block_plugin, attrs_plugin
from mdit_py_plugins.tasklists import tasklists_plugin

MAX_NESTING = 100

# Non-greedy: a span ends at the first closing tag after its opening tag, so a
# nested <details> leaves its outer closing tag behind.
_DETAILS_RE = re.compile(r"<details[\s\S]*?</details>", re.IGNORECASE)


class ConversionError(RuntimeError):
    pass


def strip_collapsible(markdown: str) -> str:
    """Remove every <details>...</details> block, markers included."""
    if not markdown:
        return markdown
    return _DETAILS_RE.sub("", markdown)


def _build_markdown_parser() -> MarkdownIt:
    # gfm-like: tables, strikethrough and linkify. Raw HTML passes through;
    # the default link validator still refuses javascript:/vbscript:/file: links.
    md = MarkdownIt("gfm-like", {"html": True, "linkify": True, "maxNesting": MAX_NESTING})
    md.use(attrs_plugin)
    md.use(attrs_block_plugin)
    md.use(tasklists_plugin, enabled=False)
    return md


_MD_PARSER: MarkdownIt | None = None


def _get_markdown_parser() -> MarkdownIt:
    global _MD_PARSER
    if _MD_PARSER is None:
        _MD_PARSER = _build_markdown_parser()
    return _MD_PARSER


def convert(markdown: str) -> str:
    try:
        return _get_markdown_parser().render(str(markdown or ""))
    except RecursionError as e:
        raise ConversionError("Markdown nesting exceeds what can be rendered") from e
    except Exception as e:
        raise ConversionError(f"Markdown conversion failed: {type(e).__name__}: {e}") from e
