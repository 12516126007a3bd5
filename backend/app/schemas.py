from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from .config import CONTENT_LANGUAGES, DEFAULT_LANG, SOURCE_URLS

OutputFormat = Literal["html", "pdf"]

DETAIL_LEVELS = {
    "small": False,
    "full": True,
}


class RenderOptions(BaseModel):
    lang: str = DEFAULT_LANG
    with_details: bool = True
    template: str | None = None
    output: OutputFormat = "html"

    @property
    def normalized_lang(self) -> str:
        return self.lang if self.lang in SOURCE_URLS else DEFAULT_LANG

    @property
    def source_url(self) -> str:
        return SOURCE_URLS[self.normalized_lang]

    @property
    def content_language(self) -> str:
        return CONTENT_LANGUAGES[self.normalized_lang]

    @property
    def detail(self) -> str:
        return "full" if self.with_details else "small"
