from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from .config import TEMPLATES_DIR
from .logging_utils import get_logger
from .template_transforms import TEMPLATE_TRANSFORMS, HtmlTransform

log = get_logger(__name__)

STYLESHEET_EXT = ".css"


def safe_template_name(name: str | None) -> str | None:
    """Reduce a user-supplied template name to a bare filename, or None."""
    if not name:
        return None
    base = os.path.basename(str(name).replace("\\", "/")).strip()
    if not base or base in (".", ".."):
        return None
    return base


class TemplateResolver:
    """Looks up template stylesheets on disk and transforms in a registry.

    Nothing is cached: the directory is read on every call, so adding or
    removing a stylesheet is visible to the next request.
    """

    def __init__(
        self,
        templates_dir: Path = TEMPLATES_DIR,
        transforms: Mapping[str, object] | None = None,
    ) -> None:
        self.templates_dir = Path(templates_dir)
        self.transforms = TEMPLATE_TRANSFORMS if transforms is None else transforms

    def list_templates(self) -> list[str]:
        if not self.templates_dir.is_dir():
            return []
        names = []
        for entry in os.listdir(self.templates_dir):
            if entry.endswith(STYLESHEET_EXT):
                names.append(entry[: -len(STYLESHEET_EXT)])
        return names

    def load_stylesheet(self, name: str | None) -> str | None:
        base = safe_template_name(name)
        if base is None:
            return None
        path = self.templates_dir / f"{base}{STYLESHEET_EXT}"
        if not path.is_file():
            return None
        return path.read_text(encoding="utf-8")

    def load_transform(self, name: str | None) -> HtmlTransform | None:
        base = safe_template_name(name)
        if base is None:
            return None
        fn = self.transforms.get(base)
        if fn is None:
            return None
        if not callable(fn):
            log.warning("Template transform %r is not callable; ignoring it", base)
            return None
        return fn
