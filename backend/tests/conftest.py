from __future__ import annotations

from functools import partial

import httpx
import pytest
from fastapi.testclient import TestClient

from backend.app.fetcher import fetch_markdown
from backend.app.main import app, get_renderer, get_templates
from backend.app.pipeline import DocumentRenderer
from backend.app.template_transforms import elegant
from backend.app.templates import TemplateResolver
from backend.tests.doc_host import document_transport


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def templates_dir(tmp_path):
    d = tmp_path / "templates"
    d.mkdir()
    (d / "x.css").write_text("h1{color:#123456}", encoding="utf-8")
    return d


@pytest.fixture
def resolver(templates_dir):
    return TemplateResolver(templates_dir, transforms={"x": elegant})


@pytest.fixture
def make_client(resolver):
    def factory(transport: httpx.MockTransport | None = None, **renderer_kwargs) -> TestClient:
        transport = transport or document_transport()
        renderer = DocumentRenderer(
            fetch=partial(fetch_markdown, transport=transport),
            templates=resolver,
            **renderer_kwargs,
        )
        app.dependency_overrides[get_templates] = lambda: resolver
        app.dependency_overrides[get_renderer] = lambda: renderer
        return TestClient(app)

    yield factory
    app.dependency_overrides.clear()
