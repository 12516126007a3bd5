from backend.app.config import PDF_FILENAME, SOURCE_URLS
from backend.app.pdf_export import RenderError, render_pdf
from backend.tests.doc_host import CV_DOCUMENT, document_transport


def test_small_html_strips_details(make_client):
    resp = make_client().get("/es/small/none-existing/html")
    assert resp.status_code == 200
    assert resp.headers["content-language"] == "es-ES"
    assert resp.headers["content-type"].startswith("text/html")
    assert "charset=utf-8" in resp.headers["content-type"]
    assert "<h1>Title</h1>" in resp.text
    assert "secret" not in resp.text


def test_full_html_keeps_details(make_client):
    resp = make_client().get("/en/full/none-existing/html")
    assert resp.status_code == 200
    assert resp.headers["content-language"] == "en-EN"
    assert "<details>secret</details>" in resp.text


def test_unknown_language_falls_back_to_spanish(make_client):
    resp = make_client().get("/fr/full/none-existing/html")
    assert resp.status_code == 200
    assert resp.headers["content-language"] == "es-ES"


def test_fetch_failure_is_502(make_client):
    client = make_client(document_transport(status=404))
    for path in ("/es/small/none-existing/html", "/es/full/none-existing/pdf"):
        resp = client.get(path)
        assert resp.status_code == 502
        assert resp.headers["content-type"].startswith("text/plain")
        assert "Error descargando Markdown" in resp.text
        assert "404" in resp.text
        assert "<html" not in resp.text
        assert not resp.content.startswith(b"%PDF")


def test_pdf_with_transform_template(make_client):
    seen = []

    def spy_renderer(html):
        seen.append(html)
        return render_pdf(html)

    resp = make_client(pdf_renderer=spy_renderer).get("/es/full/x/pdf")
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/pdf"
    assert resp.headers["content-language"] == "es-ES"
    assert resp.headers["content-disposition"] == f'inline; filename="{PDF_FILENAME}"'
    assert resp.content.startswith(b"%PDF")
    assert b"%%EOF" in resp.content[-64:]
    assert "<details open>" in seen[0]
    assert "<header" in seen[0]


def test_render_failure_is_502(make_client):
    def failing_renderer(html):
        raise RenderError("out of memory")

    resp = make_client(pdf_renderer=failing_renderer).get("/en/small/x/pdf")
    assert resp.status_code == 502
    assert resp.text == "Error generando PDF: out of memory"


def test_unknown_detail_level_is_not_a_route(make_client):
    assert make_client().get("/es/medium/x/html").status_code == 404


def test_index_lists_templates_with_links(make_client, templates_dir):
    client = make_client()
    resp = client.get("/")
    assert resp.status_code == 200
    assert "<code>x</code>" in resp.text
    for lang in ("es", "en"):
        for detail in ("small", "full"):
            for output in ("html", "pdf"):
                assert f'href="./{lang}/{detail}/x/{output}"' in resp.text

    (templates_dir / "fresh.css").write_text("", encoding="utf-8")
    assert "<code>fresh</code>" in client.get("/").text

    (templates_dir / "x.css").unlink()
    (templates_dir / "fresh.css").unlink()
    resp = client.get("/")
    assert "<code>x</code>" not in resp.text
    assert "No hay templates" in resp.text


def test_index_escapes_template_names(make_client, templates_dir):
    (templates_dir / "<b>.css").write_text("", encoding="utf-8")
    text = make_client().get("/").text
    assert "<code>&lt;b&gt;</code>" in text
    assert "<code><b></code>" not in text


def test_pdf_of_full_cv_document(make_client):
    transport = document_transport({url: CV_DOCUMENT for url in SOURCE_URLS.values()})
    client = make_client(transport)
    for path in ("/es/full/x/pdf", "/en/small/x/pdf", "/es/full/none-existing/pdf"):
        resp = client.get(path)
        assert resp.status_code == 200, resp.text
        assert resp.headers["content-type"] == "application/pdf"
        assert resp.content.startswith(b"%PDF")
        assert b"%%EOF" in resp.content[-64:]
