"""Tests for GET/POST /create."""

import itertools
import json

import httpx
import pytest
from conftest import FakeUpstream
from fastapi.testclient import TestClient
from frontend.app.models.forms import CREATE_FALLBACK_MESSAGE, REQUIRED_FIELD_MESSAGES

VALID_FORM = {
    "titulo": "Hello world",
    "contenido": "Some content",
    "autor": "Ana",
    "portada": "https://example.com/cover.jpg",
}

FORM_TO_ERROR_FIELD = {
    "titulo": "title",
    "contenido": "content",
    "autor": "author",
    "portada": "cover",
}


def _error_fields(html: str) -> set[str]:
    return {
        field for field in FORM_TO_ERROR_FIELD.values()
        if f'data-field="{field}"' in html
    }


# ---------------------------------------------------------------------------
# Pristine state
# ---------------------------------------------------------------------------


def test_get_renders_pristine_form(client: TestClient) -> None:
    resp = client.get("/create")
    assert resp.status_code == 200
    assert 'data-state="pristine"' in resp.text
    assert 'name="titulo"' in resp.text
    assert 'name="portada"' in resp.text
    assert _error_fields(resp.text) == set()


# ---------------------------------------------------------------------------
# Local validation: no upstream call
# ---------------------------------------------------------------------------

_MISSING_COMBOS = [
    combo
    for size in range(1, 5)
    for combo in itertools.combinations(VALID_FORM, size)
]


@pytest.mark.parametrize("missing", _MISSING_COMBOS, ids=lambda c: "+".join(c))
def test_missing_fields_render_matching_errors(
    client: TestClient, upstream: FakeUpstream, missing: tuple[str, ...],
) -> None:
    form = {k: ("" if k in missing else v) for k, v in VALID_FORM.items()}
    resp = client.post("/create", data=form)

    assert resp.status_code == 200
    assert 'data-state="errored"' in resp.text
    expected = {FORM_TO_ERROR_FIELD[name] for name in missing}
    assert _error_fields(resp.text) == expected
    for field in expected:
        assert REQUIRED_FIELD_MESSAGES[field] in resp.text
    assert upstream.call_count == 0


def test_whitespace_only_counts_as_missing(client: TestClient, upstream: FakeUpstream) -> None:
    resp = client.post("/create", data={**VALID_FORM, "autor": "   "})
    assert _error_fields(resp.text) == {"author"}
    assert upstream.call_count == 0


def test_absent_form_keys_count_as_missing(client: TestClient, upstream: FakeUpstream) -> None:
    resp = client.post("/create", data={"titulo": "Only a title"})
    assert _error_fields(resp.text) == {"content", "author", "cover"}
    assert upstream.call_count == 0


# ---------------------------------------------------------------------------
# Success
# ---------------------------------------------------------------------------


def test_success_redirects_home(client: TestClient, upstream: FakeUpstream) -> None:
    upstream.on("POST", "/api/posts", status_code=201, json={"data": {"_id": "1"}})
    resp = client.post("/create", data=VALID_FORM)

    assert resp.status_code == 302
    assert resp.headers["location"] == "/"
    assert upstream.call_count == 1


def test_success_forwards_json_payload(client: TestClient, upstream: FakeUpstream) -> None:
    upstream.on("POST", "/api/posts", status_code=201)
    client.post("/create", data={**VALID_FORM, "titulo": "  Padded  "})

    sent = upstream.requests[0]
    assert sent.method == "POST"
    assert sent.headers["content-type"] == "application/json"
    assert json.loads(sent.content) == {**VALID_FORM, "titulo": "Padded"}


# ---------------------------------------------------------------------------
# Upstream failures
# ---------------------------------------------------------------------------


def test_upstream_validation_errors_mapped_to_fields(
    client: TestClient, upstream: FakeUpstream,
) -> None:
    upstream.on(
        "POST", "/api/posts", status_code=400,
        json={"error": {"details": [
            {"path": "title", "message": "Title too short"},
            {"path": "portada", "message": "Cover must be a URL"},
            {"path": "slug", "message": "ignored"},
        ]}},
    )
    resp = client.post("/create", data=VALID_FORM)

    assert resp.status_code == 200
    assert _error_fields(resp.text) == {"title", "cover"}
    assert "Title too short" in resp.text
    assert "Cover must be a URL" in resp.text
    assert "ignored" not in resp.text


def test_upstream_server_error_uses_fallback(client: TestClient, upstream: FakeUpstream) -> None:
    upstream.on("POST", "/api/posts", status_code=500, text="Internal Server Error")
    resp = client.post("/create", data=VALID_FORM)

    assert resp.status_code == 200
    assert _error_fields(resp.text) == {"title", "content", "author", "cover"}
    assert resp.text.count(CREATE_FALLBACK_MESSAGE) == 4


def test_network_failure_uses_fallback(client: TestClient, upstream: FakeUpstream) -> None:
    upstream.on("POST", "/api/posts", exc=httpx.ConnectError)
    resp = client.post("/create", data=VALID_FORM)

    assert resp.status_code == 200
    assert resp.text.count(CREATE_FALLBACK_MESSAGE) == 4


def test_error_messages_are_escaped(client: TestClient, upstream: FakeUpstream) -> None:
    upstream.on(
        "POST", "/api/posts", status_code=422,
        json={"error": {"details": [{"path": "title", "message": "<script>x</script>"}]}},
    )
    resp = client.post("/create", data=VALID_FORM)
    assert "<script>x</script>" not in resp.text
    assert "&lt;script&gt;" in resp.text
