from fastapi.testclient import TestClient

from resume_check.core.cors import origin_allowed
from resume_check.main import create_app
from tests.helpers import FakeAIClient, make_settings

ALLOWED = "http://localhost:5173"


def _client() -> TestClient:
    app = create_app(settings=make_settings(cors_allowed_origins=(ALLOWED,)), ai_client=FakeAIClient())
    return TestClient(app)


def test_request_from_unknown_origin_is_rejected() -> None:
    response = _client().get("/", headers={"Origin": "https://evil.example.com"})

    assert response.status_code == 403
    assert response.json() == {"message": "Not allowed by CORS"}
    assert "access-control-allow-origin" not in response.headers


def test_request_from_allowed_origin_gets_cors_headers() -> None:
    response = _client().get("/", headers={"Origin": ALLOWED})

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == ALLOWED
    assert response.headers["access-control-allow-credentials"] == "true"


def test_request_without_origin_passes() -> None:
    response = _client().get("/")

    assert response.status_code == 200


def test_preflight_from_allowed_origin() -> None:
    response = _client().options(
        "/analyze",
        headers={"Origin": ALLOWED, "Access-Control-Request-Method": "POST"},
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == ALLOWED


def test_origin_allowed_ignores_trailing_slash() -> None:
    assert origin_allowed(None, (ALLOWED,))
    assert origin_allowed(ALLOWED + "/", (ALLOWED,))
    assert not origin_allowed("http://localhost:3000", (ALLOWED,))
