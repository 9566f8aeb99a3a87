import pytest

from email_classifier.schemas import ClassificationResult

PRODUCTIVE_PAYLOAD = {
    "success": True,
    "classification": {"category": "Produtivo", "is_productive": True},
    "response": {"generated": True, "text": "Obrigado pelo contato"},
}


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code=200, payload=None, reason="OK"):
        self.status_code = status_code
        self._payload = payload
        self.reason = reason

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


@pytest.fixture
def productive_payload():
    return dict(PRODUCTIVE_PAYLOAD)


@pytest.fixture
def productive_result():
    return ClassificationResult.model_validate(PRODUCTIVE_PAYLOAD)


@pytest.fixture
def fake_post(monkeypatch):
    """Replaces requests.post; records calls and answers with ``fake_post.response``."""
    calls = []

    def _post(url, **kwargs):
        calls.append({"url": url, **kwargs})
        if isinstance(_post.response, Exception):
            raise _post.response
        return _post.response

    _post.calls = calls
    _post.response = FakeResponse(payload=PRODUCTIVE_PAYLOAD)
    monkeypatch.setattr("email_classifier.services.classifier_client.requests.post", _post)
    return _post
