import pytest
from fastapi.testclient import TestClient

from doorsite.config import Settings
from doorsite.errors import DeliveryError
from doorsite.main import create_app


class FakeMailer:
    configured = True

    def __init__(self, error=None):
        self.error = error
        self.sent = []

    def send(self, email):
        if self.error:
            raise self.error
        self.sent.append(email)
        return {"id": "test-id"}


@pytest.fixture
def site(tmp_path):
    pages = {
        "index.html": "<h1>home</h1>",
        "blog/index.html": "<h1>blog index</h1>",
        "blog/spring-repair/index.html": "<h1>spring repair post</h1>",
        "services/openers/index.html": "<h1>openers</h1>",
        "garage-door-service-areas-kansas-city/index.html": "<h1>service areas</h1>",
        "css/styles.css": "body { color: red; }",
    }
    for name, body in pages.items():
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(body)
    return tmp_path


@pytest.fixture
def settings(site):
    return Settings(resend_api_key="re_test", site_dir=str(site))


@pytest.fixture
def mailer():
    return FakeMailer()


@pytest.fixture
def client(settings, mailer):
    return TestClient(create_app(settings=settings, mailer=mailer))


@pytest.fixture
def failing_client(settings):
    return TestClient(create_app(settings=settings, mailer=FakeMailer(DeliveryError("boom"))))


@pytest.fixture
def make_client(settings):
    def make(mailer=None, **overrides):
        app_settings = settings.model_copy(update=overrides) if overrides else settings
        return TestClient(create_app(settings=app_settings, mailer=mailer))
    return make


@pytest.fixture
def fake_mailer():
    return FakeMailer
