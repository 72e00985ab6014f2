import pytest

from shopsurvey import create_app

ADMIN_KEY = "test-admin-key"


@pytest.fixture
def make_app(tmp_path):
    """Factory so a test can build several apps over the same SQLite file."""
    apps = []

    def _make(**overrides):
        cfg = {
            "TESTING": True,
            "DB_FILE": str(tmp_path / "data" / "surveys.db"),
            "ADMIN_KEY": ADMIN_KEY,
            "RATELIMIT_ENABLED": False,
            "CORS_ORIGIN": "*",
            "TRUST_PROXY": 1,
        }
        cfg.update(overrides)
        app = create_app(cfg)
        apps.append(app)
        return app

    yield _make

    for app in apps:
        with app.app_context():
            app.extensions["survey_store"].close()


@pytest.fixture
def app(make_app):
    return make_app()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    with app.app_context():
        yield app.extensions["survey_store"]


@pytest.fixture
def admin_headers():
    return {"x-admin-key": ADMIN_KEY}
