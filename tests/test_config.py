from shopsurvey.config import Settings, parse_origins


def test_settings_defaults(monkeypatch):
    for name in ("PORT", "CORS_ORIGIN", "ADMIN_KEY", "DB_FILE", "TRUST_PROXY", "RATELIMIT_DEFAULT", "RATELIMIT_ENABLED"):
        monkeypatch.delenv(name, raising=False)
    s = Settings()
    assert s.PORT == 3000
    assert s.CORS_ORIGIN == "*"
    assert s.ADMIN_KEY is None
    assert s.DB_FILE.endswith("surveys.db")
    assert s.RATELIMIT_DEFAULT == "120 per 1 minute"
    assert s.RATELIMIT_ENABLED is True
    assert s.MAX_CONTENT_LENGTH == 1024 * 1024


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("ADMIN_KEY", "s3cret")
    monkeypatch.setenv("RATELIMIT_ENABLED", "false")
    monkeypatch.setenv("TRUST_PROXY", "0")
    s = Settings()
    assert s.PORT == 8080
    assert s.ADMIN_KEY == "s3cret"
    assert s.RATELIMIT_ENABLED is False
    assert s.TRUST_PROXY == 0


def test_empty_admin_key_means_not_configured(monkeypatch):
    monkeypatch.setenv("ADMIN_KEY", "")
    assert Settings().ADMIN_KEY is None


def test_parse_origins():
    assert parse_origins("*") == "*"
    assert parse_origins(" * ") == "*"
    assert parse_origins("https://a.example, https://b.example,") == ["https://a.example", "https://b.example"]


def test_data_directory_is_created(make_app, tmp_path):
    target = tmp_path / "nested" / "dir" / "s.db"
    make_app(DB_FILE=str(target))
    assert target.parent.is_dir()
    assert target.exists()
