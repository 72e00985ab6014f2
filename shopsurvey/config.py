import os
from pathlib import Path
from dotenv import load_dotenv
load_dotenv()


def _env_bool(name, default):
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Read from the environment when instantiated, so a fresh Settings() sees current env."""

    def __init__(self):
        self.PORT = int(os.getenv("PORT", 3000))
        self.HOST = os.getenv("HOST", "0.0.0.0")
        self.CORS_ORIGIN = os.getenv("CORS_ORIGIN", "*")
        # 没配就是 None，管理接口一律 501
        self.ADMIN_KEY = os.getenv("ADMIN_KEY") or None
        self.DB_FILE = os.getenv("DB_FILE", str(Path.cwd() / "data" / "surveys.db"))
        self.TRUST_PROXY = int(os.getenv("TRUST_PROXY", 1))
        self.MAX_CONTENT_LENGTH = int(os.getenv("MAX_CONTENT_LENGTH", 1024 * 1024))
        self.SQLITE_TIMEOUT = float(os.getenv("SQLITE_TIMEOUT", 15))
        self.SQLALCHEMY_TRACK_MODIFICATIONS = False

        # API rate limiting
        self.RATELIMIT_DEFAULT = os.getenv("RATELIMIT_DEFAULT", "120 per 1 minute")
        self.RATELIMIT_STORAGE_URI = os.getenv("RATELIMIT_STORAGE_URI", "memory://")
        self.RATELIMIT_ENABLED = _env_bool("RATELIMIT_ENABLED", True)
        self.RATELIMIT_STRATEGY = "fixed-window"
        self.RATELIMIT_HEADERS_ENABLED = True

        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def parse_origins(value):
    """'*' -> '*', otherwise the comma separated list with blanks dropped."""
    if value is None or value.strip() == "*":
        return "*"
    return [s.strip() for s in value.split(",") if s.strip()]
