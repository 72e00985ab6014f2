# shopsurvey/__init__.py
import logging
import time
from pathlib import Path

from flask import Flask, g, jsonify, request
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from werkzeug.middleware.proxy_fix import ProxyFix

from .config import Settings, parse_origins
from .extensions import db
from .store import SurveyStore
from .routes.public import bp as public_bp
from .routes.admin import bp as admin_bp

logger = logging.getLogger(__name__)


def _register_error_handlers(app):
    # 所有错误都返回 JSON，避免返回 HTML
    @app.errorhandler(404)
    @app.errorhandler(405)
    def _404(e):
        return jsonify({"error": "Not found"}), 404

    @app.errorhandler(413)
    def _413(e):
        return jsonify({"error": "Payload too large"}), 413

    @app.errorhandler(429)
    def _429(e):
        return jsonify({"error": "Too many requests"}), 429

    @app.errorhandler(500)
    def _500(e):
        logger.error(f"Unhandled error on {request.method} {request.path}: {e}")
        return jsonify({"error": "Internal server error"}), 500


def _register_access_log(app):
    @app.before_request
    def _start_timer():
        g.started_at = time.perf_counter()

    @app.after_request
    def _log_request(resp):
        started = g.get("started_at")
        ms = (time.perf_counter() - started) * 1000 if started is not None else 0.0
        length = resp.content_length if resp.content_length is not None else "-"
        logger.info(f"{request.method} {request.path} {resp.status_code} {length} - {ms:.3f} ms")
        return resp


def create_app(config=None):
    app = Flask(__name__)
    app.config.from_object(Settings())
    if config:
        app.config.update(config)
    app.url_map.strict_slashes = False  # 避免 308/301 重定向
    app.json.ensure_ascii = False
    app.json.sort_keys = False

    # 数据目录不存在就建
    db_file = Path(app.config["DB_FILE"]).resolve()
    db_file.parent.mkdir(parents=True, exist_ok=True)
    app.config.setdefault("SQLALCHEMY_DATABASE_URI", f"sqlite:///{db_file}")
    app.config.setdefault(
        "SQLALCHEMY_ENGINE_OPTIONS",
        {"connect_args": {"timeout": app.config["SQLITE_TIMEOUT"], "check_same_thread": False}},
    )

    # 反向代理后面取真实 IP；0 表示不信任 X-Forwarded-For
    hops = int(app.config.get("TRUST_PROXY") or 0)
    if hops > 0:
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=hops)

    CORS(app, resources={r"/api/*": {"origins": parse_origins(app.config["CORS_ORIGIN"])}})
    Limiter(get_remote_address, app=app)

    db.init_app(app)
    store = SurveyStore(db)
    store.init_app(app)

    app.register_blueprint(public_bp, url_prefix="/api")
    app.register_blueprint(admin_bp, url_prefix="/api")

    _register_error_handlers(app)
    _register_access_log(app)
    return app
