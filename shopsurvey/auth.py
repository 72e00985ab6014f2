import hmac
import logging
from functools import wraps

from flask import current_app, jsonify, request

logger = logging.getLogger(__name__)


def require_admin(view):
    """Gate a view behind the shared x-admin-key header.

    501 when the server has no ADMIN_KEY (misconfigured), 401 when the header is
    missing or wrong.
    """
    @wraps(view)
    def wrapper(*args, **kwargs):
        admin_key = current_app.config.get("ADMIN_KEY")
        if not admin_key:
            return jsonify({"error": "ADMIN_KEY not set on server"}), 501
        key = request.headers.get("x-admin-key")
        if key is None or not hmac.compare_digest(key.encode(), admin_key.encode()):
            logger.warning(f"Rejected admin request to {request.path} from {request.remote_addr}")
            return jsonify({"error": "Unauthorized"}), 401
        return view(*args, **kwargs)
    return wrapper
