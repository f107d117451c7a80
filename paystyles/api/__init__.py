"""
Public Styles API Blueprint

Read-side endpoints the payment page (or a page builder) calls:
- Widget appearance config for a form
- Config filter for a rendered widget
- Page CSS for a set of rendered forms
- Theme preset catalog

All endpoints return JSON errors and are open to cross-origin callers.
"""
from flask import Blueprint
from flask_cors import CORS

api_bp = Blueprint('api', __name__)

from paystyles.api.errors import register_error_handlers  # noqa: E402
from paystyles.api import routes  # noqa: F401, E402


def init_api(app):
    """
    Initialize the API blueprint with CORS and error handlers.

    Args:
        app: Flask application instance
    """
    # Blueprint objects are module singletons; guard against re-registering
    # handlers when create_app() is called multiple times in tests.
    if not getattr(api_bp, "_ps_error_handlers_registered", False):
        register_error_handlers(api_bp)
        api_bp._ps_error_handlers_registered = True

    app.register_blueprint(api_bp, url_prefix='/api')

    # Read-only endpoints with no credentials; any origin may embed them.
    # CORS binds to app routes so repeated app factory calls stay independent.
    CORS(
        app,
        resources={
            r"/api/*": {
                "origins": "*",
                "methods": ['GET', 'POST', 'OPTIONS'],
                "allow_headers": ['Content-Type', 'X-Requested-With'],
                "max_age": 86400,
            }
        },
        supports_credentials=False,
        send_wildcard=True,
    )

    app.logger.info("Styles API initialized")


__all__ = ['init_api', 'api_bp']
