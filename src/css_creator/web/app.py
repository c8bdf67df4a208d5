from __future__ import annotations

import logging

from flask import Flask

from css_creator.config import CssCreatorConfig
from css_creator.page import render_error_page

logger = logging.getLogger(__name__)


def create_app(
    config: CssCreatorConfig | None = None,
    flask_config: dict | None = None,
) -> Flask:
    """Create and configure the Flask app.

    Property values from requests are untrusted, so the default config turns
    property validation on.
    """
    app = Flask(__name__)
    app.config.update(flask_config or {})

    app.extensions["css_creator_config"] = config or CssCreatorConfig(validate_properties=True)

    from css_creator.web.routes.api import api_bp
    from css_creator.web.routes.pages import pages_bp

    app.register_blueprint(pages_bp)
    app.register_blueprint(api_bp, url_prefix="/api")

    @app.errorhandler(500)
    def internal_error(error):
        """Render unhandled failures as the error page."""
        original = getattr(error, "original_exception", None) or error
        logger.exception("Request failed: %s", original, exc_info=original)
        return render_error_page(original, show_trace=app.debug), 500

    return app
