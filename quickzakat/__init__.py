"""Flask application factory for the Quick Zakat Calculator."""
import logging
import os
from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix


logger = logging.getLogger('quickzakat')


def create_app(config: dict | None = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        config: Optional configuration dictionary to override defaults.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__)

    # Trust X-Forwarded-For from reverse proxy
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1)

    from quickzakat.services.config import get_app_config
    settings = get_app_config()

    # Default configuration
    app.config.update(
        SECRET_KEY=os.environ.get('SECRET_KEY', 'dev-secret-key-change-in-production'),
        JSON_SORT_KEYS=False,
        ENABLED_CURRENCIES=settings['enabled_currencies'],
        DEFAULT_TIMEZONE=settings['default_timezone'],
        LOG_LEVEL=settings['log_level'],
    )

    # Override with provided config
    if config:
        app.config.update(config)

    level = logging.getLevelName(str(app.config['LOG_LEVEL']).upper())
    if isinstance(level, int):
        logger.setLevel(level)
        app.logger.setLevel(level)
    else:
        logger.warning(f"Unknown LOG_LEVEL {app.config['LOG_LEVEL']!r}, keeping default")

    # Register CLI commands
    from quickzakat import cli
    cli.register_cli(app)

    # Register blueprints
    from quickzakat.routes.main import main_bp
    from quickzakat.routes.health import health_bp
    from quickzakat.routes.api import api_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(health_bp)
    app.register_blueprint(api_bp, url_prefix='/api/v1')

    logger.debug(f"Currencies offered: {', '.join(app.config['ENABLED_CURRENCIES'])}")

    return app
