from flask import Flask, jsonify
import os
import logging
from dotenv import load_dotenv
from .routes.countdown import bp as countdown_bp
from .services.countdown import register_fonts, registered_families

load_dotenv()

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


def create_app(test_config=None):
    """Create and configure the app"""
    app = Flask(__name__, static_folder='static')

    if test_config is None:
        app.config.from_mapping(
            RENDER_API_KEY=os.environ.get('RENDER_API_KEY', ''),
            FONT_DIR=os.environ.get('FONT_DIR'),
            SENTRY_DSN=os.environ.get('SENTRY_DSN'),
            ENVIRONMENT=os.environ.get('ENVIRONMENT', 'production'),
            TESTING=False
        )
    else:
        app.config.from_mapping(
            RENDER_API_KEY='',
            FONT_DIR=None,
            SENTRY_DSN=None,
            ENVIRONMENT='testing'
        )
        app.config.update(test_config)

    # An empty key leaves /generate-gif open to anyone who can reach it
    if not app.config['RENDER_API_KEY']:
        logger.warning("RENDER_API_KEY is not set - /generate-gif accepts unauthenticated requests")

    # Fonts are registered once, before serving traffic, and only read afterwards
    register_fonts(app.config['FONT_DIR'] or os.path.join(app.root_path, 'static', 'fonts'))

    @app.route('/', methods=['GET'])
    def index():
        return "OK", 200, {"Content-Type": "text/plain; charset=utf-8"}

    @app.route('/health', methods=['GET'])
    def health_check():
        return jsonify({
            "status": "healthy",
            "version": VERSION,
            "fonts": registered_families()
        }), 200

    # Register blueprints
    app.register_blueprint(countdown_bp)

    return app
