from flask import Flask
import logging

logger = logging.getLogger(__name__)

GREETING = "Hello from express server."


def create_app():
    """Create the Flask application with its single route."""
    app = Flask(__name__)

    @app.route('/', methods=['GET'])
    def index():
        logger.debug("Serving greeting")
        return GREETING

    # Every other path falls through to Flask's default 404 handling
    return app
