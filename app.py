"""
MaxEnt prior service - Flask application factory.

Serves the REST API for default-model evaluation and frequency-grid
construction via registered MaxentService instances.

Usage:
    python app.py              # Development server on http://localhost:5000
    flask run                  # Same, via Flask CLI
"""

import logging

from flask import Flask

from maxent.services import MaxentRegistry
from maxent.services.default_model import DefaultModelService
from maxent.services.grid import FrequencyGridService


def create_registry():
    """Build and populate the service registry."""
    registry = MaxentRegistry()
    registry.register(DefaultModelService())
    registry.register(FrequencyGridService())
    return registry


def create_app():
    """Application factory for the MaxEnt Flask app."""
    app = Flask(__name__)

    registry = create_registry()

    from api.routes import create_api_blueprint
    api = create_api_blueprint(registry)
    app.register_blueprint(api)

    return app


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    app = create_app()
    app.run(debug=True, host="127.0.0.1", port=5000)
