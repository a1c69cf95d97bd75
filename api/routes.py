"""
Flask API blueprint for the MaxEnt preprocessing services.

Shared endpoints:
  GET  /api/services   - metadata of every registered service
  GET  /api/health     - liveness check with the package version

Service endpoints (mounted from the registry):
  POST /api/default-model/evaluate
  POST /api/grid
  GET  /api/grid/help
"""

from flask import Blueprint, jsonify

from maxent import __version__


def create_api_blueprint(registry):
    """
    Build the /api blueprint and mount the routes of every registered service.

    Parameters
    ----------
    registry : MaxentRegistry
        Populated service registry.

    Returns
    -------
    flask.Blueprint
    """
    api = Blueprint("api", __name__, url_prefix="/api")

    @api.route("/services", methods=["GET"])
    def list_services():
        """Return metadata for all registered services."""
        return jsonify(registry.list_all())

    @api.route("/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok", "version": __version__})

    for service in registry:
        service.register_routes(api)

    return api
