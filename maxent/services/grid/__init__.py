"""
Frequency Grid Service.

Endpoints:
    POST /api/grid       - build a frequency grid on [0, 1]
    GET  /api/grid/help  - grid choices and their parameter defaults

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import logging

from flask import jsonify, request

from maxent.errors import ConfigError
from maxent.grid import GridMapper, define_parameters, grid_help
from maxent.params import Parameters
from maxent.services import MaxentService

log = logging.getLogger(__name__)

# Largest NFREQ accepted over HTTP
MAX_NFREQ = 100000


class FrequencyGridService(MaxentService):

    id = "grid"
    name = "Frequency Grid"
    description = "Monotone warped grids on [0, 1] for the real-frequency axis"
    route = "/api/grid"

    def validate(self, config):
        """Validate grid parameters; missing keys take the grid defaults."""
        if config is None:
            config = {}
        if not isinstance(config, dict):
            raise ConfigError("Request body must be a JSON object")
        params = Parameters(config)
        define_parameters(params)
        nfreq = params.get_int("NFREQ")
        if nfreq > MAX_NFREQ:
            raise ConfigError(
                "NFREQ={} exceeds the limit of {}".format(nfreq, MAX_NFREQ))
        return {"params": params}

    def compute(self, config):
        """Build the grid."""
        mapper = GridMapper(config["params"])
        return {
            "scheme": mapper.scheme,
            "nfreq": mapper.nfreq,
            "parameter": mapper.parameter,
            "t": mapper.t_array().tolist(),
        }

    def register_routes(self, bp):
        """Mount grid API endpoints."""
        service = self

        @bp.route("/grid", methods=["POST"])
        def build_grid():
            """Build a grid.

            Input JSON:
                NFREQ: int (default 1000)
                FREQUENCY_GRID: str (default "Lorentzian")
                CUT, SPREAD, LOG_MIN: float (scheme parameter)
            """
            data = request.get_json(silent=True)
            try:
                config = service.validate(data)
                result = service.compute(config)
            except ValueError as e:
                log.info("grid request rejected: %s", e)
                return jsonify({"error": str(e)}), 400
            return jsonify(result)

        @bp.route("/grid/help", methods=["GET"])
        def grid_help_text():
            return jsonify({"help": grid_help()})
