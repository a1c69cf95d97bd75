"""
Default Model Service.

Builds a default model from request parameters and evaluates it at the
requested points.

Endpoints:
    POST /api/default-model/evaluate - D(omega), omega(x) and x(t)

Tabulated models must be sent inline as a "table" of [omega, value]
pairs; the HTTP layer never reads model files from disk.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import logging
import math

from flask import jsonify, request

from maxent.default_model import (
    FLAT,
    MODEL_KEY,
    build_default_model,
    define_parameters,
)
from maxent.errors import ConfigError
from maxent.models import ANALYTIC_MODELS
from maxent.params import Parameters
from maxent.services import MaxentService
from maxent.tabulated import TabulatedFunction

log = logging.getLogger(__name__)

# Cap on the number of query points per array in one request
MAX_QUERY_POINTS = 10000


def _number_list(config, key):
    """Return config[key] as a list of floats (empty if absent)."""
    raw = config.get(key, [])
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ConfigError("'{}' must be a list of numbers".format(key))
    if len(raw) > MAX_QUERY_POINTS:
        raise ConfigError(
            "'{}' has {} points; at most {} allowed".format(
                key, len(raw), MAX_QUERY_POINTS))
    out = []
    for i, val in enumerate(raw):
        if isinstance(val, bool):
            raise ConfigError("{}[{}] must be numeric".format(key, i))
        try:
            num = float(val)
        except (TypeError, ValueError):
            raise ConfigError("{}[{}] must be numeric".format(key, i))
        if not math.isfinite(num):
            raise ConfigError("{}[{}] must be finite, got {!r}".format(key, i, val))
        out.append(num)
    return out


def _parse_table(raw):
    """Build a TabulatedFunction from a list of [omega, value] pairs."""
    if not isinstance(raw, list):
        raise ConfigError("'table' must be a list of [omega, value] pairs")
    xs = []
    ys = []
    for i, row in enumerate(raw):
        if not isinstance(row, (list, tuple)) or len(row) < 2:
            raise ConfigError("table[{}] must be an [omega, value] pair".format(i))
        try:
            xs.append(float(row[0]))
            ys.append(float(row[1]))
        except (TypeError, ValueError):
            raise ConfigError("table[{}] must hold two numbers".format(i))
    return TabulatedFunction(xs, ys)


class DefaultModelService(MaxentService):

    id = "default_model"
    name = "Default Model"
    description = "Prior density, inverse CDF and table-position CDF"
    route = "/api/default-model"

    def validate(self, config):
        """Validate the request payload and build the parameter store."""
        if not config or not isinstance(config, dict):
            raise ConfigError("Request body must be JSON")
        params = Parameters(config.get("params") or {})
        define_parameters(params)

        selector = params.get(MODEL_KEY)
        if not isinstance(selector, str) or not selector:
            raise ConfigError(
                "parameter '{}' must be a model name, got {!r}".format(MODEL_KEY, selector))
        table = None
        if selector != FLAT and selector not in ANALYTIC_MODELS:
            if "table" not in config:
                raise ConfigError(
                    "tabulated default models must be sent inline as 'table'")
            table = _parse_table(config["table"])

        return {
            "params": params,
            "table": table,
            "omega": _number_list(config, "omega"),
            "x": _number_list(config, "x"),
            "t": _number_list(config, "t"),
        }

    def compute(self, config):
        """Build the model and evaluate every requested point."""
        model = build_default_model(config["params"], table=config["table"])
        return {
            "model": model.name,
            "omega_min": model.omega_min,
            "omega_max": model.omega_max,
            "D": [model.D(w) for w in config["omega"]],
            "omega": [model.omega(x) for x in config["x"]],
            "x": [model.x(t) for t in config["t"]],
        }

    def register_routes(self, bp):
        """Mount default-model API endpoints."""
        service = self

        @bp.route("/default-model/evaluate", methods=["POST"])
        def default_model_evaluate():
            """Evaluate a default model.

            Input JSON:
                params: {OMEGA_MAX, OMEGA_MIN, DEFAULT_MODEL, SIGMA, ...}
                table: [[omega, value], ...] (tabulated models only)
                omega: [...]  points for D(omega)
                x: [...]      points in [0, 1] for omega(x)
                t: [...]      points in [0, 1] for x(t)
            """
            data = request.get_json(silent=True)
            try:
                config = service.validate(data)
                result = service.compute(config)
            except ValueError as e:
                log.info("default-model request rejected: %s", e)
                return jsonify({"error": str(e)}), 400
            return jsonify(result)
