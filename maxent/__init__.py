"""
maxent: default models and frequency grids for maximum-entropy
analytic continuation.

    from maxent import Parameters, build_default_model, GridMapper

    params = Parameters(OMEGA_MAX=10.0, DEFAULT_MODEL="gaussian", SIGMA=2.0)
    model = build_default_model(params)
    model.omega(0.5)

    grid = GridMapper(Parameters(NFREQ=200, FREQUENCY_GRID="quadratic"))
    grid.t_array()

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

__version__ = "0.1.0"

from maxent.default_model import (
    DefaultModel,
    DefaultModelEngine,
    FlatDefaultModel,
    build_default_model,
)
from maxent.errors import ConfigError, DataError, DomainError, MaxentError
from maxent.grid import GridMapper, grid_help
from maxent.params import Parameters
from maxent.tabulated import TabulatedFunction

__all__ = [
    "__version__",
    "ConfigError",
    "DataError",
    "DefaultModel",
    "DefaultModelEngine",
    "DomainError",
    "FlatDefaultModel",
    "GridMapper",
    "MaxentError",
    "Parameters",
    "TabulatedFunction",
    "build_default_model",
    "grid_help",
]
