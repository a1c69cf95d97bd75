"""
Default models: prior densities over the real frequency axis.

A default model exposes three operations on the support
[omega_min, omega_max]:

    D(omega)  - prior density at frequency omega
    omega(x)  - inverse CDF: frequency at which the cumulative weight is x
    x(t)      - cumulative weight at fractional table position t

Classes:
    DefaultModel        - shared base holding the frequency bounds
    FlatDefaultModel    - uniform density, closed-form omega(x) and x(t)
    DefaultModelEngine  - any density callable, numerical CDF table

build_default_model() is the construction entry point: it reads the
model selector from a Parameters store, builds the matching density
(analytic model or tabulated file) and wraps it in an engine.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import logging
import math

import numpy as np
from scipy.integrate import cumulative_trapezoid

from maxent.errors import ConfigError, DomainError
from maxent.models import ANALYTIC_MODELS
from maxent.tabulated import TabulatedFunction

log = logging.getLogger(__name__)

# Resolution of the cumulative table built by DefaultModelEngine.
NTAB = 5001

MODEL_KEY = "DEFAULT_MODEL"
FLAT = "flat"


def define_parameters(params, name=MODEL_KEY):
    """Register the default-model parameter defaults on ``params``."""
    params.define(name, FLAT, "default model name or path to a tabulated model")


def omega_bounds(params):
    """
    Read the frequency support from ``params``.

    OMEGA_MAX is required. OMEGA_MIN defaults to -OMEGA_MAX; set it to
    zero explicitly for bosonic continuations.

    Returns
    -------
    (float, float)
        (omega_min, omega_max)
    """
    omega_max = params.get_float("OMEGA_MAX")
    omega_min = params.get_float("OMEGA_MIN", -omega_max)
    return omega_min, omega_max


def _check_unit_interval(value, name):
    if not 0.0 <= value <= 1.0:
        raise DomainError(
            "parameter {} is out of bounds: {!r} not in [0, 1]".format(name, value))


class DefaultModel:
    """
    Base class for default models on [omega_min, omega_max].

    Subclasses implement D(), omega() and x().
    """

    name = ""

    def __init__(self, omega_min, omega_max):
        omega_min = float(omega_min)
        omega_max = float(omega_max)
        if not (math.isfinite(omega_min) and math.isfinite(omega_max)):
            raise ConfigError("OMEGA_MIN and OMEGA_MAX must be finite")
        if omega_max <= omega_min:
            raise ConfigError(
                "OMEGA_MAX ({:g}) must be larger than OMEGA_MIN ({:g})".format(
                    omega_max, omega_min))
        self.omega_min = omega_min
        self.omega_max = omega_max

    def D(self, omega):
        raise NotImplementedError

    def omega(self, x):
        raise NotImplementedError

    def x(self, t):
        raise NotImplementedError

    def __repr__(self):
        return "{}(name={!r}, omega_min={:g}, omega_max={:g})".format(
            type(self).__name__, self.name, self.omega_min, self.omega_max)


class FlatDefaultModel(DefaultModel):
    """Uniform prior: every operation has a closed form."""

    name = FLAT

    def D(self, omega):
        return 1.0 / (self.omega_max - self.omega_min)

    def omega(self, x):
        _check_unit_interval(x, "x")
        return x * (self.omega_max - self.omega_min) + self.omega_min

    def x(self, t):
        _check_unit_interval(t, "t")
        return t


class DefaultModelEngine(DefaultModel):
    """
    Default model backed by an arbitrary density callable.

    At construction the density is integrated with the trapezoidal rule
    on ``ntab`` equidistant points and the running integral is scaled to
    a cumulative distribution table running from 0 to 1. The table is
    never modified afterwards.

    Parameters
    ----------
    model : callable
        ``model(omega) -> float``, a non-negative density.
    omega_min, omega_max : float
        Support of the density.
    ntab : int, optional
        Number of table points (default 5001).

    Raises
    ------
    ConfigError
        If the bounds are invalid, the density is negative or not finite
        on the table, or its integral is not positive.
    """

    def __init__(self, model, omega_min, omega_max, ntab=NTAB):
        DefaultModel.__init__(self, omega_min, omega_max)
        if not callable(model):
            raise ConfigError("default model density must be callable")
        ntab = int(ntab)
        if ntab < 2:
            raise ConfigError("ntab must be at least 2, got {}".format(ntab))
        self.model = model
        self.ntab = ntab
        self.delta_omega = (self.omega_max - self.omega_min) / (ntab - 1)

        cdf = self._running_integral()
        total = float(cdf[-1])
        if not (math.isfinite(total) and total > 0):
            raise ConfigError(
                "default model has no positive weight on [{:g}, {:g}]".format(
                    self.omega_min, self.omega_max))
        cdf /= total
        cdf.flags.writeable = False
        self._cdf = cdf
        log.debug("built %d-point CDF table for %r (norm %g)",
                  ntab, model, total)

    def _running_integral(self):
        """Trapezoidal integral of the density from omega_min up to each table point."""
        grid = np.linspace(self.omega_min, self.omega_max, self.ntab)
        values = np.array([float(self.model(w)) for w in grid])
        if not np.all(np.isfinite(values)):
            raise ConfigError("default model density is not finite on the grid")
        if np.any(values < 0):
            raise ConfigError("default model density must be non-negative")
        return cumulative_trapezoid(values, dx=self.delta_omega, initial=0.0)

    def norm(self):
        """
        Unnormalised integral of the density over [omega_min, omega_max].

        Recomputed from the model; the stored table is left untouched.
        """
        return float(self._running_integral()[-1])

    @property
    def cdf_table(self):
        """Read-only cumulative table, cdf_table[0] == 0, cdf_table[-1] == 1."""
        return self._cdf

    def table_omega(self, index):
        """Frequency of table entry ``index``."""
        return self.omega_min + index * self.delta_omega

    def D(self, omega):
        """Density at ``omega``, evaluated directly on the model."""
        return float(self.model(omega))

    def omega(self, x):
        """
        Inverse CDF: frequency at which the cumulative weight equals ``x``.

        Raises
        ------
        DomainError
            If ``x`` lies outside [0, 1].
        """
        _check_unit_interval(x, "x")
        cdf = self._cdf
        # first entry strictly greater than x; x == 1 runs off the end
        idx = int(np.searchsorted(cdf, x, side="right"))
        if idx == self.ntab:
            idx = self.ntab - 1
        om1 = self.table_omega(idx - 1)
        om2 = self.table_omega(idx)
        x1 = cdf[idx - 1]
        x2 = cdf[idx]
        if x2 == x1:
            # zero-density tail at x == 1
            return om2
        return float(om2 - (om2 - om1) / (x2 - x1) * (x2 - x))

    def x(self, t):
        """
        Cumulative weight at fractional table position ``t``.

        ``t`` indexes the table uniformly by position, so this is not the
        inverse of omega().

        Raises
        ------
        DomainError
            If ``t`` lies outside [0, 1].
        """
        _check_unit_interval(t, "t")
        od = int(t * (self.ntab - 1))
        if od == self.ntab - 1:
            return 1.0
        x1 = self._cdf[od]
        x2 = self._cdf[od + 1]
        return float(-(x2 - x1) * (od + 1 - t * self.ntab) + x2)


def build_default_model(params, name=MODEL_KEY, table=None, ntab=NTAB):
    """
    Construct the default model selected by ``params[name]``.

    Recognised selectors: "flat" (default), "gaussian", "twogaussians",
    "shifted gaussian", "double gaussian", "general double gaussian",
    "linear rise exp decay", "quadratic rise exp decay". Any other value
    is the path of a tabulated model file.

    Parameters
    ----------
    params : Parameters
        Parameter store with OMEGA_MAX (and optionally OMEGA_MIN) plus
        the parameters of the selected model.
    name : str, optional
        Key holding the model selector (default "DEFAULT_MODEL").
    table : TabulatedFunction, optional
        Tabulated density to use instead of reading the selector as a
        file path.
    ntab : int, optional
        Resolution of the CDF table.

    Returns
    -------
    DefaultModel

    Raises
    ------
    ConfigError
        If a parameter is missing or invalid, or the model file cannot
        be opened.
    """
    selector = params.get(name, FLAT)
    if not isinstance(selector, str) or not selector:
        raise ConfigError("parameter '{}' must be a model name or file path".format(name))
    omega_min, omega_max = omega_bounds(params)

    if selector == FLAT:
        log.info("Using flat default model")
        return FlatDefaultModel(omega_min, omega_max)

    model_cls = ANALYTIC_MODELS.get(selector)
    if model_cls is not None:
        log.info("Using %s default model", model_cls.label)
        engine = DefaultModelEngine(model_cls(params), omega_min, omega_max, ntab)
        engine.name = selector
        return engine

    if table is None:
        log.info("Using tabulated default model from %s", selector)
        table = TabulatedFunction.load(selector, omega_min, omega_max)
    else:
        log.info("Using tabulated default model %s", selector)
        table.check_bounds(omega_min, omega_max, source=selector)
    engine = DefaultModelEngine(table, omega_min, omega_max, ntab)
    engine.name = selector
    return engine
