"""
Frequency grids: monotone maps from grid index to the unit interval.

GridMapper builds nfreq+1 points t[0] = 0 < t[1] < ... < t[nfreq] = 1.
A later stage maps t to physical frequency; the warp chosen here decides
where the real-frequency points are dense.

Schemes (FREQUENCY_GRID, case-insensitive):

    linear           t[i] = i / nfreq
    log              exponential spacing out from t = 0.5 (LOG_MIN)
    quadratic        parabolic step sizes, SPREAD = largest/smallest step
    lorentzian       tangent warp, dense around t = 0.5 (CUT)
    half lorentzian  upper half of the tangent warp, dense near t = 0 (CUT)

See grid_help() for the parameter defaults.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import logging
import math

import numpy as np

from maxent.errors import ConfigError, DomainError

log = logging.getLogger(__name__)

# Parameter defaults: key -> (default, description)
GRID_DEFAULTS = {
    "CUT": (0.01, "cut for lorentzian grids"),
    "SPREAD": (4.0, "spread for quadratic grid"),
    "LOG_MIN": (1.0e-4, "log_min for log grid"),
    "FREQUENCY_GRID": ("Lorentzian", "Type of frequency grid"),
    "NFREQ": (1000, "Number of A(omega) real frequencies"),
}

# Scheme name -> parameter key it reads (None for linear)
SCHEMES = {
    "lorentzian": "CUT",
    "half lorentzian": "CUT",
    "quadratic": "SPREAD",
    "log": "LOG_MIN",
    "linear": None,
}


def define_parameters(params):
    """Register the frequency-grid parameter defaults on ``params``."""
    for key, (default, description) in GRID_DEFAULTS.items():
        params.define(key, default, description)


def grid_help():
    """Return the grid-choice help table as text."""
    lines = [
        "Grid help - real frequency omega grid choices for A(omega)",
        "",
        "{:<15}\t{}".format("Grid Name", "option=default"),
        "{:<15}\t{}".format("=========", "=============="),
    ]
    for scheme, key in SCHEMES.items():
        if key is None:
            option = "---"
        else:
            option = "{}={:g}".format(key, GRID_DEFAULTS[key][0])
        lines.append("{:<15}\t{}".format(scheme, option))
    return "\n".join(lines)


def linear_grid(nfreq):
    return np.arange(nfreq + 1) / nfreq


def log_grid(nfreq, t_min):
    """
    Exponential spacing symmetric around t = 0.5.

    The innermost points sit t_min away from the centre; the outermost
    reach 0 and 1. For odd nfreq the upper half holds one point more
    than the lower half and uses its own exponential scale so that it
    also ends at 1.
    """
    if nfreq < 4:
        raise ConfigError("log grid needs NFREQ >= 4, got {}".format(nfreq))
    if not 0.0 < t_min < 0.5:
        raise ConfigError(
            "LOG_MIN must lie strictly between 0 and 0.5, got {}".format(t_min))
    half = nfreq // 2
    t = np.empty(nfreq + 1)
    t[half] = 0.5

    steps = np.arange(half)
    scale = math.log(0.5 / t_min) / (half - 1)
    offsets = t_min * np.exp(steps * scale)
    t[half - 1::-1] = 0.5 - offsets
    if nfreq % 2 == 0:
        t[half + 1:] = 0.5 + offsets
    else:
        upper = np.arange(half + 1)
        upper_scale = math.log(0.5 / t_min) / half
        t[half + 1:] = 0.5 + t_min * np.exp(upper * upper_scale)

    t[0] = 0.0
    t[-1] = 1.0
    return t


def quadratic_grid(nfreq, spread):
    """
    Step sizes following a parabola: largest at the ends, smallest in
    the middle, ratio ``spread``.
    """
    if spread < 1:
        raise ConfigError("the parameter SPREAD must be greater than 1")
    if nfreq < 3:
        raise ConfigError("quadratic grid needs NFREQ >= 3, got {}".format(nfreq))
    a = np.arange(nfreq) / (nfreq - 1)
    factor = 4 * (spread - 1) * (a * a - a) + spread
    factor /= (nfreq - 1) / (3.0 * (nfreq - 2)) * ((nfreq - 1) * (2 + spread) - 4 + spread)
    cumulative = np.cumsum(factor)
    t = np.empty(nfreq + 1)
    t[0] = 0.0
    t[1:] = cumulative / cumulative[-1]
    return t


def _check_cut(cut):
    if not 0.0 < cut < 0.5:
        raise ConfigError("CUT must lie strictly between 0 and 0.5, got {}".format(cut))


def _rescale(temp):
    return (temp - temp[0]) / (temp[-1] - temp[0])


def lorentzian_grid(nfreq, cut):
    """Tangent warp over the full interval: points cluster around t = 0.5."""
    _check_cut(cut)
    i = np.arange(nfreq + 1)
    temp = np.tan(math.pi * (i / nfreq * (1.0 - 2 * cut) + cut - 0.5))
    return _rescale(temp)


def half_lorentzian_grid(nfreq, cut):
    """Upper half of the tangent warp: points cluster near t = 0."""
    _check_cut(cut)
    i = np.arange(nfreq + 1)
    temp = np.tan(math.pi * ((i + nfreq) / (2 * nfreq - 1) * (1.0 - 2 * cut) + cut - 0.5))
    return _rescale(temp)


class GridMapper:
    """
    Map grid index i in [0, nfreq] to t in [0, 1].

    Parameters
    ----------
    params : Parameters
        Store holding NFREQ, FREQUENCY_GRID and the scheme parameter
        (CUT, SPREAD or LOG_MIN). Missing keys fall back to GRID_DEFAULTS.

    Raises
    ------
    ConfigError
        If the scheme is unknown or its parameter is out of range.
    """

    def __init__(self, params):
        nfreq = params.get_int("NFREQ", GRID_DEFAULTS["NFREQ"][0])
        scheme = params.get_str("FREQUENCY_GRID", GRID_DEFAULTS["FREQUENCY_GRID"][0])
        key = SCHEMES.get(scheme.strip().lower())
        value = None
        if key is not None:
            value = params.get_float(key, GRID_DEFAULTS[key][0])
        self._build(nfreq, scheme, value)

    @classmethod
    def from_scheme(cls, nfreq, scheme, cut=None, spread=None, log_min=None):
        """Build a mapper without a parameter store."""
        if not isinstance(scheme, str):
            raise ConfigError(
                "frequency grid scheme must be a string, got {!r}".format(scheme))
        mapper = cls.__new__(cls)
        values = {"CUT": cut, "SPREAD": spread, "LOG_MIN": log_min}
        key = SCHEMES.get(scheme.strip().lower())
        value = None
        if key is not None:
            value = values[key]
            if value is None:
                value = GRID_DEFAULTS[key][0]
        mapper._build(int(nfreq), scheme, float(value) if value is not None else None)
        return mapper

    def _build(self, nfreq, scheme, value):
        if nfreq < 1:
            raise ConfigError("NFREQ must be positive, got {}".format(nfreq))
        name = scheme.strip().lower()
        if name == "lorentzian":
            t = lorentzian_grid(nfreq, value)
        elif name == "half lorentzian":
            t = half_lorentzian_grid(nfreq, value)
        elif name == "quadratic":
            t = quadratic_grid(nfreq, value)
        elif name == "log":
            t = log_grid(nfreq, value)
        elif name == "linear":
            t = linear_grid(nfreq)
        else:
            raise ConfigError("No valid frequency grid specified: {!r}".format(scheme))

        if not np.all(np.isfinite(t)) or np.any(np.diff(t) <= 0):
            raise ConfigError(
                "{} grid with NFREQ={} is not strictly increasing; "
                "adjust the grid parameter".format(name, nfreq))
        t.flags.writeable = False
        self.nfreq = nfreq
        self.scheme = name
        self.parameter = value
        self._t = t
        log.debug("built %s grid with %d intervals", name, nfreq)

    def t_array(self):
        """Read-only array of the nfreq+1 grid points."""
        return self._t

    def map(self, i):
        """
        Grid point ``i``.

        Raises
        ------
        DomainError
            If ``i`` is not an integer in [0, nfreq].
        """
        if isinstance(i, bool) or not isinstance(i, (int, np.integer)):
            raise DomainError("grid index must be an integer, got {!r}".format(i))
        if not 0 <= i <= self.nfreq:
            raise DomainError(
                "grid index {} out of range [0, {}]".format(i, self.nfreq))
        return float(self._t[i])

    def __len__(self):
        return self.nfreq + 1

    def __repr__(self):
        return "GridMapper(scheme={!r}, nfreq={})".format(self.scheme, self.nfreq)
