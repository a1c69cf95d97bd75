"""
Tabulated model function: piecewise-linear density from (omega, value) pairs.

File format (one pair per line, whitespace separated):

    # omega   value
    -10.0     0.0
    -9.9      1.2e-4
    ...

Lines whose first non-blank character is '#' and blank lines are
skipped. Columns beyond the second are ignored. Rows are kept in file
order; the file must already be sorted ascending in omega.

The function is compactly supported on the tabulated range: queries
outside [xs[0], xs[-1]] evaluate to exactly 0.0. No extrapolation.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import logging

import numpy as np

from maxent.errors import ConfigError, DataError

log = logging.getLogger(__name__)


def read_table(path):
    """
    Read a two-column table from ``path``.

    Returns
    -------
    (list of float, list of float)
        The x column and the y column, in file order.

    Raises
    ------
    ConfigError
        If the file cannot be opened.
    DataError
        If a non-comment line does not hold two numbers.
    """
    xs = []
    ys = []
    try:
        f = open(path, "r", encoding="utf-8")
    except OSError:
        raise ConfigError("could not open default model file: {}".format(path))
    with f:
        for lineno, line in enumerate(f, start=1):
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            fields = stripped.split()
            if len(fields) < 2:
                raise DataError(
                    "{}:{}: expected two columns, got {!r}".format(
                        path, lineno, stripped))
            try:
                xs.append(float(fields[0]))
                ys.append(float(fields[1]))
            except ValueError:
                raise DataError(
                    "{}:{}: could not parse numbers from {!r}".format(
                        path, lineno, stripped))
    return xs, ys


class TabulatedFunction:
    """
    Linear interpolation over a fixed table of (x, y) samples.

    Parameters
    ----------
    xs : sequence of float
        Strictly ascending sample abscissae.
    ys : sequence of float
        Sample values, index-aligned with ``xs``.

    Raises
    ------
    ConfigError
        If the columns differ in length, hold fewer than two points, or
        ``xs`` is not strictly ascending.
    """

    def __init__(self, xs, ys):
        xs = np.array(xs, dtype=float)
        ys = np.array(ys, dtype=float)
        if xs.ndim != 1 or ys.ndim != 1 or xs.shape != ys.shape:
            raise ConfigError("tabulated x and y columns must have equal length")
        if xs.size < 2:
            raise ConfigError("tabulated model needs at least two points")
        if not np.all(np.isfinite(xs)) or not np.all(np.isfinite(ys)):
            raise ConfigError("tabulated model contains non-finite values")
        if np.any(np.diff(xs) <= 0):
            raise ConfigError("tabulated x values must be strictly ascending")
        xs.flags.writeable = False
        ys.flags.writeable = False
        self.xs = xs
        self.ys = ys

    @classmethod
    def load(cls, path, omega_min=None, omega_max=None):
        """
        Build a TabulatedFunction from a file.

        If ``omega_min``/``omega_max`` are given and the first/last
        tabulated x differ from them, the mismatch is logged as a
        warning. Construction still succeeds.
        """
        xs, ys = read_table(path)
        table = cls(xs, ys)
        table.check_bounds(omega_min, omega_max, source=path)
        return table

    def check_bounds(self, omega_min=None, omega_max=None, source="table"):
        """
        Compare the tabulated range with the expected bounds.

        Returns True if both supplied bounds match exactly. A mismatch is
        only reported through the log.
        """
        ok = True
        if omega_min is not None and self.xs[0] != omega_min:
            log.warning("%s: first omega %g does not match OMEGA_MIN %g",
                        source, self.xs[0], omega_min)
            ok = False
        if omega_max is not None and self.xs[-1] != omega_max:
            log.warning("%s: last omega %g does not match OMEGA_MAX %g",
                        source, self.xs[-1], omega_max)
            ok = False
        return ok

    def evaluate(self, x):
        """Interpolated value at ``x``; 0.0 outside the tabulated range."""
        xs = self.xs
        ys = self.ys
        if not xs[0] <= x <= xs[-1]:
            return 0.0
        # first index with xs[i] > x
        i = int(np.searchsorted(xs, x, side="right"))
        if xs[i - 1] == x:
            return float(ys[i - 1])
        x1, x2 = xs[i - 1], xs[i]
        y1, y2 = ys[i - 1], ys[i]
        return float(y2 - (y2 - y1) / (x2 - x1) * (x2 - x))

    __call__ = evaluate

    def __len__(self):
        return int(self.xs.size)

    def __repr__(self):
        return "TabulatedFunction(n={}, range=[{:g}, {:g}])".format(
            len(self), self.xs[0], self.xs[-1])
