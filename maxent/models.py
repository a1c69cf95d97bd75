"""
Analytic default-model densities.

Each model is a small callable object: construction reads its shape
parameters from a Parameters store, and ``model(omega)`` returns the
(unnormalised or normalised) prior density at frequency omega. The
DefaultModelEngine normalises numerically, so overall prefactors only
matter for D(omega).

Models and their parameters:

    Gaussian                 SIGMA
        D(w) = exp(-w^2 / (2 sigma^2)) / (sqrt(2 pi) sigma)
    ShiftedGaussian          SIGMA, SHIFT
        D(w) = Gaussian(w - shift)
    DoubleGaussian           SIGMA, SHIFT
        D(w) = [Gaussian(w - shift) + Gaussian(w + shift)] / 2
    GeneralDoubleGaussian    SIGMA, SHIFT, BOSE_NORM
        D(w) = Gaussian(w - shift)               for w >= 0
             = BOSE_NORM * Gaussian(w + shift)   for w < 0
    TwoGaussians             SIGMA1, SIGMA2, SHIFT1, SHIFT2, NORM1
        D(w) = NORM1 * G1(w - shift1) + (1 - NORM1) * G2(w - shift2)
    LinearRiseExpDecay       LAMBDA
        D(w) = lambda^2 |w| exp(-lambda |w|)
    QuadraticRiseExpDecay    LAMBDA
        D(w) = lambda^3 / 2 * w^2 exp(-lambda |w|)

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import math

from maxent.errors import ConfigError

SQRT_2PI = math.sqrt(2.0 * math.pi)


def gaussian(omega, sigma):
    """Normalised Gaussian of width ``sigma`` centred at zero."""
    return math.exp(-omega * omega / (2.0 * sigma * sigma)) / (SQRT_2PI * sigma)


def _positive(params, key, default=None):
    if default is None:
        value = params.get_float(key)
    else:
        value = params.get_float(key, default)
    if not value > 0:
        raise ConfigError("parameter '{}' must be positive, got {}".format(key, value))
    return value


class Gaussian:
    """Gaussian prior centred at omega = 0."""

    label = "Gaussian"

    def __init__(self, params):
        self.sigma = _positive(params, "SIGMA")

    def __call__(self, omega):
        return gaussian(omega, self.sigma)


class ShiftedGaussian(Gaussian):
    """Gaussian prior centred at omega = SHIFT."""

    label = "shifted Gaussian"

    def __init__(self, params):
        Gaussian.__init__(self, params)
        self.shift = params.get_float("SHIFT")

    def __call__(self, omega):
        return gaussian(omega - self.shift, self.sigma)


class DoubleGaussian(ShiftedGaussian):
    """Two equal Gaussians placed symmetrically at +/- SHIFT."""

    label = "double Gaussian"

    def __call__(self, omega):
        return 0.5 * (gaussian(omega - self.shift, self.sigma)
                      + gaussian(omega + self.shift, self.sigma))


class GeneralDoubleGaussian(ShiftedGaussian):
    """
    Double Gaussian with an independent weight on the negative axis.

    Used for bosonic spectra where the negative-frequency peak is
    suppressed by a factor BOSE_NORM relative to the positive one.
    """

    label = "general double Gaussian"

    def __init__(self, params):
        ShiftedGaussian.__init__(self, params)
        self.bose_norm = params.get_float("BOSE_NORM")
        if self.bose_norm < 0:
            raise ConfigError("parameter 'BOSE_NORM' must not be negative")

    def __call__(self, omega):
        if omega >= 0:
            return gaussian(omega - self.shift, self.sigma)
        return self.bose_norm * gaussian(omega + self.shift, self.sigma)


class TwoGaussians:
    """Weighted sum of two Gaussians with independent widths and centres."""

    label = "sum of two Gaussians"

    def __init__(self, params):
        self.sigma1 = _positive(params, "SIGMA1")
        self.sigma2 = _positive(params, "SIGMA2")
        self.shift1 = params.get_float("SHIFT1", 0.0)
        self.shift2 = params.get_float("SHIFT2")
        self.norm1 = params.get_float("NORM1", 0.5)
        if not 0.0 <= self.norm1 <= 1.0:
            raise ConfigError("parameter 'NORM1' must lie in [0, 1]")

    def __call__(self, omega):
        return (self.norm1 * gaussian(omega - self.shift1, self.sigma1)
                + (1.0 - self.norm1) * gaussian(omega - self.shift2, self.sigma2))


class LinearRiseExpDecay:
    """Density rising linearly from zero and decaying exponentially."""

    label = "linear rise exponential decay"

    def __init__(self, params):
        self.lam = _positive(params, "LAMBDA")

    def __call__(self, omega):
        w = abs(omega)
        return self.lam * self.lam * w * math.exp(-self.lam * w)


class QuadraticRiseExpDecay:
    """Density rising quadratically from zero and decaying exponentially."""

    label = "quadratic rise exponential decay"

    def __init__(self, params):
        self.lam = _positive(params, "LAMBDA")

    def __call__(self, omega):
        w = abs(omega)
        return self.lam ** 3 / 2.0 * w * w * math.exp(-self.lam * w)


# Selector string -> model class. "flat" and tabulated files are handled
# by the factory in maxent.default_model.
ANALYTIC_MODELS = {
    "gaussian": Gaussian,
    "twogaussians": TwoGaussians,
    "shifted gaussian": ShiftedGaussian,
    "double gaussian": DoubleGaussian,
    "general double gaussian": GeneralDoubleGaussian,
    "linear rise exp decay": LinearRiseExpDecay,
    "quadratic rise exp decay": QuadraticRiseExpDecay,
}
