"""
Parameter store for default models and frequency grids.

A Parameters object holds the values supplied by the user (from a JSON
file, an HTTP request body or keyword arguments) together with a table
of defined defaults. Lookup order for a key is:

    1. explicitly supplied value
    2. default registered with define()
    3. ConfigError (for __getitem__) or the caller's fallback (for get())

Typed readers (get_float, get_int, get_str) convert the stored value
and report conversion failures as ConfigError naming the key, so the
message reaching the user identifies the offending parameter.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import json
import math

from maxent.errors import ConfigError

_MISSING = object()


class Parameters:
    """
    Key-value store of named scalar and string parameters.

    Parameters
    ----------
    values : dict, optional
        Explicitly supplied parameter values.
    **kwargs
        Additional values; override entries of ``values``.
    """

    def __init__(self, values=None, **kwargs):
        if values is not None and not isinstance(values, dict):
            raise ConfigError("parameters must be a mapping of names to values")
        self._values = dict(values or {})
        self._values.update(kwargs)
        self._defaults = {}
        self._descriptions = {}

    @classmethod
    def from_json(cls, path):
        """
        Load parameters from a JSON object stored at ``path``.

        Raises
        ------
        ConfigError
            If the file cannot be read or does not hold a JSON object.
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except OSError:
            raise ConfigError("could not open parameter file: {}".format(path))
        except json.JSONDecodeError as e:
            raise ConfigError(
                "parameter file {} is not valid JSON: {}".format(path, e))
        if not isinstance(raw, dict):
            raise ConfigError(
                "parameter file {} must contain a JSON object".format(path))
        return cls(raw)

    def define(self, key, default, description=""):
        """Register a default value (and help text) for ``key``."""
        self._defaults[key] = default
        self._descriptions[key] = description

    def defined(self):
        """Return {key: (default, description)} for every defined key."""
        return {k: (self._defaults[k], self._descriptions.get(k, ""))
                for k in self._defaults}

    def __contains__(self, key):
        return key in self._values or key in self._defaults

    def __getitem__(self, key):
        value = self.get(key, _MISSING)
        if value is _MISSING:
            raise ConfigError("missing required parameter '{}'".format(key))
        return value

    def __setitem__(self, key, value):
        self._values[key] = value

    def get(self, key, default=None):
        if key in self._values:
            return self._values[key]
        if key in self._defaults:
            return self._defaults[key]
        return default

    def is_set(self, key):
        """True if ``key`` was supplied explicitly (defaults do not count)."""
        return key in self._values

    def get_float(self, key, default=_MISSING):
        value = self._lookup(key, default)
        try:
            result = float(value)
        except (TypeError, ValueError):
            raise ConfigError(
                "parameter '{}' must be a number, got {!r}".format(key, value))
        if math.isnan(result):
            raise ConfigError("parameter '{}' must not be NaN".format(key))
        return result

    def get_int(self, key, default=_MISSING):
        value = self._lookup(key, default)
        if isinstance(value, bool):
            raise ConfigError(
                "parameter '{}' must be an integer, got {!r}".format(key, value))
        try:
            fval = float(value)
        except (TypeError, ValueError):
            raise ConfigError(
                "parameter '{}' must be an integer, got {!r}".format(key, value))
        if not math.isfinite(fval) or fval != int(fval):
            raise ConfigError(
                "parameter '{}' must be an integer, got {!r}".format(key, value))
        return int(fval)

    def get_str(self, key, default=_MISSING):
        value = self._lookup(key, default)
        if not isinstance(value, str):
            raise ConfigError(
                "parameter '{}' must be a string, got {!r}".format(key, value))
        return value

    def to_dict(self):
        """Merged view: defaults overridden by explicit values."""
        merged = dict(self._defaults)
        merged.update(self._values)
        return merged

    def _lookup(self, key, default):
        value = self.get(key, _MISSING)
        if value is _MISSING:
            if default is _MISSING:
                raise ConfigError("missing required parameter '{}'".format(key))
            return default
        return value

    def __repr__(self):
        return "Parameters({!r})".format(self.to_dict())
