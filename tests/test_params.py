"""
Tests for the Parameters store: defaults, typed reads, error messages.
"""

import json

import pytest

from maxent.errors import ConfigError
from maxent.params import Parameters


class TestLookup:
    """Explicit values win over defaults; missing keys raise ConfigError."""

    def test_explicit_value(self):
        p = Parameters({"OMEGA_MAX": 10.0})
        assert p["OMEGA_MAX"] == 10.0

    def test_kwargs_override_mapping(self):
        p = Parameters({"NFREQ": 10}, NFREQ=20)
        assert p["NFREQ"] == 20

    def test_defined_default(self):
        p = Parameters()
        p.define("CUT", 0.01, "cut for lorentzian grids")
        assert p["CUT"] == 0.01
        assert "CUT" in p
        assert not p.is_set("CUT")

    def test_explicit_beats_default(self):
        p = Parameters({"CUT": 0.2})
        p.define("CUT", 0.01)
        assert p["CUT"] == 0.2
        assert p.is_set("CUT")

    def test_missing_required(self):
        with pytest.raises(ConfigError, match="OMEGA_MAX"):
            Parameters()["OMEGA_MAX"]

    def test_get_fallback(self):
        assert Parameters().get("SIGMA", 3.0) == 3.0
        assert Parameters().get("SIGMA") is None

    def test_to_dict_merges(self):
        p = Parameters({"A": 1})
        p.define("B", 2)
        p.define("A", 5)
        assert p.to_dict() == {"A": 1, "B": 2}

    def test_defined_lists_descriptions(self):
        p = Parameters()
        p.define("SPREAD", 4.0, "spread for quadratic grid")
        assert p.defined() == {"SPREAD": (4.0, "spread for quadratic grid")}

    def test_non_mapping_rejected(self):
        with pytest.raises(ConfigError):
            Parameters([1, 2, 3])


class TestTypedReads:
    """get_float / get_int / get_str convert or raise ConfigError."""

    def test_float_from_string(self):
        assert Parameters({"X": "2.5"}).get_float("X") == 2.5

    def test_float_with_default(self):
        assert Parameters().get_float("X", -4.0) == -4.0

    def test_float_required(self):
        with pytest.raises(ConfigError, match="missing required parameter 'X'"):
            Parameters().get_float("X")

    def test_float_bad_value_names_key(self):
        with pytest.raises(ConfigError, match="SIGMA"):
            Parameters({"SIGMA": "wide"}).get_float("SIGMA")

    def test_float_nan_rejected(self):
        with pytest.raises(ConfigError):
            Parameters({"X": float("nan")}).get_float("X")

    def test_int_accepts_integral_float(self):
        assert Parameters({"NFREQ": 100.0}).get_int("NFREQ") == 100

    def test_int_rejects_fraction(self):
        with pytest.raises(ConfigError):
            Parameters({"NFREQ": 10.5}).get_int("NFREQ")

    def test_int_rejects_bool(self):
        with pytest.raises(ConfigError):
            Parameters({"NFREQ": True}).get_int("NFREQ")

    def test_str(self):
        assert Parameters({"FREQUENCY_GRID": "log"}).get_str("FREQUENCY_GRID") == "log"

    def test_str_rejects_number(self):
        with pytest.raises(ConfigError):
            Parameters({"FREQUENCY_GRID": 3}).get_str("FREQUENCY_GRID")


class TestFromJson:

    def test_load(self, tmp_path):
        path = tmp_path / "params.json"
        path.write_text(json.dumps({"OMEGA_MAX": 8, "DEFAULT_MODEL": "gaussian"}))
        p = Parameters.from_json(str(path))
        assert p.get_float("OMEGA_MAX") == 8.0
        assert p["DEFAULT_MODEL"] == "gaussian"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="could not open"):
            Parameters.from_json(str(tmp_path / "nope.json"))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError):
            Parameters.from_json(str(path))

    def test_non_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigError):
            Parameters.from_json(str(path))
