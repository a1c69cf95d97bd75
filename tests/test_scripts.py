"""
Tests for the command-line helpers under scripts/.
"""

import json

import pytest

from scripts import maxent_tables


class TestMaxentTables:

    def test_grid(self, capsys):
        code = maxent_tables.main([
            "grid", "--param", "NFREQ=4", "--param", "FREQUENCY_GRID=linear"])
        assert code == 0
        rows = [line.split("\t") for line in capsys.readouterr().out.splitlines()]
        assert [float(r[1]) for r in rows] == [0.0, 0.25, 0.5, 0.75, 1.0]

    def test_grid_scheme_with_space(self, capsys):
        code = maxent_tables.main([
            "grid", "--param", "NFREQ=100", "--param", "FREQUENCY_GRID=half lorentzian"])
        assert code == 0
        assert len(capsys.readouterr().out.splitlines()) == 101

    def test_model(self, capsys):
        code = maxent_tables.main(["model", "--param", "OMEGA_MAX=5", "--points", "3"])
        assert code == 0
        rows = [[float(v) for v in line.split("\t")]
                for line in capsys.readouterr().out.splitlines()]
        assert [r[1] for r in rows] == [-5.0, 0.0, 5.0]
        assert rows[0][2] == pytest.approx(0.1)

    def test_params_file(self, tmp_path, capsys):
        path = tmp_path / "p.json"
        path.write_text(json.dumps({"OMEGA_MAX": 4, "DEFAULT_MODEL": "gaussian", "SIGMA": 1}))
        code = maxent_tables.main(["model", "--params-file", str(path), "--points", "5"])
        assert code == 0
        rows = capsys.readouterr().out.splitlines()
        assert float(rows[2].split("\t")[1]) == pytest.approx(0.0, abs=1e-9)

    def test_config_error_exit_code(self, capsys):
        code = maxent_tables.main(["grid", "--param", "FREQUENCY_GRID=cubic"])
        assert code == 1
        assert "error" in capsys.readouterr().err

    def test_bad_assignment(self, capsys):
        code = maxent_tables.main(["grid", "--param", "NFREQ"])
        assert code == 1

    def test_help(self, capsys):
        assert maxent_tables.main(["help"]) == 0
        assert "Grid Name" in capsys.readouterr().out

    def test_parse_assignments(self):
        assert maxent_tables.parse_assignments(["A=1", "B=0.5", "C=log"]) == {
            "A": 1, "B": 0.5, "C": "log"}


def test_plot_grids(tmp_path):
    pytest.importorskip("matplotlib")
    from scripts import plot_grids

    out = tmp_path / "grids.png"
    plot_grids.main(str(out))
    assert out.exists()
    assert out.stat().st_size > 0
