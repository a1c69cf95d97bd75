#!/usr/bin/env python3
"""
maxent_tables.py
================
Print a frequency grid or a default-model table as two columns.

    python scripts/maxent_tables.py grid --param NFREQ=8 --param FREQUENCY_GRID=log
    python scripts/maxent_tables.py model --param OMEGA_MAX=5 \
        --param DEFAULT_MODEL=gaussian --param SIGMA=1 --points 11
    python scripts/maxent_tables.py help

grid:   index and t for every grid point
model:  x and omega(x) at --points equidistant x in [0, 1], plus D(omega)

Parameters come from --params-file (JSON object) and are overridden by
repeated --param KEY=VALUE options. Values that parse as numbers are
passed as numbers.
"""

import argparse
import logging
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from maxent.default_model import build_default_model, define_parameters as define_model_parameters
from maxent.errors import MaxentError
from maxent.grid import GridMapper, define_parameters as define_grid_parameters, grid_help
from maxent.params import Parameters


def _coerce(text):
    for convert in (int, float):
        try:
            return convert(text)
        except ValueError:
            pass
    return text


def parse_assignments(items):
    """Turn ["KEY=VALUE", ...] into a dict, converting numeric values."""
    out = {}
    for item in items or []:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise argparse.ArgumentTypeError(
                "expected KEY=VALUE, got {!r}".format(item))
        out[key.strip()] = _coerce(value.strip())
    return out


def build_parser():
    ap = argparse.ArgumentParser(
        description="Print MaxEnt frequency grids and default-model tables.")
    ap.add_argument("what", choices=("grid", "model", "help"),
                    help="table to print")
    ap.add_argument("--param", action="append", default=[], metavar="KEY=VALUE",
                    help="parameter assignment (repeatable)")
    ap.add_argument("--params-file", default=None,
                    help="JSON file with parameters")
    ap.add_argument("--points", type=int, default=101,
                    help="number of x samples for 'model' (default 101)")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="log model selection and table construction")
    return ap


def main(argv=None):
    ap = build_parser()
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s - %(levelname)s - %(message)s",
    )

    if args.what == "help":
        print(grid_help())
        return 0

    try:
        values = {}
        if args.params_file:
            values = Parameters.from_json(args.params_file).to_dict()
        values.update(parse_assignments(args.param))
        params = Parameters(values)

        if args.what == "grid":
            define_grid_parameters(params)
            t = GridMapper(params).t_array()
            for i, ti in enumerate(t):
                print("%d\t%.15g" % (i, ti))
            return 0

        if args.points < 2:
            print("error: --points must be at least 2", file=sys.stderr)
            return 2
        define_model_parameters(params)
        model = build_default_model(params)
        for k in range(args.points):
            x = k / (args.points - 1)
            w = model.omega(x)
            print("%.15g\t%.15g\t%.15g" % (x, w, model.D(w)))
        return 0
    except (MaxentError, argparse.ArgumentTypeError) as e:
        print("error: %s" % e, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
