"""
Compare the five frequency grids and the inverse CDF of a few default models.

Left panel: t[i] against i/nfreq for every grid scheme at its default
parameter. Right panel: omega(x) for the flat, Gaussian and double
Gaussian default models on [-10, 10].

Run from repo root with PYTHONPATH=. (python scripts/plot_grids.py [out.png]).
No unicode (Windows charmap).
"""

import sys

import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from maxent.default_model import build_default_model
from maxent.grid import GridMapper, SCHEMES
from maxent.params import Parameters

NFREQ = 200

MODELS = [
    ('flat', {}),
    ('gaussian', {'SIGMA': 2.0}),
    ('double gaussian', {'SIGMA': 1.0, 'SHIFT': 4.0}),
]


def main(out_path='scripts/grids.png'):
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(12, 5))

    frac = np.arange(NFREQ + 1) / NFREQ
    for scheme in SCHEMES:
        mapper = GridMapper.from_scheme(NFREQ, scheme)
        ax1.plot(frac, mapper.t_array(), '-', linewidth=1.5, label=scheme)
    ax1.set_xlabel('i / NFREQ')
    ax1.set_ylabel('t')
    ax1.set_title('Frequency grids (NFREQ=%d)' % NFREQ)
    ax1.legend(loc='upper left', fontsize=8)
    ax1.grid(True, alpha=0.3)

    xs = np.linspace(0.0, 1.0, 401)
    for name, extra in MODELS:
        params = Parameters(dict(extra, OMEGA_MAX=10.0, DEFAULT_MODEL=name))
        model = build_default_model(params)
        ax2.plot(xs, [model.omega(x) for x in xs], '-', linewidth=1.5, label=name)
    ax2.set_xlabel('x')
    ax2.set_ylabel('omega(x)')
    ax2.set_title('Inverse CDF of default models')
    ax2.legend(loc='upper left', fontsize=8)
    ax2.grid(True, alpha=0.3)

    plt.tight_layout()
    plt.savefig(out_path, dpi=150, bbox_inches='tight')
    plt.close()
    print('Saved: %s' % out_path)
    return out_path


if __name__ == '__main__':
    main(*sys.argv[1:2])
