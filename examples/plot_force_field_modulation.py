#! /usr/bin/env python
import argparse
import os
import numpy as np
import json_line_logger
import solar_modulation as sm

parser = argparse.ArgumentParser(
    description="Plot power-law model spectra modulated with a few "
    "potentials against the bundled AMS-02 data.",
)
parser.add_argument("--out_dir", default=".")
args = parser.parse_args()

os.makedirs(args.out_dir, exist_ok=True)
logger = json_line_logger.LoggerStdout()

species = [
    sm.Species(name="Hydrogen_1", A=1, Z=1),
    sm.Species(name="Hydrogen_2", A=2, Z=1),
    sm.Species(name="Boron_10", A=10, Z=5),
    sm.Species(name="Boron_11", A=11, Z=5),
    sm.Species(name="Carbon_12", A=12, Z=6),
    sm.Species(name="Carbon_13", A=13, Z=6),
    sm.Species(name="DM_antiprotons", A=1, Z=-1),
]
header = sm.species.to_header(species)

eaxis = np.geomspace(0.1, 1e4, 101)
interstellar = {
    sm.EAXIS: eaxis,
    "Hydrogen_1": 1.8e0 * eaxis**-2.75,
    "Hydrogen_2": 3.6e-2 * eaxis**-2.75,
    "Boron_10": 1.4e-3 * eaxis**-3.1,
    "Boron_11": 2.9e-3 * eaxis**-3.1,
    "Carbon_12": 1.3e-2 * eaxis**-2.75,
    "Carbon_13": 1.5e-4 * eaxis**-2.75,
    "DM_antiprotons": 1e-5 * eaxis**-2.0 * np.exp(-eaxis / 50.0),
}
sm.species.assert_spectra_valid(spectra=interstellar, species=header)

plots = {
    "boron_carbon": sm.plot_boron_carbon,
    "proton": sm.plot_proton,
    "antiproton": sm.plot_antiproton,
}
for key in plots:
    ax = None
    for phi in [0.0, 0.4, 0.8]:
        ax = plots[key](
            [interstellar], header, "power-law", ax=ax, phi=phi, logger=logger
        )
    path = os.path.join(args.out_dir, key + ".png")
    sm.plot.save(ax, path)
    logger.info("wrote {:s}".format(path))
