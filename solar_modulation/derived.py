import numpy as np

from . import species as sm_species


def sum_species(spectra, names):
    total = np.zeros(np.shape(sm_species.get_flux(spectra, names[0])))
    for name in names:
        total = total + np.asarray(sm_species.get_flux(spectra, name))
    return total


def boron_to_carbon(spectra):
    """
    (Boron_10 + Boron_11) / (Carbon_12 + Carbon_13)
    """
    boron = sum_species(spectra, ["Boron_10", "Boron_11"])
    carbon = sum_species(spectra, ["Carbon_12", "Carbon_13"])
    return boron / carbon


def proton_flux_weighted(spectra, spectral_index=2.7):
    """
    (Hydrogen_1 + Hydrogen_2) * E**spectral_index
    """
    protons = sum_species(spectra, ["Hydrogen_1", "Hydrogen_2"])
    energy = np.asarray(sm_species.get_flux(spectra, sm_species.EAXIS))
    return protons * energy**spectral_index


def antiproton_flux_weighted(
    spectra,
    species=("DM_antiprotons",),
    floor=1e-7,
):
    """
    Antiproton flux times E**2, but not below floor, to stay on a
    logarithmic axis. Use species=("secondary_antiprotons",
    "tertiary_antiprotons") for the antiprotons from propagation.
    """
    antiprotons = sum_species(spectra, list(species))
    energy = np.asarray(sm_species.get_flux(spectra, sm_species.EAXIS))
    return np.maximum(antiprotons * energy**2, floor)
