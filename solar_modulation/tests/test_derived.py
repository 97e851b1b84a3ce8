import solar_modulation as sm
import numpy as np
import pytest


def test_boron_to_carbon():
    spectra = {
        "eaxis": np.array([1.0, 2.0]),
        "Boron_10": np.array([1.0, 2.0]),
        "Boron_11": np.array([1.0, 1.0]),
        "Carbon_12": np.array([2.0, 2.0]),
        "Carbon_13": np.array([0.0, 0.0]),
    }
    bc = sm.derived.boron_to_carbon(spectra)
    np.testing.assert_allclose(bc, [1.0, 1.5])


def test_boron_to_carbon_missing_boron():
    spectra = {
        "eaxis": np.array([1.0, 2.0]),
        "Boron_11": np.array([1.0, 1.0]),
        "Carbon_12": np.array([2.0, 2.0]),
        "Carbon_13": np.array([0.0, 0.0]),
    }
    with pytest.raises(sm.errors.MissingSpeciesError):
        sm.derived.boron_to_carbon(spectra)


def test_proton_flux_weighted():
    spectra = {
        "eaxis": np.array([1.0, 10.0]),
        "Hydrogen_1": np.array([3.0, 3e-3]),
        "Hydrogen_2": np.array([1.0, 1e-3]),
    }
    p = sm.derived.proton_flux_weighted(spectra)
    np.testing.assert_allclose(p, [4.0, 4e-3 * 10.0**2.7])


def test_proton_flux_weighted_missing_eaxis():
    spectra = {
        "Hydrogen_1": np.array([3.0]),
        "Hydrogen_2": np.array([1.0]),
    }
    with pytest.raises(sm.errors.MissingSpeciesError):
        sm.derived.proton_flux_weighted(spectra)


def test_antiproton_floor():
    spectra = {
        "eaxis": np.array([10.0]),
        "DM_antiprotons": np.array([1e-10]),
    }
    pbar = sm.derived.antiproton_flux_weighted(spectra)
    np.testing.assert_allclose(pbar, [1e-7])


def test_antiproton_above_floor():
    spectra = {
        "eaxis": np.array([2.0, 10.0]),
        "DM_antiprotons": np.array([1e-3, 0.0]),
    }
    pbar = sm.derived.antiproton_flux_weighted(spectra)
    np.testing.assert_allclose(pbar, [4e-3, 1e-7])


def test_antiproton_from_propagation():
    spectra = {
        "eaxis": np.array([10.0]),
        "secondary_antiprotons": np.array([2e-5]),
        "tertiary_antiprotons": np.array([1e-5]),
    }
    pbar = sm.derived.antiproton_flux_weighted(
        spectra,
        species=("secondary_antiprotons", "tertiary_antiprotons"),
    )
    np.testing.assert_allclose(pbar, [3e-3])

    with pytest.raises(sm.errors.MissingSpeciesError):
        sm.derived.antiproton_flux_weighted(spectra)
