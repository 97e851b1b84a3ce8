"""
Solar modulation in the force-field approximation
=================================================

The heliosphere shifts the kinetic energy per nucleon of a cosmic-ray
by phi_eff = phi * |Z| / A. The flux observed at earth at energy E is
the interstellar flux at E + phi_eff, scaled by the ratio of the squared
momenta

    J(E) = E (E + 2 m0) / ((E + phi_eff) (E + phi_eff + 2 m0))
           * J_interstellar(E + phi_eff).

J_interstellar is interpolated linear in log(E), log(J), i.e. as a
local power-law, and extrapolated likewise beyond the sampled energies.
"""

import numpy as np
from scipy import interpolate

from . import errors


PROTON_REST_ENERGY_GEV = 0.9382
ELECTRON_REST_ENERGY_GEV = 0.511e-3


def rest_energy(A):
    """
    Rest energy in GeV used in the kinematic factor.
    A == 0 marks electron-like particles.
    """
    return ELECTRON_REST_ENERGY_GEV if A == 0 else PROTON_REST_ENERGY_GEV


def effective_potential(A, Z, phi):
    """
    Returns the shift in kinetic energy per nucleon in GeV.

    Parameters
    ----------
    A : int
        Mass number.
    Z : int
        Charge number.
    phi : float
        Modulation potential in GV.
    """
    if A == 0:
        raise errors.ZeroMassNumberError(
            "Mass number A = 0 with phi = {:f}GV.".format(phi)
        )
    return phi * abs(Z) / A


def log_log_interpolation(energy, flux):
    """
    Returns a function f(log(E)) -> log(J), piecewise linear in between
    the supports and linearly extrapolated beyond them.
    """
    return interpolate.interp1d(
        x=np.log(energy),
        y=np.log(flux),
        kind="linear",
        bounds_error=False,
        fill_value="extrapolate",
        assume_sorted=True,
    )


def modulate(energy, flux, A=1, Z=1, phi=0.0):
    """
    Doing solar modulation for the spectrum (energy, flux).

    Parameters
    ----------
    energy : array of floats
        Kinetic energy per nucleon in GeV. Strictly increasing.
    flux : array of floats
        Interstellar flux of nucleons at energy.
    A : int
        Mass number of the particle. 0 for electrons.
    Z : int
        Charge number of the particle.
    phi : float
        Modulation potential in GV.

    Returns
    -------
    (energy, modulated_flux)
        The energy is returned as it was given.
    """
    energy = np.asarray(energy, dtype=np.float64)
    flux = np.asarray(flux, dtype=np.float64)
    assert energy.ndim == 1
    assert energy.shape == flux.shape
    assert energy.shape[0] >= 2, "Expected at least two energies."
    assert np.all(energy > 0.0), "Expected energy > 0."
    assert np.all(flux > 0.0), "Expected flux > 0."
    assert np.all(np.diff(energy) > 0.0), "Expected increasing energy."
    assert A >= 0
    assert np.isfinite(phi), "Expected a finite phi."

    if phi == 0:
        return energy, flux.copy()

    phi_eff = effective_potential(A=A, Z=Z, phi=phi)
    m0 = rest_energy(A=A)

    shifted_energy = energy + phi_eff
    if np.any(shifted_energy <= 0.0):
        raise errors.InvalidDomainError(
            "Energy {:e}GeV shifted by {:e}GeV is not positive.".format(
                energy[np.argmin(shifted_energy)], phi_eff
            )
        )

    log_flux = log_log_interpolation(energy=energy, flux=flux)

    kinematic_factor = (energy * (energy + 2.0 * m0)) / (
        shifted_energy * (shifted_energy + 2.0 * m0)
    )
    interstellar_flux = np.exp(log_flux(np.log(shifted_energy)))
    modulated_flux = kinematic_factor * interstellar_flux
    return energy, modulated_flux
