"""
Spectra of many species sharing one energy axis
===============================================

GALPROP writes the spectra of all its species on one common energy axis.
Here such spectra are a dict:

    {
        "eaxis": [E_0, E_1, ...],
        "Hydrogen_1": [J_0, J_1, ...],
        "Boron_10": [J_0, J_1, ...],
        ...
    }

The name, charge number Z, and mass number A of each species are taken
from the FITS header of the GALPROP output:

    NAXIS4   number of species
    NAME001  name of species 1
    NUCZ001  Z of species 1
    NUCA001  A of species 1
    ...
"""

import collections
import numpy as np
import json_line_logger

from . import errors
from . import modulation


EAXIS = "eaxis"

Species = collections.namedtuple("Species", ["name", "A", "Z"])

HEADER_NUM_SPECIES_KEY = "NAXIS4"
HEADER_KEY_TEMPLATE = "{:s}{:03d}"


def species_from_header(header):
    """
    Returns a list of Species from a GALPROP header.

    Parameters
    ----------
    header : astropy.io.fits.Header or dict
    """
    out = []
    num_species = int(header[HEADER_NUM_SPECIES_KEY])
    for i in range(1, num_species + 1):
        name = header[HEADER_KEY_TEMPLATE.format("NAME", i)]
        out.append(
            Species(
                name=str(name).strip(),
                A=int(header[HEADER_KEY_TEMPLATE.format("NUCA", i)]),
                Z=int(header[HEADER_KEY_TEMPLATE.format("NUCZ", i)]),
            )
        )
    return out


def to_header(species):
    header = {HEADER_NUM_SPECIES_KEY: len(species)}
    for i, sp in enumerate(species):
        header[HEADER_KEY_TEMPLATE.format("NAME", i + 1)] = sp.name
        header[HEADER_KEY_TEMPLATE.format("NUCA", i + 1)] = int(sp.A)
        header[HEADER_KEY_TEMPLATE.format("NUCZ", i + 1)] = int(sp.Z)
    return header


def _as_species_list(species_or_header):
    if isinstance(species_or_header, (list, tuple)):
        return list(species_or_header)
    return species_from_header(species_or_header)


def get_flux(spectra, name):
    if name not in spectra:
        raise errors.MissingSpeciesError(
            "Species '{:s}' is not in spectra.".format(name)
        )
    return spectra[name]


def assert_spectra_valid(spectra, species):
    """
    Raises when spectra do not hold an energy axis, or do not hold
    every species in species, or when a flux does not match the
    energy axis.

    Parameters
    ----------
    spectra : dict
    species : list of Species, or header
    """
    eaxis = np.asarray(get_flux(spectra, EAXIS))
    assert eaxis.ndim == 1, "Expected '{:s}' to be 1-D.".format(EAXIS)
    for sp in _as_species_list(species):
        flux = np.asarray(get_flux(spectra, sp.name))
        assert flux.shape == eaxis.shape, (
            "Expected '{:s}' to have shape {:s}, but it has {:s}.".format(
                sp.name, str(eaxis.shape), str(flux.shape)
            )
        )


def modulate_spectra(spectra, species, phi=0.0, logger=None):
    """
    Doing solar modulation for every species in the spectra.

    Parameters
    ----------
    spectra : dict
        Fluxes of the species and the common energy axis 'eaxis'.
    species : list of Species, or header
        The species to be modulated. A GALPROP header is read with
        species_from_header(). Species in spectra but not in this list
        are passed on unmodulated.
    phi : float
        Modulation potential in GV.

    Returns
    -------
    A new dict. The input spectra are not modified.
    """
    logger = json_line_logger.LoggerStdout_if_logger_is_None(logger)
    species = _as_species_list(species)
    energy = get_flux(spectra, EAXIS)

    out = dict(spectra)
    for sp in species:
        flux = get_flux(spectra, sp.name)
        logger.debug(
            "modulate {:s}, A={}, Z={}, phi={:f}GV".format(
                sp.name, sp.A, sp.Z, phi
            )
        )
        _, out[sp.name] = modulation.modulate(
            energy=energy,
            flux=flux,
            A=sp.A,
            Z=sp.Z,
            phi=phi,
        )
    return out
