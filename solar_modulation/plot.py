"""
Plot modulated model spectra on top of measured reference data.

Each plot_*() starts a new figure with the reference data when no ax is
given. Pass the returned ax back in to add more model spectra to it.
"""

import numpy as np
import matplotlib.pyplot as plt
import json_line_logger

from . import derived
from . import reference_data
from . import species as sm_species


FIGSIZE = (16 / 3, 9 / 3)
DPI = 120 * 3
AXES_RECT = [0.15, 0.15, 0.8, 0.8]

ENERGY_LABEL = "E$_\\mathrm{kin}$ / GeV (nucleon)$^{-1}$"

MODULATE_MODES = ["first", "all"]


def figure():
    fig = plt.figure(figsize=FIGSIZE, dpi=DPI)
    ax = fig.add_axes(AXES_RECT)
    ax.grid(color="k", linestyle="-", linewidth=0.66, alpha=0.1)
    ax.spines["top"].set_color("none")
    ax.spines["right"].set_color("none")
    return ax


def save(ax, path):
    ax.figure.savefig(path)
    plt.close(ax.figure)


def ax_add_reference_data(ax, table, label=""):
    table = np.asarray(table)
    ax.errorbar(
        x=table[:, 0],
        y=table[:, 1],
        yerr=table[:, 2],
        linewidth=0,
        elinewidth=1,
        marker="o",
        markersize=2,
        color="k",
        label=label,
    )


def make_label(label, phi):
    return label + ",phi=" + str(phi)


def modulate_spectra_list(
    spectra_list,
    header,
    phi,
    modulate="first",
    logger=None,
):
    """
    Returns a new list of spectra with the first, or all spectra
    modulated. The list and the spectra in it are not modified.
    """
    logger = json_line_logger.LoggerStdout_if_logger_is_None(logger)
    if modulate not in MODULATE_MODES:
        raise KeyError(
            "Unknown modulate mode: '{:s}'. Expected one of {:s}.".format(
                modulate, str(MODULATE_MODES)
            )
        )
    out = list(spectra_list)
    if phi == 0 or len(out) == 0:
        return out

    num = 1 if modulate == "first" else len(out)
    if num < len(out):
        logger.warning(
            "Only the first of {:d} spectra is modulated "
            "with phi={:f}GV.".format(len(out), phi)
        )
    with json_line_logger.TimeDelta(logger, "modulate"):
        for i in range(num):
            out[i] = sm_species.modulate_spectra(
                spectra=out[i], species=header, phi=phi, logger=logger
            )
    return out


def _plot_derived_quantity(
    dataset_key,
    derive,
    spectra_list,
    header,
    label,
    ax,
    phi,
    modulate,
    resources_dir,
    logger,
    yscale,
    ylabel,
):
    logger = json_line_logger.LoggerStdout_if_logger_is_None(logger)

    for spectra in spectra_list:
        sm_species.assert_spectra_valid(spectra=spectra, species=header)

    if ax is None:
        logger.info("new plot with reference data '{:s}'".format(dataset_key))
        table = reference_data.read_dataset(
            key=dataset_key, resources_dir=resources_dir
        )
        ax = figure()
        ax_add_reference_data(
            ax=ax,
            table=table,
            label=reference_data.DATASETS[dataset_key]["label"],
        )
        ax.set_xscale("log")
        ax.set_yscale(yscale)
        ax.set_xlabel(ENERGY_LABEL)
        ax.set_ylabel(ylabel)

    spectra_list = modulate_spectra_list(
        spectra_list=spectra_list,
        header=header,
        phi=phi,
        modulate=modulate,
        logger=logger,
    )

    for spectra in spectra_list:
        ax.plot(
            sm_species.get_flux(spectra, sm_species.EAXIS),
            derive(spectra),
            label=make_label(label=label, phi=phi),
        )
    ax.legend(loc="best", fontsize=6)
    logger.info(
        "plotted {:d} spectra of '{:s}' with phi={:f}GV".format(
            len(spectra_list), dataset_key, phi
        )
    )
    return ax


def plot_boron_carbon(
    spectra_list,
    header,
    label,
    ax=None,
    phi=0.0,
    modulate="first",
    resources_dir=None,
    logger=None,
):
    """
    Plots the boron to carbon ratio of the spectra in comparison with
    the AMS-02 data.

    Parameters
    ----------
    spectra_list : list of dicts
        Each dict maps species names, and 'eaxis', to arrays.
    header : astropy.io.fits.Header, dict, or list of Species
        The species of the GALPROP output.
    label : str
        Legend label of the model.
    ax : matplotlib axes, or None
        Add to this ax. If None, a new figure with the data is made.
    phi : float
        Modulation potential in GV.
    modulate : str
        'first' modulates only spectra_list[0], 'all' modulates all.
    """
    return _plot_derived_quantity(
        dataset_key="boron_carbon",
        derive=derived.boron_to_carbon,
        spectra_list=spectra_list,
        header=header,
        label=label,
        ax=ax,
        phi=phi,
        modulate=modulate,
        resources_dir=resources_dir,
        logger=logger,
        yscale="linear",
        ylabel="B/C / 1",
    )


def plot_proton(
    spectra_list,
    header,
    label,
    ax=None,
    phi=0.0,
    modulate="first",
    resources_dir=None,
    logger=None,
):
    """
    Plots the proton flux times E**2.7 of the spectra in comparison with
    the AMS-02 data. See plot_boron_carbon() for the parameters.
    """
    return _plot_derived_quantity(
        dataset_key="proton",
        derive=derived.proton_flux_weighted,
        spectra_list=spectra_list,
        header=header,
        label=label,
        ax=ax,
        phi=phi,
        modulate=modulate,
        resources_dir=resources_dir,
        logger=logger,
        yscale="log",
        ylabel="E$^{2.7}$ flux",
    )


def plot_antiproton(
    spectra_list,
    header,
    label,
    ax=None,
    phi=0.0,
    modulate="first",
    resources_dir=None,
    logger=None,
):
    return _plot_derived_quantity(
        dataset_key="antiproton",
        derive=derived.antiproton_flux_weighted,
        spectra_list=spectra_list,
        header=header,
        label=label,
        ax=ax,
        phi=phi,
        modulate=modulate,
        resources_dir=resources_dir,
        logger=logger,
        yscale="log",
        ylabel="E$^{2}$ flux",
    )
