"""
Measured fluxes and ratios to compare the modulated spectra with.

A reference file holds one or more tables. A line starting with '#'
opens a table named by the rest of the line. Every following line holds
three numbers: energy, value, and the error of value.

    # AMS02(2011/05-2016/05)
    0.49 0.3189 0.0077
    0.61 0.3147 0.0064
    ...

On loading, value and error are scaled by energy**(-index) * norm.
"""

import os
import numpy as np

from . import errors
from . import utils


DATASETS = {
    "boron_carbon": {
        "filename": "bcratio.dat",
        "label": "AMS02(2011/05-2016/05)",
        "index": 0.0,
        "norm": 1.0,
    },
    "proton": {
        "filename": "proton.dat",
        "label": "AMS2015(2011/05-2013/11)",
        "index": 0.0,
        "norm": 1e-4,
    },
    "antiproton": {
        "filename": "pbar.dat",
        "label": "AMS2016nonformal(0000/00)",
        "index": -2.0,
        "norm": 1e-4,
    },
}


def loads(text, index=0.0, norm=1.0, source="<string>"):
    """
    Returns a dict of tables, one for each '#'-header in text.
    Each table is an array of shape (N, 3): energy, value, error.
    """
    rows = {}
    key = None
    for line_number, line in enumerate(str.splitlines(text), start=1):
        if len(line.strip()) == 0:
            continue
        if line[0] == "#":
            key = line[1:].strip()
            rows[key] = []
            continue
        if key is None:
            continue

        tokens = str.split(line)
        if len(tokens) != 3:
            raise errors.MalformedReferenceDataError(
                "{:s}:{:d}: Expected 3 numbers, but found {:d}.".format(
                    source, line_number, len(tokens)
                )
            )
        try:
            energy, value, error = [float(token) for token in tokens]
        except ValueError as err:
            raise errors.MalformedReferenceDataError(
                "{:s}:{:d}: {:s}".format(source, line_number, str(err))
            ) from err

        scale = energy ** (-index) * norm
        rows[key].append([energy, value * scale, error * scale])

    out = {}
    for key in rows:
        table = np.array(rows[key], dtype=np.float64).reshape((-1, 3))
        table.flags.writeable = False
        out[key] = table
    return out


def read(path, index=0.0, norm=1.0):
    with open(path, "rt") as f:
        text = f.read()
    return loads(text=text, index=index, norm=norm, source=path)


def get_table(tables, label):
    if label not in tables:
        raise errors.MalformedReferenceDataError(
            "No table '{:s}'. Known tables are: {:s}.".format(
                label, ", ".join(tables.keys())
            )
        )
    return tables[label]


def read_dataset(key, resources_dir=None):
    """
    Returns the table of the reference dataset DATASETS[key].
    """
    if resources_dir is None:
        resources_dir = utils.get_resources_dir()
    if key not in DATASETS:
        raise KeyError("Unknown reference dataset: '{:s}'.".format(key))
    dataset = DATASETS[key]
    tables = read(
        path=os.path.join(resources_dir, dataset["filename"]),
        index=dataset["index"],
        norm=dataset["norm"],
    )
    return get_table(tables=tables, label=dataset["label"])
