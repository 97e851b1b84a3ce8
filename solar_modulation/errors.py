"""
Exceptions raised while modulating spectra and loading reference data.

Each one derives from the builtin exception that would describe the
failure anyway, so callers may catch either.
"""


class InvalidDomainError(ValueError):
    """The shifted energy e + phi_eff is not positive."""


class ZeroMassNumberError(ZeroDivisionError):
    """Mass number A == 0 with a non-zero modulation potential."""


class MissingSpeciesError(KeyError):
    """A species is not in the spectra."""


class MalformedReferenceDataError(ValueError):
    """A reference data line can not be parsed, or a label is unknown."""
