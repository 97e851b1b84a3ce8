from .version import __version__
from . import errors
from . import utils
from . import modulation
from . import species
from . import derived
from . import reference_data
from . import plot

from .modulation import modulate
from .species import Species
from .species import EAXIS
from .species import modulate_spectra
from .species import species_from_header
from .plot import plot_boron_carbon
from .plot import plot_proton
from .plot import plot_antiproton
