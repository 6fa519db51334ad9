from curie_temperature.materials import MATERIALS, Material
from curie_temperature.utils import EPSILON_0, Reading, compute_dielectric, find_tc, vacuum_capacitance

__version__ = "0.1.0"
