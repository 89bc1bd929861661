from .chi import Chi, LOG_DENSITY_CUTOVER
from . import normal
