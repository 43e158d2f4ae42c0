"""kingraph package initialization.

Exposes the application facade used by the genealogy viewer together with the
graph store it queries.
"""

from .api import KinGraphApp
from .graph import GraphStore, InputError

__all__ = ["GraphStore", "InputError", "KinGraphApp"]
