"""Detector record structures.

- `Track`: reconstructed charged-particle track
- `CaloCluster`: calorimeter cluster
- `ObjectList`: list of records typed by its record class, even when empty
"""

from .cluster import *
from .list import *
from .track import *
