"""Top-level module of the emcalview package."""

from .container import (
    ClusterContainer,
    ContainerManager,
    IterableContainer,
    TrackContainer,
)
from .data import CaloCluster, Track
from .version import __version__
