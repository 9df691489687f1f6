"""Detector-object containers and their iterables.

Each container holds the objects of one event and applies acceptance cuts.
It provides two iterables over its content, built by `all()` and
`accepted()`, which can be iterated forward or backward.
"""

from .base import ObjectContainer
from .cluster import ClusterContainer
from .factories import container_factory
from .iterable import ContainerIterator, IterableContainer
from .manager import ContainerManager
from .track import TrackContainer
