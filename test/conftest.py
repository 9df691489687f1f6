"""Sets up fixtures general to the entire test suite of this package.

This file is read during the collection phase of pytest when running anything
inside this directory.
"""

import numpy as np
import pytest

from emcalview.data import CaloCluster, Track
from emcalview.utils.enums import RejectionReason


class DummySource:
    """Minimal source collection which accepts a predefined set of indices."""

    def __init__(self, size, accepted=()):
        self.objects = [f"obj_{i}" for i in range(size)]
        self.accepted = set(accepted)
        self.n_calls = 0

    def __len__(self):
        return len(self.objects)

    def __getitem__(self, index):
        return self.objects[index]

    def accept_object(self, index):
        self.n_calls += 1
        if index in self.accepted:
            return True, RejectionReason.NONE

        return False, RejectionReason.PT_CUT


@pytest.fixture(name="source")
def fixture_source(request):
    """Builds a dummy source from a (size, accepted indices) pair."""
    size, accepted = request.param
    return DummySource(size, accepted)


@pytest.fixture(name="make_source")
def fixture_make_source():
    """Returns the dummy source class, to build sources inside a test."""
    return DummySource


@pytest.fixture(name="make_track")
def fixture_make_track():
    """Returns a function which builds a track from its kinematics."""

    def make_track(pt=1.0, eta=0.0, phi=1.0, **kwargs):
        momentum = [pt * np.cos(phi), pt * np.sin(phi), pt * np.sinh(eta)]
        kwargs.setdefault("charge", 1)
        kwargs.setdefault("n_tpc_clusters", 100)
        return Track(momentum=momentum, **kwargs)

    return make_track


@pytest.fixture(name="make_cluster")
def fixture_make_cluster():
    """Returns a function which builds a cluster from its energy and
    direction, at a fixed radius.
    """

    def make_cluster(energy=1.0, eta=0.0, phi=1.5, radius=450.0, **kwargs):
        position = [
            radius * np.cos(phi),
            radius * np.sin(phi),
            radius * np.sinh(eta),
        ]
        kwargs.setdefault("n_cells", 3)
        return CaloCluster(energy=energy, position=position, **kwargs)

    return make_cluster
