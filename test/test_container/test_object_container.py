"""Tests for the shared container behavior."""

import pytest

from emcalview.container import ClusterContainer, IterableContainer, TrackContainer
from emcalview.data import CaloCluster, Track
from emcalview.utils.enums import RejectionReason


class TestContainerContent:
    """Test loading and accessing the objects of a container."""

    def test_empty(self):
        """A new container holds no object."""
        container = TrackContainer()
        assert len(container) == 0
        assert container.n_entries == 0
        assert container.n_accepted == 0
        assert container.objects.default is Track
        assert list(container.accepted()) == []

    def test_set_objects(self, make_track):
        """Loading objects replaces the previous content."""
        container = TrackContainer()
        container.set_objects([make_track(), make_track()])
        assert len(container) == 2

        tracks = [make_track(pt=2.0)]
        container.set_objects(tracks)
        assert len(container) == 1
        assert container[0] is tracks[0]

    def test_wrong_type(self, make_cluster):
        """Objects of the wrong record type are refused."""
        container = TrackContainer()
        with pytest.raises(TypeError):
            container.set_objects([make_cluster()])

    def test_index_error(self, make_track):
        """Item access outside of the container raises."""
        container = TrackContainer()
        container.set_objects([make_track()])
        with pytest.raises(IndexError):
            container[1]
        with pytest.raises(IndexError):
            container[-1]

    def test_null_object(self, make_track):
        """Missing objects are stored but never accepted."""
        container = TrackContainer()
        container.set_objects([make_track(), None])
        assert len(container) == 2
        assert container[1] is None
        assert container.accept_object(1) == (False, RejectionReason.NULL_OBJECT)
        assert container.n_accepted == 1
        assert container.all()[1] is None


class TestKinematicCuts:
    """Test the kinematic cuts shared by all containers."""

    def test_defaults(self):
        """Default kinematic window."""
        container = TrackContainer()
        assert container.min_pt == 0.15
        assert container.max_pt == 1000.0
        assert container.min_eta == -0.9
        assert container.max_eta == 0.9
        assert container.min_phi == -10.0
        assert container.max_phi == 10.0

    @pytest.mark.parametrize(
        "kinematics, reason",
        [
            ({"pt": 1.0}, RejectionReason.NONE),
            ({"pt": 0.1}, RejectionReason.PT_CUT),
            ({"pt": 25.0}, RejectionReason.PT_CUT),
            ({"pt": 20.0, "phi": 0.0}, RejectionReason.PT_CUT),
            ({"eta": 0.85}, RejectionReason.ACCEPTANCE_CUT),
            ({"eta": -0.85}, RejectionReason.ACCEPTANCE_CUT),
            ({"phi": 3.5}, RejectionReason.ACCEPTANCE_CUT),
        ],
    )
    def test_cuts(self, make_track, kinematics, reason):
        """Each kinematic cut rejects with its own reason."""
        container = TrackContainer(
            min_pt=0.2, max_pt=20.0, min_eta=-0.8, max_eta=0.8, max_phi=3.0
        )
        container.set_objects([make_track(**kinematics)])
        accepted, found = container.accept_object(0)
        assert found == reason
        assert accepted == (reason == RejectionReason.NONE)

    def test_first_failure(self, make_track):
        """Only the first failing cut is reported."""
        container = TrackContainer(min_tpc_clusters=70)
        container.set_objects([make_track(pt=0.05, eta=2.0, n_tpc_clusters=10)])
        assert container.accept_object(0) == (False, RejectionReason.PT_CUT)

    def test_empty_window(self):
        """Inverted windows are configuration errors."""
        with pytest.raises(AssertionError):
            TrackContainer(min_pt=2.0, max_pt=1.0)


class TestContainerIterables:
    """Test the iterables provided by the containers."""

    @pytest.fixture(name="container")
    def fixture_container(self, make_track):
        container = TrackContainer()
        container.set_objects(
            [
                make_track(pt=0.1, id=0),
                make_track(pt=1.0, id=1),
                make_track(pt=0.1, id=2),
                make_track(pt=2.0, id=3),
                make_track(pt=3.0, id=4),
            ]
        )
        return container

    def test_factories(self, container):
        """The container builds both iterable flavors."""
        all_objs, accepted = container.all(), container.accepted()
        assert isinstance(all_objs, IterableContainer)
        assert isinstance(accepted, IterableContainer)
        assert all_objs.container is container
        assert not all_objs.use_accepted
        assert accepted.use_accepted

    def test_accepted_iteration(self, container):
        """The accepted iterable skips rejected objects."""
        accepted = container.accepted()
        assert len(accepted) == container.n_accepted == 3
        assert [t.id for t in accepted] == [1, 3, 4]
        assert [t.id for t in reversed(accepted)] == [4, 3, 1]
        assert accepted[1] is container[3]
        assert accepted[3] is None

    def test_all_iteration(self, container):
        """The full iterable visits every object."""
        assert [t.id for t in container.all()] == [0, 1, 2, 3, 4]

    def test_rejection_summary(self, container):
        """Rejections are counted per reason."""
        assert container.rejection_summary() == {"PT_CUT": 2}

    def test_combined_reasons(self, make_track):
        """Reasons made of several cut bits count once per cut."""

        class StrictTrackContainer(TrackContainer):
            def apply_object_cuts(self, track):
                if track.n_tpc_clusters < 70:
                    return RejectionReason.TPC_CLUSTER_CUT | RejectionReason.DCA_CUT
                return RejectionReason.NONE

        container = StrictTrackContainer()
        container.set_objects(
            [make_track(n_tpc_clusters=10), make_track(n_tpc_clusters=20), None]
        )
        assert container.rejection_summary() == {
            "TPC_CLUSTER_CUT": 2,
            "DCA_CUT": 2,
            "NULL_OBJECT": 1,
        }

    def test_reload_snapshot(self, container, make_track):
        """Iterables keep their index map when the container is reloaded."""
        accepted = container.accepted()
        container.set_objects([make_track(id=7)])
        assert len(accepted) == 3
        assert len(container.accepted()) == 1

    def test_cluster_container(self, make_cluster):
        """Cluster containers share the same iterable interface."""
        container = ClusterContainer()
        container.set_objects([make_cluster(energy=2.0, id=0), None])
        assert container.objects.default is CaloCluster
        assert [c.id for c in container.accepted()] == [0]
        assert len(container.all()) == 2
