"""Container of reconstructed charged-particle tracks."""

from emcalview.data.track import Track
from emcalview.utils.enums import RejectionReason

from .base import ObjectContainer

__all__ = ["TrackContainer"]


class TrackContainer(ObjectContainer):
    """Container of charged-particle tracks.

    On top of the kinematic cuts, applies track-quality cuts. Each of them
    is disabled when left to `None`.
    """

    # Name of the container (as specified in the configuration)
    name = "tracks"

    # Alternative allowed names of the container
    aliases = ("track",)

    # Record class of the objects stored in the container
    obj_type = Track

    def __init__(
        self,
        charge=None,
        min_tpc_clusters=None,
        max_dca_xy=None,
        max_dca_z=None,
        min_tpc_signal=None,
        max_tpc_signal=None,
        **kwargs,
    ):
        """Store the track-quality cuts.

        Parameters
        ----------
        charge : int, optional
            If specified, only keep tracks with this charge sign
        min_tpc_clusters : int, optional
            Minimum number of TPC clusters attached to the track
        max_dca_xy : float, optional
            Maximum absolute transverse distance to the vertex in cm
        max_dca_z : float, optional
            Maximum absolute longitudinal distance to the vertex in cm
        min_tpc_signal : float, optional
            Minimum TPC specific energy loss
        max_tpc_signal : float, optional
            Maximum TPC specific energy loss
        **kwargs : dict, optional
            Kinematic cuts passed to :class:`ObjectContainer`
        """
        super().__init__(**kwargs)

        assert charge is None or charge in (-1, 1), "The charge must be -1 or 1."
        self.charge = charge
        self.min_tpc_clusters = min_tpc_clusters
        self.max_dca_xy = max_dca_xy
        self.max_dca_z = max_dca_z
        self.min_tpc_signal = min_tpc_signal
        self.max_tpc_signal = max_tpc_signal

    def apply_object_cuts(self, track):
        """Applies the track-quality cuts.

        Parameters
        ----------
        track : Track
            Track which has passed the kinematic cuts

        Returns
        -------
        RejectionReason
            First cut which fails (`NONE` if none does)
        """
        if self.charge is not None and track.charge * self.charge <= 0:
            return RejectionReason.CHARGE_CUT

        if (
            self.min_tpc_clusters is not None
            and track.n_tpc_clusters < self.min_tpc_clusters
        ):
            return RejectionReason.TPC_CLUSTER_CUT

        if self.max_dca_xy is not None and abs(track.dca_xy) > self.max_dca_xy:
            return RejectionReason.DCA_CUT

        if self.max_dca_z is not None and abs(track.dca_z) > self.max_dca_z:
            return RejectionReason.DCA_CUT

        if self.min_tpc_signal is not None and track.tpc_signal < self.min_tpc_signal:
            return RejectionReason.TPC_SIGNAL_CUT

        if self.max_tpc_signal is not None and track.tpc_signal > self.max_tpc_signal:
            return RejectionReason.TPC_SIGNAL_CUT

        return RejectionReason.NONE
