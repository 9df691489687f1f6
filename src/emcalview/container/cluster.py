"""Container of calorimeter clusters."""

from emcalview.data.cluster import CaloCluster
from emcalview.utils.enums import RejectionReason

from .base import ObjectContainer

__all__ = ["ClusterContainer"]


class ClusterContainer(ObjectContainer):
    """Container of calorimeter clusters.

    Clusters carry no momentum measurement, so the kinematic cuts are open
    unless configured. Clusters are instead selected on their detector,
    energy, cell multiplicity and time.
    """

    # Name of the container (as specified in the configuration)
    name = "clusters"

    # Alternative allowed names of the container
    aliases = ("cluster", "calo_clusters")

    # Record class of the objects stored in the container
    obj_type = CaloCluster

    def __init__(
        self,
        emcal_only=True,
        min_energy=0.0,
        min_n_cells=1,
        min_time=None,
        max_time=None,
        min_pt=0.0,
        min_eta=-10.0,
        max_eta=10.0,
        **kwargs,
    ):
        """Store the cluster cuts.

        Parameters
        ----------
        emcal_only : bool, default True
            If `True`, reject clusters which do not come from the EMCAL
        min_energy : float, default 0.
            Minimum cluster energy in GeV
        min_n_cells : int, default 1
            Minimum number of cells in the cluster
        min_time : float, optional
            Minimum cluster time-of-flight in seconds
        max_time : float, optional
            Maximum cluster time-of-flight in seconds
        min_pt : float, default 0.
            Minimum transverse momentum in GeV/c
        min_eta : float, default -10.
            Minimum pseudorapidity
        max_eta : float, default 10.
            Maximum pseudorapidity
        **kwargs : dict, optional
            Other kinematic cuts passed to :class:`ObjectContainer`
        """
        super().__init__(min_pt=min_pt, min_eta=min_eta, max_eta=max_eta, **kwargs)

        self.emcal_only = emcal_only
        self.min_energy = min_energy
        self.min_n_cells = min_n_cells
        self.min_time = min_time
        self.max_time = max_time

    def apply_object_cuts(self, cluster):
        """Applies the cluster cuts.

        Parameters
        ----------
        cluster : CaloCluster
            Cluster which has passed the kinematic cuts

        Returns
        -------
        RejectionReason
            First cut which fails (`NONE` if none does)
        """
        if self.emcal_only and not cluster.is_emcal:
            return RejectionReason.CLUSTER_TYPE_CUT

        if cluster.energy < self.min_energy:
            return RejectionReason.ENERGY_CUT

        if cluster.n_cells < self.min_n_cells:
            return RejectionReason.N_CELLS_CUT

        if self.min_time is not None and cluster.tof < self.min_time:
            return RejectionReason.TIME_CUT

        if self.max_time is not None and cluster.tof > self.max_time:
            return RejectionReason.TIME_CUT

        return RejectionReason.NONE
