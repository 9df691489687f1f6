"""Module with a data class object which represents a calorimeter cluster.

This follows the attributes set on reclustered EMCAL clusters.
"""

from dataclasses import dataclass

import numpy as np

from .base import DataBase

__all__ = ["CaloCluster"]


@dataclass(eq=False)
class CaloCluster(DataBase):
    """Calorimeter cluster information.

    Attributes
    ----------
    id : int
        Index of the cluster in the event
    energy : float
        Cluster energy in GeV
    position : np.ndarray
        (3) Global position of the cluster in cm
    n_cells : int
        Number of cells with a significant amplitude fraction
    cell_ids : np.ndarray
        (C) Absolute IDs of the cells in the cluster
    amplitude_fractions : np.ndarray
        (C) Fraction of each cell amplitude attributed to this cluster
    dispersion : float
        Cluster shower dispersion
    chi2 : float
        Cluster fit quality (-1 if not computed)
    tof : float
        Cluster time-of-flight in seconds
    n_exmax : int
        Number of local maxima in the cluster
    m02 : float
        Square of the shower shape long axis
    m20 : float
        Square of the shower shape short axis
    dist_to_bad_channel : float
        Distance to the closest bad tower (in cell units)
    is_emcal : bool
        Whether the cluster comes from the EMCAL (as opposed to PHOS)
    """

    id: int = -1
    energy: float = -1.0
    position: np.ndarray = None
    n_cells: int = 0
    cell_ids: np.ndarray = None
    amplitude_fractions: np.ndarray = None
    dispersion: float = -1.0
    chi2: float = -1.0
    tof: float = 0.0
    n_exmax: int = 0
    m02: float = -1.0
    m20: float = -1.0
    dist_to_bad_channel: float = -1.0
    is_emcal: bool = True

    # Fixed-length attributes
    _fixed_length_attrs = (("position", 3),)

    # Variable-length attributes
    _var_length_attrs = (("cell_ids", np.int32), ("amplitude_fractions", np.float32))

    # Boolean attributes
    _bool_attrs = ("is_emcal",)

    @property
    def eta(self):
        """Pseudorapidity of the cluster position seen from the nominal vertex."""
        rho = np.hypot(self.position[0], self.position[1])
        if rho > 0:
            return float(np.arcsinh(self.position[2] / rho))

        return float(np.copysign(np.inf, self.position[2]))

    @property
    def phi(self):
        """Azimuthal angle of the cluster position in [0, 2π)."""
        return float(np.arctan2(self.position[1], self.position[0]) % (2 * np.pi))

    @property
    def pt(self):
        """Transverse momentum of a massless particle depositing the
        cluster energy, in GeV/c.
        """
        return float(self.energy / np.cosh(self.eta))
