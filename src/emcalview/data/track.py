"""Module with a data class object which represents a reconstructed
charged-particle track.
"""

from dataclasses import dataclass

import numpy as np

from .base import DataBase

__all__ = ["Track"]


@dataclass(eq=False)
class Track(DataBase):
    """Charged-particle track information.

    Attributes
    ----------
    id : int
        Index of the track in the event
    momentum : np.ndarray
        (3) Momentum vector at the primary vertex in GeV/c
    charge : int
        Electric charge sign of the track (-1 or 1)
    n_tpc_clusters : int
        Number of TPC clusters attached to the track
    dca_xy : float
        Distance of closest approach to the vertex in the transverse plane (cm)
    dca_z : float
        Distance of closest approach to the vertex along the beam axis (cm)
    tpc_signal : float
        Specific energy loss measured in the TPC (arbitrary units)
    has_tof : bool
        Whether the track has a matched time-of-flight measurement
    """

    id: int = -1
    momentum: np.ndarray = None
    charge: int = 0
    n_tpc_clusters: int = 0
    dca_xy: float = -1.0
    dca_z: float = -1.0
    tpc_signal: float = -1.0
    has_tof: bool = False

    # Fixed-length attributes
    _fixed_length_attrs = (("momentum", 3),)

    # Boolean attributes
    _bool_attrs = ("has_tof",)

    @property
    def pt(self):
        """Transverse momentum in GeV/c."""
        return float(np.hypot(self.momentum[0], self.momentum[1]))

    @property
    def p(self):
        """Total momentum in GeV/c."""
        return float(np.linalg.norm(self.momentum))

    @property
    def eta(self):
        """Pseudorapidity of the track.

        Returns
        -------
        float
            Pseudorapidity, infinite (with the sign of p_z) along the beam axis
        """
        pt = self.pt
        if pt > 0:
            return float(np.arcsinh(self.momentum[2] / pt))

        return float(np.copysign(np.inf, self.momentum[2]))

    @property
    def phi(self):
        """Azimuthal angle in [0, 2π)."""
        return float(np.arctan2(self.momentum[1], self.momentum[0]) % (2 * np.pi))
