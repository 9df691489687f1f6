"""Module which contains enumerated variables shared across the project."""

from enum import IntFlag

__all__ = ["RejectionReason", "reason_names"]


class RejectionReason(IntFlag):
    """Bit codes of the cuts which can reject an object from a container."""

    NONE = 0
    NULL_OBJECT = 1 << 0
    PT_CUT = 1 << 1
    ACCEPTANCE_CUT = 1 << 2
    CHARGE_CUT = 1 << 3
    TPC_CLUSTER_CUT = 1 << 4
    DCA_CUT = 1 << 5
    TPC_SIGNAL_CUT = 1 << 6
    CLUSTER_TYPE_CUT = 1 << 7
    ENERGY_CUT = 1 << 8
    N_CELLS_CUT = 1 << 9
    TIME_CUT = 1 << 10


def reason_names(value):
    """Decomposes a rejection bit code into the names of its cuts.

    Parameters
    ----------
    value : Union[int, RejectionReason]
        Rejection bit code

    Returns
    -------
    List[str]
        Names of the cuts set in the bit code, in increasing bit order
    """
    names = []
    for reason in RejectionReason:
        if reason.value and int(value) & reason.value:
            names.append(reason.name)

    return names
