"""Module with the parent class of all detector-object containers."""

from collections import Counter

from emcalview.data.list import ObjectList
from emcalview.utils.enums import RejectionReason, reason_names

from .iterable import IterableContainer

__all__ = ["ObjectContainer"]


class ObjectContainer:
    """Parent class of all detector-object containers.

    A container holds the objects of one event and decides which of them
    are accepted, based on kinematic cuts shared by all objects and on
    object-specific cuts defined by the derived classes. It provides
    iterables over all or only the accepted objects.

    Attributes
    ----------
    name : str
        Name of the container (as specified in the configuration)
    obj_type : type
        Record class of the objects stored in the container
    data_key : str
        Name of the data product loaded into the container
    """

    # Name of the container (as specified in the configuration)
    name = ""

    # Alternative allowed names of the container
    aliases = ()

    # Record class of the objects stored in the container
    obj_type = object

    def __init__(
        self,
        data_key=None,
        min_pt=0.15,
        max_pt=1000.0,
        min_eta=-0.9,
        max_eta=0.9,
        min_phi=-10.0,
        max_phi=10.0,
    ):
        """Store the kinematic cuts shared by all containers.

        Parameters
        ----------
        data_key : str, optional
            Name of the data product to load in the container
        min_pt : float, default 0.15
            Minimum transverse momentum (inclusive) in GeV/c
        max_pt : float, default 1000.
            Maximum transverse momentum (exclusive) in GeV/c
        min_eta : float, default -0.9
            Minimum pseudorapidity
        max_eta : float, default 0.9
            Maximum pseudorapidity
        min_phi : float, default -10.
            Minimum azimuthal angle
        max_phi : float, default 10.
            Maximum azimuthal angle
        """
        assert min_pt <= max_pt, "The pT window is empty."
        assert min_eta <= max_eta, "The pseudorapidity window is empty."
        assert min_phi <= max_phi, "The azimuthal window is empty."

        self.data_key = data_key
        self.min_pt = min_pt
        self.max_pt = max_pt
        self.min_eta = min_eta
        self.max_eta = max_eta
        self.min_phi = min_phi
        self.max_phi = max_phi

        self._objects = ObjectList([], default=self.obj_type)

    def set_objects(self, objects):
        """Replaces the content of the container with the objects of an event.

        Iterables built from the previous content are invalidated.

        Parameters
        ----------
        objects : List[object]
            Objects of the event. Missing objects may be given as `None`.
        """
        for obj in objects:
            if obj is not None and not isinstance(obj, self.obj_type):
                raise TypeError(
                    f"`{self.__class__.__name__}` stores "
                    f"`{self.obj_type.__name__}` objects, got "
                    f"`{type(obj).__name__}`."
                )

        self._objects = ObjectList(objects, default=self.obj_type)

    @property
    def objects(self):
        """List of all the objects stored in the container."""
        return self._objects

    @property
    def n_entries(self):
        """Number of objects stored, irrespective of their acceptance."""
        return len(self._objects)

    @property
    def n_accepted(self):
        """Number of objects passing the container cuts."""
        return sum(self.accept_object(i)[0] for i in range(self.n_entries))

    def __len__(self):
        return self.n_entries

    def __getitem__(self, index):
        """Returns the object stored at a given index.

        Parameters
        ----------
        index : int
            Index of the object, in [0, number of entries)

        Returns
        -------
        object
            Stored object (may be `None` if it was stored as missing)
        """
        if index < 0 or index >= self.n_entries:
            raise IndexError(
                f"Index {index} out of range for a container with "
                f"{self.n_entries} entries."
            )

        return self._objects[index]

    def accept_object(self, index):
        """Checks whether the object at a given index passes the cuts.

        Parameters
        ----------
        index : int
            Index of the object in the container

        Returns
        -------
        bool
            `True` if the object is accepted
        RejectionReason
            Cut which rejected the object (`NONE` if accepted)
        """
        obj = self[index]
        if obj is None:
            return False, RejectionReason.NULL_OBJECT

        reason = self.apply_kinematic_cuts(obj)
        if not reason:
            reason = self.apply_object_cuts(obj)

        return not reason, reason

    def apply_kinematic_cuts(self, obj):
        """Applies the pT, pseudorapidity and azimuthal cuts.

        Parameters
        ----------
        obj : object
            Object which exposes `pt`, `eta` and `phi` attributes

        Returns
        -------
        RejectionReason
            First cut which fails (`NONE` if none does)
        """
        if obj.pt < self.min_pt or obj.pt >= self.max_pt:
            return RejectionReason.PT_CUT

        if not self.min_eta <= obj.eta <= self.max_eta:
            return RejectionReason.ACCEPTANCE_CUT

        if not self.min_phi <= obj.phi <= self.max_phi:
            return RejectionReason.ACCEPTANCE_CUT

        return RejectionReason.NONE

    def apply_object_cuts(self, obj):
        """Applies the cuts specific to an object type.

        Placeholder method to be overridden by the derived classes.

        Parameters
        ----------
        obj : object
            Object which has passed the kinematic cuts

        Returns
        -------
        RejectionReason
            First cut which fails (`NONE` if none does)
        """
        return RejectionReason.NONE

    def all(self):
        """Iterable over all the objects of the container."""
        return IterableContainer(self, False)

    def accepted(self):
        """Iterable over the accepted objects of the container."""
        return IterableContainer(self, True)

    def rejection_summary(self):
        """Counts the rejected objects per rejection reason.

        Returns
        -------
        Dict[str, int]
            Number of rejected objects for each cut name
        """
        counts = Counter()
        for index in range(self.n_entries):
            accepted, reason = self.accept_object(index)
            if not accepted:
                counts.update(reason_names(reason))

        return dict(counts)

    def __repr__(self):
        return f"{self.__class__.__name__}(n_entries={self.n_entries})"
