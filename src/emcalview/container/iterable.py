"""Iterable interface over the objects of a detector-object container.

An :class:`IterableContainer` presents the content of an
:class:`~emcalview.container.base.ObjectContainer` either as all of its
objects or as the accepted ones only. It should not be created by hand,
the container provides both flavors:

.. code-block:: python

    accepted = container.accepted()  # iterable over accepted entries
    all_objs = container.all()       # iterable over all entries

    for track in accepted:
        ...

The iterable does not own the underlying container. It is a snapshot of the
container content at construction time: reloading the container invalidates
it, as the accepted index map is not rebuilt.
"""

from copy import copy
from warnings import warn

import numpy as np

__all__ = ["IterableContainer", "ContainerIterator"]


class IterableContainer:
    """Iterable view over all or only the accepted objects of a container.

    Attributes
    ----------
    container : ObjectContainer
        Container to be iterated over (not owned)
    use_accepted : bool
        If `True`, only iterate over the accepted objects
    accept_indices : np.ndarray
        (K) Read-only map from accepted position to container index
    """

    def __init__(self, container, use_accepted=False):
        """Initialize the iterable, build the index map if needed.

        Parameters
        ----------
        container : ObjectContainer
            Container to iterate over. Must provide `len`, item access and
            an `accept_object(index)` method which returns an
            (accepted, rejection reason) pair.
        use_accepted : bool, default False
            If `True`, iterate over accepted objects only, otherwise over
            all the objects in the container
        """
        if container is None:
            raise ValueError("Cannot build an iterable over a null container.")

        self._container = container
        self._use_accepted = bool(use_accepted)
        self._accept_indices = np.empty(0, dtype=np.int64)
        self._accept_indices.setflags(write=False)
        if self._use_accepted:
            self._build_accept_indices()

    def _build_accept_indices(self):
        """Builds the list of accepted indices inside the container.

        Every object of the container is checked once, in order. The
        rejection reason is not used here.
        """
        indices = []
        for index in range(len(self._container)):
            accepted, _ = self._container.accept_object(index)
            if accepted:
                indices.append(index)

        self._accept_indices = np.asarray(indices, dtype=np.int64)
        self._accept_indices.setflags(write=False)

    def __copy__(self):
        """Shallow copy: shares the container, copies the index map."""
        result = self.__class__.__new__(self.__class__)
        result._container = self._container
        result._use_accepted = self._use_accepted
        result._accept_indices = self._accept_indices.copy()
        result._accept_indices.setflags(write=False)

        return result

    @property
    def container(self):
        """Underlying container (not owned by the iterable)."""
        return self._container

    @property
    def use_accepted(self):
        """Whether the iterable only runs over accepted objects."""
        return self._use_accepted

    @property
    def accept_indices(self):
        """Read-only map from accepted position to container index."""
        return self._accept_indices

    @property
    def n_entries(self):
        """Number of objects to iterate over.

        Returns
        -------
        int
            Number of accepted objects if only accepted objects are used,
            size of the container otherwise
        """
        if self._use_accepted:
            return len(self._accept_indices)

        return len(self._container)

    def __len__(self):
        return self.n_entries

    def __int__(self):
        return self.n_entries

    def __getitem__(self, index):
        """Returns the object at a given position of the iterable.

        If the iterable runs over accepted objects, the position is that of
        the n-th accepted object, rejected objects in between are skipped
        via the index map. Otherwise the position is that of the container.

        Negative positions are out of range, they do not wrap around.

        Parameters
        ----------
        index : int
            Position of the object inside the iterable

        Returns
        -------
        object
            Object at the given position (`None` if out of range)
        """
        if index < 0 or index >= self.n_entries:
            return None

        if self._use_accepted:
            return self._container[int(self._accept_indices[index])]

        return self._container[index]

    def begin(self):
        """Forward iterator at the first entry."""
        return ContainerIterator(self, 0, True)

    def end(self):
        """Forward iterator behind the last entry."""
        return ContainerIterator(self, self.n_entries, True)

    def rbegin(self):
        """Backward iterator at the last entry."""
        return ContainerIterator(self, self.n_entries - 1, False)

    def rend(self):
        """Backward iterator before the first entry."""
        return ContainerIterator(self, -1, False)

    def __iter__(self):
        it, end = self.begin(), self.end()
        while it != end:
            yield it.value
            it.increment()

    def __reversed__(self):
        it, end = self.rbegin(), self.rend()
        while it != end:
            yield it.value
            it.increment()

    def __repr__(self):
        mode = "accepted" if self._use_accepted else "all"
        return (
            f"{self.__class__.__name__}({type(self._container).__name__}, "
            f"{mode}, n_entries={self.n_entries})"
        )


class ContainerIterator:
    """Bidirectional iterator over an :class:`IterableContainer`.

    Incrementing moves the position up for a forward iterator and down for
    a backward iterator, decrementing does the opposite. Two iterators are
    compared by position only.

    Iterators should be built by the iterable via `begin`, `end`,
    `rbegin` and `rend`.
    """

    def __init__(self, iterable, position, forward=True):
        """Sets the underlying iterable, starting position and direction.

        Parameters
        ----------
        iterable : IterableContainer
            Iterable to run over (not owned)
        position : int
            Starting position of the iteration
        forward : bool, default True
            Direction of the iteration
        """
        self._iterable = iterable
        self._position = position
        self._forward = forward

    @property
    def iterable(self):
        return self._iterable

    @property
    def position(self):
        return self._position

    @property
    def forward(self):
        return self._forward

    @property
    def value(self):
        """Object at the position of the iterator (`None` if out of range)."""
        return self._iterable[self._position]

    def increment(self):
        """Prefix increment: moves one step in the iteration direction.

        Returns
        -------
        ContainerIterator
            This iterator, after the move
        """
        self._position += 1 if self._forward else -1
        return self

    def decrement(self):
        """Prefix decrement: moves one step against the iteration direction.

        Returns
        -------
        ContainerIterator
            This iterator, after the move
        """
        self._position += -1 if self._forward else 1
        return self

    def post_increment(self):
        """Postfix increment.

        Returns
        -------
        ContainerIterator
            Copy of the iterator in its state before the move
        """
        state = copy(self)
        self.increment()
        return state

    def post_decrement(self):
        """Postfix decrement.

        Returns
        -------
        ContainerIterator
            Copy of the iterator in its state before the move
        """
        state = copy(self)
        self.decrement()
        return state

    def _check_comparable(self, other):
        """Warns when comparing iterators of two different iterables."""
        if __debug__ and self._iterable is not other._iterable:
            warn(
                "Comparing iterators which belong to different iterables, "
                "only their positions are compared.",
                RuntimeWarning,
                stacklevel=3,
            )

    def __eq__(self, other):
        if not isinstance(other, ContainerIterator):
            return NotImplemented

        self._check_comparable(other)
        return self._position == other._position

    def __ne__(self, other):
        if not isinstance(other, ContainerIterator):
            return NotImplemented

        self._check_comparable(other)
        return self._position != other._position

    __hash__ = None

    def __repr__(self):
        direction = "forward" if self._forward else "backward"
        return f"{self.__class__.__name__}(position={self._position}, {direction})"
