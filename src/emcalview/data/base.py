"""Module with a parent class of all detector record structures."""

from dataclasses import dataclass

import numpy as np


@dataclass(eq=False)
class DataBase:
    """Base class of all detector records.

    Defines basic methods shared by all records.
    """

    # Fixed-length attributes as (key, size) or (key, (size, dtype)) pairs
    _fixed_length_attrs = ()

    # Variable-length attributes as (key, dtype) pairs
    _var_length_attrs = ()

    # Boolean attributes
    _bool_attrs = ()

    def __post_init__(self):
        """Immediately called after building the class attributes.

        Gives default values to array-like attributes. If a default value was
        provided in the attribute definition, all instances of this class
        would point to the same memory location. Also casts the array-likes
        provided as lists to numpy arrays.
        """
        for attr, dtype in self._var_length_attrs:
            value = getattr(self, attr)
            if value is None:
                setattr(self, attr, np.empty(0, dtype=dtype))
            else:
                setattr(self, attr, np.asarray(value, dtype=dtype))

        for attr, size in self._fixed_length_attrs:
            if not isinstance(size, tuple):
                dtype = np.float32
            else:
                size, dtype = size

            value = getattr(self, attr)
            if value is None:
                setattr(self, attr, np.full(size, -np.inf, dtype=dtype))
            else:
                value = np.asarray(value, dtype=dtype)
                assert len(value) == size, (
                    f"The `{attr}` attribute must be of length {size}, "
                    f"got {len(value)}."
                )
                setattr(self, attr, value)

        # Cast 8-bit unsigned integers (as stored in files) back to booleans
        for attr in self._bool_attrs:
            if isinstance(getattr(self, attr), np.integer):
                setattr(self, attr, bool(getattr(self, attr)))

    def __eq__(self, other):
        """Checks that all attributes of two records are the same.

        This overloads the default dataclass `__eq__` method to include an
        appropriate check for vector (numpy) attributes.

        Parameters
        ----------
        other : object
            Other instance of the same record class

        Returns
        -------
        bool
            `True` if all attributes of both objects are identical
        """
        if self.__class__ != other.__class__:
            return False

        for k, v in self.__dict__.items():
            v_other = getattr(other, k)
            if np.isscalar(v):
                if v_other != v:
                    return False

            elif v.shape != v_other.shape or (v_other != v).any():
                return False

        return True
