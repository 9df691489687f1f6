"""Module with a class object which represent object lists."""

__all__ = ["ObjectList"]


class ObjectList(list):
    """List with a default record class used to type it when it is empty.

    Attributes
    ----------
    default : type
        Record class of the objects stored in the list
    """

    def __init__(self, object_list, default):
        """Initialize the list and the default record class.

        Parameters
        ----------
        object_list : List[object]
            Object list
        default : type
            Record class of the objects stored in the list
        """
        super().__init__(object_list)
        self.default = default
