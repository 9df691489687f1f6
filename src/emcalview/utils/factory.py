"""Functions needed to instantiate a container class from a dictionary.

This converts a YAML block into an instantiated object, checking that the
requested class exists and forwarding the remaining block entries to it.
"""

from copy import deepcopy

from .logger import logger


def module_dict(module, pattern=None):
    """Converts a module into a dictionary which maps class names onto classes.

    Each class is registered under its python name, under its `name`
    attribute (if it has one) and under each of its `aliases`.

    Parameters
    ----------
    module : module
        Module from which to fetch the classes
    pattern : str, optional
        If specified, only keep classes which contain it in their name

    Returns
    -------
    dict
        Dictionary which maps acceptable class names to classes themselves
    """
    result = {}
    for cls_name in getattr(module, "__all__", dir(module)):
        # Skip private objects
        if cls_name.startswith("_"):
            continue

        cls = getattr(module, cls_name)
        if pattern is not None and pattern not in cls.__name__:
            continue

        # Only consider classes defined in the module of interest
        if getattr(cls, "__module__", "").startswith(module.__name__):
            result[cls_name] = cls
            if getattr(cls, "name", ""):
                result[cls.name] = cls
            for alias in getattr(cls, "aliases", ()):
                result[alias] = cls

    return result


def instantiate(module_dict, cfg, **kwargs):
    """Instantiates a class based on a configuration dictionary.

    Two YAML structures are supported:

    .. code-block:: yaml

        tracks:
          name: tracks
          min_pt: 0.2

    or

    .. code-block:: yaml

        tracks:
          name: tracks
          kwargs:
            min_pt: 0.2

    Parameters
    ----------
    module_dict : dict
        Dictionary which maps a class name onto a class
    cfg : Union[str, dict]
        Configuration block (a bare string is a class name with no arguments)
    **kwargs : dict, optional
        Additional keyword arguments to pass to the class

    Returns
    -------
    object
        Instantiated object
    """
    if isinstance(cfg, str):
        cfg = {"name": cfg}

    config = deepcopy(cfg)
    assert "name" in config, "Could not find the name of the class under `name`"
    class_name = config.pop("name")

    if class_name not in module_dict:
        raise ValueError(
            f"Could not find '{class_name}' in the dictionary which maps "
            f"names to classes. Available names: {list(module_dict.keys())}"
        )

    # Gather the arguments, top-level keys must not clash with `kwargs`
    args = config.pop("args", [])
    kwargs = dict(config.pop("kwargs", {}), **kwargs)
    for key in config:
        assert key not in kwargs, (
            f"The keyword argument {key} is provided at the top level "
            "and under `kwargs`. Ambiguous."
        )
    kwargs.update(config)

    cls = module_dict[class_name]
    try:
        return cls(*args, **kwargs)

    except Exception as err:
        logger.error(
            f"Failed to instantiate {cls.__name__} with these arguments:\n"
            f"  - args: {args}\n  - kwargs: {kwargs}"
        )

        raise err
