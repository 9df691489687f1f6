"""Construct a container class from its name."""

from emcalview.utils.factory import instantiate, module_dict

from . import cluster, track

# Build a dictionary of available containers
CONTAINER_DICT = {}
for module in [track, cluster]:
    CONTAINER_DICT.update(**module_dict(module))


def container_factory(cfg):
    """Instantiates a container from a configuration dictionary.

    Parameters
    ----------
    cfg : Union[str, dict]
        Container configuration

    Returns
    -------
    ObjectContainer
        Initialized container
    """
    return instantiate(CONTAINER_DICT, cfg)
