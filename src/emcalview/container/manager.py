"""Manages the containers of one analysis."""

import logging
from collections import OrderedDict
from copy import deepcopy

import yaml

from emcalview.utils.config import load_config
from emcalview.utils.logger import logger

from .factories import container_factory


class ContainerManager:
    """Manager in charge of the detector-object containers.

    It builds all the containers once and loads the objects of each event
    into them.
    """

    def __init__(self, cfg):
        """Initialize the containers.

        Parameters
        ----------
        cfg : dict
            Container configurations, one block per container. If a block
            does not name a container class, its key is used instead. A
            block may also be the bare name of a container class.
        """
        cfg = deepcopy(cfg) or {}
        assert isinstance(cfg, dict), (
            f"The container configuration must be a dictionary, got {type(cfg)}."
        )

        self.containers = OrderedDict()
        for key, block in cfg.items():
            if block is None:
                block = {}
            elif isinstance(block, str):
                block = {"name": block}
            block.setdefault("name", key)
            cfg[key] = block
            self.containers[key] = container_factory(block)

        logger.info(
            "Container configuration:\n%s",
            yaml.dump(cfg, default_flow_style=None, sort_keys=False),
        )

    @classmethod
    def from_file(cls, cfg_path):
        """Initialize the manager from the `containers` block of a
        configuration file.

        Parameters
        ----------
        cfg_path : str
            Path to the YAML configuration file

        Returns
        -------
        ContainerManager
            Initialized manager
        """
        cfg = load_config(cfg_path)
        assert "containers" in cfg, (
            f"The configuration file {cfg_path} has no `containers` block."
        )

        return cls(cfg["containers"])

    def __getitem__(self, key):
        return self.containers[key]

    def __call__(self, data, use_accepted=True):
        """Load the data products of one event into the containers.

        Parameters
        ----------
        data : dict
            Dictionary of data products
        use_accepted : bool, default True
            If `True`, the returned iterables only run over accepted objects

        Returns
        -------
        Dict[str, IterableContainer]
            One iterable per container
        """
        result = {}
        for key, container in self.containers.items():
            data_key = container.data_key or key
            if data_key not in data:
                raise KeyError(
                    f"Container `{key}` requires the `{data_key}` data "
                    f"product, which is not available."
                )

            container.set_objects(data[data_key])
            if use_accepted:
                result[key] = container.accepted()
            else:
                result[key] = container.all()

            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(
                    "Container %s: %d entries, %d accepted. Rejections: %s",
                    key,
                    container.n_entries,
                    len(result[key]) if use_accepted else container.n_accepted,
                    container.rejection_summary(),
                )

        return result
