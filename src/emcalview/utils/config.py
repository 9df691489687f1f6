"""Module in charge of loading container configuration files."""

import os
import re
from copy import deepcopy

import yaml

# Matches dot-notation override keys, e.g. "containers.tracks.min_pt"
DOTTED_KEY = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*(?:\.[a-zA-Z_][a-zA-Z0-9_]*)+$")


class ConfigLoader(yaml.SafeLoader):
    """YAML loader which supports the `!include` tag.

    An included file is looked for in the directory of the file which
    includes it and is loaded in place of the tagged value.
    """

    def __init__(self, stream):
        """Initialize the loader.

        Parameters
        ----------
        stream : _io.TextIOWrapper
            Output of python's `open` function on a yaml file
        """
        self._root = os.path.split(stream.name)[0]
        super().__init__(stream)

    def include(self, node):
        """Load and include a YAML file requested in the base configuration.

        Parameters
        ----------
        node : yaml.ScalarNode
            Node which holds the name of the file to include
        """
        filename = os.path.join(self._root, self.construct_scalar(node))
        with open(filename, "r", encoding="utf-8") as f:
            return yaml.load(f, Loader=ConfigLoader)


ConfigLoader.add_constructor("!include", ConfigLoader.include)


def _deep_merge(base_dict, override_dict):
    """Recursively merge `override_dict` into a copy of `base_dict`."""
    result = deepcopy(base_dict)
    for key, value in override_dict.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def _override(config, key_path, value):
    """Sets the parameter pointed to by a dotted key, e.g.
    "containers.tracks.min_pt", creating missing blocks on the way.

    String values are read as YAML scalars, so "0.5" overrides with a float.
    """
    if isinstance(value, str):
        value = yaml.safe_load(value)

    *blocks, leaf = key_path.split(".")
    current = config
    for block in blocks:
        current = current.setdefault(block, {})
        if not isinstance(current, dict):
            raise ValueError(f"Cannot set '{key_path}': '{block}' is not a block")

    current[leaf] = value


def load_config(cfg_path):
    """Load a container configuration file to a dictionary.

    On top of plain YAML, the file may:
    - list base files under `include`, merged in order below the file itself;
    - load a block from another file with the `!include` tag;
    - override single parameters with dotted keys ("containers.tracks.min_pt").

    Parameters
    ----------
    cfg_path : str
        Path to the configuration file

    Returns
    -------
    dict
        Loaded and merged configuration dictionary
    """
    with open(cfg_path, "r", encoding="utf-8") as f:
        content = yaml.load(f, Loader=ConfigLoader) or {}

    includes = content.pop("include", [])
    if isinstance(includes, str):
        includes = [includes]
    elif not isinstance(includes, list):
        raise ValueError(f"'include' must be a file name or a list, got {includes}")

    config = {}
    root_dir = os.path.dirname(os.path.abspath(cfg_path))
    for include in includes:
        include_path = os.path.join(root_dir, include)
        if not os.path.exists(include_path):
            raise FileNotFoundError(f"Included file not found: {include_path}")
        config = _deep_merge(config, load_config(include_path))

    overrides = {k: content.pop(k) for k in list(content) if DOTTED_KEY.match(k)}
    config = _deep_merge(config, content)
    for key_path, value in overrides.items():
        _override(config, key_path, value)

    return config
