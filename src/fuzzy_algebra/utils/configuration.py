"""
Provides functions that load the configuration settings of the library.
"""

import logging
import pathlib
from functools import lru_cache
from typing import Union

from yacs.config import CfgNode

LOGGER = logging.getLogger(__name__)


def path_to_package_root() -> pathlib.Path:
    """
    Return the path to the root of the fuzzy_algebra package.

    Returns:
        The path to the root of the package.
    """
    return pathlib.Path(__file__).parent.parent


def load_configuration(
    file_name: Union[str, pathlib.Path] = "default_configuration.yaml",
    convert_data_types: bool = True,
) -> CfgNode:
    """
    Load and return the default configuration that should be used by the library, if another
    overriding configuration is not used in its place.

    Args:
        file_name: Union[str, pathlib.Path] Either a file name (str) where the function will look
        up the *.yaml configuration file in the package's 'configurations' directory, or a
        pathlib.Path where the object redirects the function to a specific location.
        convert_data_types: Whether to convert string values to their true values. For
        example, convert "1e-3" into a float.

    Returns:
        The configuration settings.
    """
    if isinstance(file_name, pathlib.Path):
        file_path = file_name
    else:
        file_path = path_to_package_root() / "configurations" / file_name
    LOGGER.debug("Loading configuration from %s", file_path)
    with open(file_path, "r", encoding="utf-8") as file:
        config = CfgNode.load_cfg(file)
    if convert_data_types:
        return parse_configuration(config)
    return config


def parse_configuration(config: CfgNode) -> CfgNode:
    """
    Given the configuration, parse through its values and convert them to their true values.
    YAML reads values such as "1e-3" or ".inf" as strings; the weight bounds must be floats.

    Args:
        config: The configuration settings.

    Returns:
        The updated configuration settings.
    """
    was_frozen = config.is_frozen()
    config.defrost()
    config.weights.lower = float(config.weights.lower)
    config.weights.upper = float(config.weights.upper)
    config.plot.y_limit = float(config.plot.y_limit)
    if was_frozen:
        config.freeze()
    return config


def load_and_override_default_configuration(path: pathlib.Path) -> CfgNode:
    """
    Load the default configuration file and override it with the configuration file given by
    'path'. This function is useful for when you want to override the default configuration
    settings, such as enabling strict weight validation for a specific application. The
    result takes effect where it is passed as the 'configuration' argument (e.g., of members,
    check_well_formed, or FuzzySet.plot).

    Args:
        path: A file path to the configuration file that should be merged
        with the default configuration.

    Returns:
        The custom configuration settings.
    """
    # the default configuration
    configuration = load_configuration()
    # the custom configuration
    custom_configuration = load_configuration(path, convert_data_types=False)
    configuration.merge_from_other_cfg(custom_configuration)
    return parse_configuration(configuration)


@lru_cache(maxsize=None)
def default_configuration() -> CfgNode:
    """
    The default configuration, loaded once and frozen so it may be shared.

    Returns:
        The frozen default configuration settings.
    """
    configuration = load_configuration()
    configuration.freeze()
    return configuration
