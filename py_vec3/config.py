"""Global configuration of the py_vec3 library.

Settings are read from a `.pyvec3.toml` (or `pyvec3.toml`) file, searched for
from the current working directory upwards and then from the package
directory upwards:

    ```toml
    [pyvec3.viewport]
    width = 800
    height = 600
    fov = 300.0
    viewer_distance = 5.0
    ```
"""
import os
import sys
from typing import Any, Dict, NamedTuple, Optional

from py_vec3.logger import logger
from py_vec3.viewport import Viewport

if sys.version_info[:2] < (3, 11):
    import tomli as tomllib
else:
    import tomllib

__all__ = ('Vec3Config', 'basic_config', 'get_config', 'find_config_file', 'load_config')

CONFIG_FILENAMES = ('.pyvec3.toml', 'pyvec3.toml')


class Vec3Config(NamedTuple):
    viewport: Viewport = Viewport()


_PYVEC3_CONFIG = Vec3Config()


def basic_config(config: Vec3Config) -> None:
    global _PYVEC3_CONFIG
    _PYVEC3_CONFIG = config


def get_config() -> Vec3Config:
    return _PYVEC3_CONFIG


def find_config_file(start_dir: Optional[str] = None) -> Optional[str]:
    """Search for a config file starting from `start_dir` and moving up.

    Args:
        start_dir: The directory to start searching from. Defaults to the
            current working directory.

    Returns:
        Absolute path of the first file found, otherwise None.
    """
    current_dir = os.path.abspath(start_dir if start_dir is not None else os.getcwd())
    while True:
        for name in CONFIG_FILENAMES:
            path = os.path.join(current_dir, name)
            if os.path.exists(path):
                return os.path.abspath(path)

        parent_dir = os.path.dirname(current_dir)
        # reached the filesystem root
        if parent_dir == current_dir:
            return None
        current_dir = parent_dir


def _viewport_from_table(table: Dict[str, Any]) -> Viewport:
    known = Viewport._fields
    unknown = sorted(key for key in table if key not in known)
    if unknown:
        logger.warning(f"Ignoring unknown viewport keys: {', '.join(unknown)}")
    return Viewport()._replace(**{key: table[key] for key in known if key in table})


def load_config(filepath: Optional[str] = None, suppress_warnings: bool = False) -> Vec3Config:
    """Load configuration from a TOML file and make it the active config.

    Args:
        filepath: Path to the configuration file. If None, searches for
            `.pyvec3.toml` or `pyvec3.toml`.
        suppress_warnings: If True, suppress warnings about missing sections.

    Returns:
        The loaded configuration. Defaults are used when no file is found.
    """
    if filepath is None:
        if (filepath := find_config_file()) is None:
            filepath = find_config_file(os.path.dirname(__file__))

    config = Vec3Config()
    if filepath is not None:
        logger.debug(f"Found {os.path.basename(filepath)} at {os.path.dirname(filepath)}")

        with open(filepath, "rb") as fp:
            _config = tomllib.load(fp)

        if _pyvec3 := _config.get('pyvec3'):
            if (viewport := _pyvec3.get('viewport')) is not None:
                config = config._replace(viewport=_viewport_from_table(viewport))
            elif not suppress_warnings:
                logger.warning("Config has no `pyvec3.viewport` section")
        elif not suppress_warnings:
            logger.warning("Config has no `pyvec3` section")
    else:
        logger.debug("No config file found, using defaults")

    basic_config(config)
    logger.debug("py_vec3 config load success")
    return config
