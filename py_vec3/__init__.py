"""Three-component vector math for geometry and physics."""

import importlib.metadata

__version__ = importlib.metadata.version("py_vec3")

# Third-party imports
from typing_extensions import Optional

# Local imports
from .config import Vec3Config, basic_config, get_config, load_config
from .logger import logger as log
from .viewport import Viewport


def _basic_config(filename: Optional[str] = None,
                  viewport: Optional[Viewport] = None,
                  suppress_warnings: bool = False) -> None:
    """Install settings from a file or from an explicit viewport.

    Args:
        filename: Configuration file path
        viewport: Default viewport for projections
        suppress_warnings: If True, suppress warning messages

    Raises:
        ValueError: If both filename and viewport are provided
    """
    if filename and viewport:
        raise ValueError("Can't use viewport and config file at same time")
    if not filename and viewport:
        basic_config(get_config()._replace(viewport=viewport))
        log.debug(f"Default viewport set to {viewport}")
    else:
        # trying to load definitions from pyvec3.toml
        load_config(filename, suppress_warnings)


basicConfig = _basic_config


from .exceptions import VectorError, ZeroLengthError
from .logger import logger
from .vector import Vector3, Vector3f

__all__ = (
    'Vector3',
    'Vector3f',
    'Viewport',
    'VectorError',
    'ZeroLengthError',
    'Vec3Config',
    'basicConfig',
    'basic_config',
    'get_config',
    'load_config',
    'logger',
)
