"""Package logger for py_vec3.

Only configuration loading reports through it; vector operations never log.
No output is produced until the application configures logging, e.g.
``logging.basicConfig(level=logging.DEBUG)``.
"""
import logging

__all__ = ('logger',)

logger: logging.Logger = logging.getLogger('py_vec3')
logger.addHandler(logging.NullHandler())
