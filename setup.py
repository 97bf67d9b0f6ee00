# #!/usr/bin/env python

"""setup.py script for py_vec3 library"""

import os
import warnings

from setuptools import setup, find_packages


def compiled_modules():
    """Build the value types with mypyc when PYVEC3_MYPYC=1 is set."""
    if os.environ.get("PYVEC3_MYPYC") != "1":
        return None
    try:
        from mypyc.build import mypycify
    except ImportError as err:
        warnings.warn(f"Can't compile c-extension due to: {err}")
        warnings.warn("Continue installation in pure python mode")
        return None
    return mypycify(
        [
            'py_vec3/vector.py',
            'py_vec3/viewport.py',
        ],
    )


setup(
    name='py_vec3',
    version='1.0.0',
    description='Generic three-component vector for geometry and physics computations',
    packages=find_packages(include=['py_vec3', 'py_vec3.*']),
    python_requires='>=3.9',
    install_requires=[
        'numpy>=1.21',
        'typing_extensions>=4.0',
        'tomli>=2.0; python_version < "3.11"',
    ],
    extras_require={
        'test': ['pytest>=7'],
        'dev': ['mypy', 'pytest>=7'],
    },
    ext_modules=compiled_modules(),
)
