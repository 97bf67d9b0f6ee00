"""py_vec3 exception types.

Exception Hierarchy
-------------------

Exception (built-in Python)
└── RuntimeError
    └── VectorError
        └── ZeroLengthError

- VectorError: Base class for vector operation failures. Not raised directly.

- ZeroLengthError: Raised when an operation needs a non-zero length and does
  not get one. Contains:
  - operation: Name of the failing operation ('normalize' or 'angle')
  - magnitude: The length (or product of lengths) that failed the check

Degenerate results that are not errors (total internal reflection in
`Vector3.refract`, division by zero, a projection onto the viewer plane) are
returned as ordinary values and never raise.
"""
from __future__ import annotations

__all__ = (
    'VectorError',
    'ZeroLengthError',
)


class VectorError(RuntimeError):
    """Vector operation error."""


class ZeroLengthError(VectorError):
    """Exception for operations on zero-length vectors.

    Contains:
    - The name of the operation
    - The offending magnitude
    """

    NORMALIZE = "normalize"
    ANGLE = "angle"

    def __init__(self, operation: str, magnitude: float, message: str = ""):
        """
        Parameters:
        - operation: The operation that failed
        - magnitude: The length that failed the `> 0` check
        - message: Optional message override
        """
        self.operation: str = operation
        self.magnitude: float = magnitude
        if not message:
            if operation == self.NORMALIZE:
                message = "Length is zero cannot normalize."
            else:
                message = "One of the vectors has zero length"
        super().__init__(message)
