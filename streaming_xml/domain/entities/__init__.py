"""Domain entities.

Record type aliases and the array encoding policy.
"""

from .record import ArrayEncodingPolicy, Record, Scalar, Value

__all__ = [
    "ArrayEncodingPolicy",
    "Record",
    "Scalar",
    "Value",
]
