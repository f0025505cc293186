"""Port interfaces for external dependencies.

This module defines abstract interfaces (protocols) that external
adapters must implement. This enables dependency injection and testing.
"""

from .services import (
    LoggerPort,
    RecordSourcePort,
    RecordWriterPort,
    WriterFactoryPort,
    XMLValidatorPort,
)

__all__ = [
    "LoggerPort",
    "RecordSourcePort",
    "RecordWriterPort",
    "WriterFactoryPort",
    "XMLValidatorPort",
]
