"""Application layer for streaming-xml.

This layer contains the conversion use case and its request/response models.
It defines ports (interfaces) for logging, record sources, writers and
validators.
"""

from .models import (
    ConversionSummary,
    ConvertRequest,
    ConvertResponse,
    ValidationResult,
)

# The use case is imported directly to keep this package import-light:
#   from streaming_xml.application.conversion_use_case import ConvertRecordsUseCase

__all__ = [
    "ConversionSummary",
    "ConvertRequest",
    "ConvertResponse",
    "ValidationResult",
]
