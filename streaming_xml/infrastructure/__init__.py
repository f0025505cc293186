"""Infrastructure layer for streaming-xml.

This layer contains the document session, the record sources and the other
I/O adapters. It implements the ports defined in the application layer.
"""

__all__ = []
