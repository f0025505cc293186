"""Domain layer for streaming-xml.

This layer contains the record model and the pure rendering logic.
It is independent of file handles, adapters and the CLI.
"""
