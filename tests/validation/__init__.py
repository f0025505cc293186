"""Validation test suite for generated XML documents.

This package checks that documents written by the streaming writer can be
read back by standard XML tools and keep their structural guarantees.
"""
