"""Export utilities for kingraph query results."""

from .export import GraphExporter

__all__ = ["GraphExporter"]
