"""Core module for the vendormart application."""

from .types import SnapshotDocument

__all__ = ["SnapshotDocument"]
