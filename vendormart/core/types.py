"""Core data types for the vendormart application."""

from typing import Any, Dict, TypedDict  # noqa: UP035


class SnapshotDocument(TypedDict):
    """A persisted store: its schema version and the serialized state."""

    version: int
    state: Dict[str, Any]  # noqa: UP006
