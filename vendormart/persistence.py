"""Snapshot stores that persist each marketplace store as one JSON document."""

from __future__ import annotations

import json
import os
from typing import TYPE_CHECKING, Any, cast

from firebase_admin import firestore
from flask import current_app

from vendormart.constants import SNAPSHOT_COLLECTION, SNAPSHOT_SCHEMA_VERSION
from vendormart.core.types import SnapshotDocument

if TYPE_CHECKING:
    from google.cloud.firestore_v1.base_document import DocumentSnapshot
    from google.cloud.firestore_v1.client import Client


class SnapshotStore:
    """Base class: a document per store name, tagged with a schema version."""

    def __init__(self, version: int = SNAPSHOT_SCHEMA_VERSION) -> None:
        self.version = version

    def _read(self, name: str) -> dict[str, Any] | None:
        raise NotImplementedError

    def _write(self, name: str, document: SnapshotDocument) -> None:
        raise NotImplementedError

    def load(self, name: str) -> dict[str, Any] | None:
        """Return the saved state for ``name``, or None if there is none usable."""
        document = self._read(name)
        if document is None:
            return None
        if document.get("version") != self.version:
            current_app.logger.warning(
                f"Discarding snapshot '{name}' with unrecognized version "
                f"{document.get('version')!r} (expected {self.version})."
            )
            return None
        return document.get("state") or {}

    def save(self, name: str, state: dict[str, Any]) -> None:
        self._write(name, {"version": self.version, "state": state})


class JsonFileSnapshotStore(SnapshotStore):
    """Keeps each snapshot as ``<folder>/<name>.json``."""

    def __init__(self, folder: str, version: int = SNAPSHOT_SCHEMA_VERSION) -> None:
        super().__init__(version)
        self.folder = folder

    def path_for(self, name: str) -> str:
        return os.path.join(self.folder, f"{name}.json")

    def _read(self, name: str) -> dict[str, Any] | None:
        path = self.path_for(name)
        if not os.path.exists(path):
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            current_app.logger.error(f"Error reading snapshot '{name}': {e}")
            return None

    def _write(self, name: str, document: SnapshotDocument) -> None:
        os.makedirs(self.folder, exist_ok=True)
        path = self.path_for(name)
        tmp_path = f"{path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(document, f, indent=2)
        os.replace(tmp_path, path)


class FirestoreSnapshotStore(SnapshotStore):
    """Keeps each snapshot as a document in the ``snapshots`` collection."""

    def __init__(
        self, db: Client | None = None, version: int = SNAPSHOT_SCHEMA_VERSION
    ) -> None:
        super().__init__(version)
        self._db = db

    @property
    def db(self) -> Client:
        if self._db is None:
            self._db = firestore.client()
        return self._db

    def _read(self, name: str) -> dict[str, Any] | None:
        doc = cast(
            "DocumentSnapshot",
            self.db.collection(SNAPSHOT_COLLECTION).document(name).get(),
        )
        if not doc.exists:
            return None
        return doc.to_dict()

    def _write(self, name: str, document: SnapshotDocument) -> None:
        self.db.collection(SNAPSHOT_COLLECTION).document(name).set(dict(document))


def create_snapshot_store(config: dict[str, Any]) -> SnapshotStore:
    """Build the snapshot store selected by ``SNAPSHOT_BACKEND``."""
    backend = config.get("SNAPSHOT_BACKEND", "file")
    if backend == "file":
        return JsonFileSnapshotStore(config["SNAPSHOT_FOLDER"])
    if backend == "firestore":
        return FirestoreSnapshotStore()
    raise ValueError(f"Unknown SNAPSHOT_BACKEND: {backend!r}")
