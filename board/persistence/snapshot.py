"""Snapshot file storage.

Snapshots are written at lifecycle boundaries only (shutdown, upgrade) and
read back on startup. The running board never reads from disk.
"""

import os
from pathlib import Path
from typing import Optional

import logfire

from board.domain.model.snapshot import Snapshot


class SnapshotFile:
    """Stores a single snapshot as JSON on disk."""

    def __init__(self, path: Path) -> None:
        """Initialize snapshot file.

        Args:
            path: Location of the JSON file
        """
        self.path = path

    def load(self) -> Optional[Snapshot]:
        """Read the snapshot.

        Returns:
            The stored snapshot, or None if no file exists yet

        Raises:
            pydantic.ValidationError: If the file isn't a valid snapshot
        """
        if not self.path.exists():
            logfire.info("No snapshot file found", path=str(self.path))
            return None

        snapshot = Snapshot.model_validate_json(self.path.read_bytes())
        logfire.info(
            "Snapshot loaded",
            path=str(self.path),
            opinions=len(snapshot.opinions),
            voters=len(snapshot.votes),
        )
        return snapshot

    def save(self, snapshot: Snapshot) -> None:
        """Write the snapshot, replacing any previous file atomically.

        Args:
            snapshot: Snapshot to store
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        tmp_path.write_text(snapshot.model_dump_json(), encoding="utf-8")
        os.replace(tmp_path, self.path)
        logfire.info(
            "Snapshot saved",
            path=str(self.path),
            opinions=len(snapshot.opinions),
            voters=len(snapshot.votes),
        )
