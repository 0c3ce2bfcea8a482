"""Import state use case."""

from pydantic import BaseModel

from board.domain.model.snapshot import Snapshot
from board.domain.service import SnapshotService


class ImportStateResponse(BaseModel):
    """Import state response."""

    opinions: int
    voters: int
    users_with_points: int
    next_opinion_id: int


class ImportStateUseCase:
    """Use case for restoring the full board state."""

    def __init__(self, snapshot_service: SnapshotService) -> None:
        """Initialize import state use case.

        Args:
            snapshot_service: Snapshot domain service
        """
        self.snapshot_service = snapshot_service

    async def execute(self, snapshot: Snapshot) -> ImportStateResponse:
        """Execute import flow.

        Args:
            snapshot: Snapshot to restore

        Returns:
            Summary of what was restored

        Raises:
            InvalidSnapshotError: If the snapshot is inconsistent
        """
        await self.snapshot_service.import_state(snapshot)
        return ImportStateResponse(
            opinions=len(snapshot.opinions),
            voters=len(snapshot.votes),
            users_with_points=len(snapshot.points),
            next_opinion_id=snapshot.next_opinion_id,
        )
