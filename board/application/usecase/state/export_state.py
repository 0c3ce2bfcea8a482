"""Export state use case."""

from board.domain.model.snapshot import Snapshot
from board.domain.service import SnapshotService


class ExportStateUseCase:
    """Use case for capturing the full board state."""

    def __init__(self, snapshot_service: SnapshotService) -> None:
        """Initialize export state use case.

        Args:
            snapshot_service: Snapshot domain service
        """
        self.snapshot_service = snapshot_service

    async def execute(self) -> Snapshot:
        """Execute export flow.

        Returns:
            Snapshot of opinions, votes and points
        """
        return await self.snapshot_service.export_state()
