"""FastAPI application."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI

from board.application.usecase.state import ExportStateUseCase, ImportStateUseCase
from board.config import Settings
from board.interface.api.routes import health, opinions, points, votes
from board.persistence.snapshot import SnapshotFile
from board.util.di.container import create_container, setup_di
from board.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


async def _import_snapshot(container: AsyncContainer, snapshot_file: SnapshotFile) -> None:
    snapshot = snapshot_file.load()
    if snapshot is None:
        return
    async with container() as request_container:
        import_state = await request_container.get(ImportStateUseCase)
        result = await import_state.execute(snapshot)
    logfire.info("Board state restored", **result.model_dump())


async def _export_snapshot(container: AsyncContainer, snapshot_file: SnapshotFile) -> None:
    async with container() as request_container:
        export_state = await request_container.get(ExportStateUseCase)
        snapshot = await export_state.execute()
    snapshot_file.save(snapshot)


async def shutdown_board(
    container: AsyncContainer, snapshot_file: SnapshotFile | None
) -> None:
    """Write the snapshot, if configured, then close the container.

    The container is closed even when writing the snapshot fails; the
    failure is still raised.

    Args:
        container: Application container
        snapshot_file: Where to write the snapshot, or None to skip it
    """
    try:
        if snapshot_file is not None:
            await _export_snapshot(container, snapshot_file)
    finally:
        await container.close()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Restore state on startup and write it back on shutdown.

    Only active when PERSISTENCE__SNAPSHOT_PATH is set; otherwise the board
    starts empty and forgets everything on exit.
    """
    container: AsyncContainer = app.state.dishka_container
    settings = await container.get(Settings)
    snapshot_path = settings.persistence.snapshot_path
    snapshot_file = SnapshotFile(snapshot_path) if snapshot_path else None

    if snapshot_file is not None:
        await _import_snapshot(container, snapshot_file)

    try:
        yield
    finally:
        await shutdown_board(container, snapshot_file)


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py configures it.

    Args:
        container: DI container to use (defaults to the production container)
    """
    # Instrument httpx for outbound classifier requests
    # (Logfire must be configured before instrumentation)
    instrument_httpx()

    app_instance = FastAPI(
        title="Opinion Board API",
        description="Anonymous opinion board with moderation, replies, votes and points",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Setup dependency injection
    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(opinions.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(points.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
# In tests: configure in conftest.py
app = create_app()
