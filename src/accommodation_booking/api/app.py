"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from accommodation_booking.api.bookings import router as bookings_router
from accommodation_booking.api.responses import notification_dict, snapshot_dict
from accommodation_booking.api.session import router as session_router
from accommodation_booking.app_logging import configure_logging
from accommodation_booking.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Accommodation booking API starting (environment=%s)",
            app.state.container.settings.environment,
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(session_router)
    app.include_router(bookings_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/state")
    async def state(request: Request) -> dict[str, object]:
        """Return the whole session state."""
        state_container: AppContainer = request.app.state.container
        return snapshot_dict(state_container.controller.snapshot())

    @app.get("/notifications")
    async def notifications(request: Request) -> dict[str, object]:
        """Return recent outcome messages, oldest first, and the one to show."""
        sink = request.app.state.container.notifications
        latest = sink.latest()
        return {
            "notifications": [notification_dict(item) for item in sink.recent()],
            "latest": notification_dict(latest) if latest else None,
        }

    return app
