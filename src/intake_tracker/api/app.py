"""FastAPI application factory."""

from fastapi import FastAPI

from intake_tracker.api.grocery import router as grocery_router
from intake_tracker.api.nutrition import router as nutrition_router
from intake_tracker.app_logging import configure_logging
from intake_tracker.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)

    app = FastAPI()
    app.state.container = container

    app.include_router(nutrition_router)
    app.include_router(grocery_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
