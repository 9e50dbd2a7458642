"""FastAPI server for the galaxy dashboard.

Provides the two operations the dashboard frontend needs: read the current
galaxy (resources advanced to now) and regenerate it.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

from ..engine.errors import GalaxyConfigError
from ..engine.galaxy_generator import GalaxyConfig
from ..utils.serialization import serialize_galaxy
from .config import ServerSettings
from .schemas.requests import RegenerateGalaxyRequest
from .schemas.responses import GalaxyResponse, StatusResponse
from .session import GalaxyStore

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app(settings: ServerSettings | None = None, store: GalaxyStore | None = None) -> FastAPI:
    """Create the dashboard API.

    Args:
        settings: Server settings (defaults to ServerSettings.from_env())
        store: Galaxy store to serve (defaults to a new store built from settings)

    Returns:
        Configured FastAPI application
    """
    if settings is None:
        settings = ServerSettings.from_env()
    if store is None:
        store = GalaxyStore(settings.galaxy_config())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager for startup/shutdown."""
        logger.info(
            f"Galaxy dashboard server starting ({settings.solar_system_count} systems, "
            f"seed={store.seed})..."
        )
        yield
        logger.info("Galaxy dashboard server shutting down...")

    app = FastAPI(
        title="Galaxy Dashboard API",
        description="Procedurally generated galaxy with idle resource accrual",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store

    # Enable CORS for frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_routes(app)
    return app


def get_store(request: Request) -> GalaxyStore:
    """Dependency returning the application's galaxy store."""
    return request.app.state.store


def _register_routes(app: FastAPI) -> None:
    @app.get("/api", response_model=StatusResponse)
    def api_root(store: GalaxyStore = Depends(get_store)):
        """API root endpoint - server health check."""
        return StatusResponse(
            service="Galaxy Dashboard",
            status="operational",
            solarSystems=len(store.get_galaxy().solar_systems),
        )

    @app.get("/api/galaxy", response_model=GalaxyResponse, response_model_exclude_none=True)
    def get_galaxy(store: GalaxyStore = Depends(get_store)):
        """Get the current galaxy with every planet's resources advanced to now.

        Example:
            GET /api/galaxy
        """
        try:
            return serialize_galaxy(store.get_galaxy())
        except Exception as e:
            logger.error(f"Failed to read galaxy: {e}", exc_info=True)
            raise HTTPException(status_code=500, detail="Failed to read galaxy")

    @app.post(
        "/api/galaxy/regenerate",
        response_model=GalaxyResponse,
        response_model_exclude_none=True,
    )
    def regenerate_galaxy(
        request: RegenerateGalaxyRequest | None = None,
        store: GalaxyStore = Depends(get_store),
    ):
        """Discard the current galaxy and generate a new one.

        Example:
            POST /api/galaxy/regenerate
            {"solarSystemCount": 6}
        """
        config = None
        try:
            if request is not None and (
                request.solarSystemCount is not None or request.seed is not None
            ):
                count = request.solarSystemCount
                if count is None:
                    count = store.config.solar_system_count
                config = GalaxyConfig(solar_system_count=count, seed=request.seed)

            galaxy = store.regenerate(config)
            return serialize_galaxy(galaxy)

        except GalaxyConfigError as e:
            logger.warning(f"Rejected galaxy configuration: {e}")
            raise HTTPException(status_code=400, detail=str(e))
        except Exception as e:
            logger.error(f"Failed to regenerate galaxy: {e}", exc_info=True)
            raise HTTPException(status_code=500, detail="Failed to regenerate galaxy")


if __name__ == "__main__":
    import uvicorn

    settings = ServerSettings.from_env()
    app = create_app(settings=settings)
    logging.getLogger().setLevel(settings.log_level)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level="info")
