"""Main application entry point."""

import asyncio
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from .api.router import init_router, router
from .config import AppConfig, get_config_path, load_config
from .metrics import increment_refresh_cycles, update_lot_counts
from .sample_data import manager_from_config
from .state.lot_manager import ParkingLotManager

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Global state
lot_manager: ParkingLotManager | None = None
config: AppConfig | None = None
refresh_task: asyncio.Task | None = None


def refresh_once(manager: ParkingLotManager) -> None:
    """Re-read every lot and publish its counts. Never mutates state."""
    for lot in manager.all_lots():
        update_lot_counts(lot)
        logger.debug(
            f"Lot '{lot.name}': {lot.available_spots()}/{lot.total_spots} available"
        )
    increment_refresh_cycles()


async def run_refresh_loop(interval_seconds: int = 30) -> None:
    """
    Periodic refresh loop.

    Keeps published availability and occupation figures current between
    user actions.
    """
    logger.info(f"Starting refresh loop (interval: {interval_seconds}s)")

    while True:
        try:
            if lot_manager is None:
                logger.warning("Lot manager not initialized")
            else:
                refresh_once(lot_manager)
        except Exception as e:
            logger.error(f"Refresh loop error: {e}")

        await asyncio.sleep(interval_seconds)


def load_app_config() -> AppConfig:
    """Load the configuration file, falling back to defaults if it is missing."""
    config_path = get_config_path()
    if not config_path.exists():
        logger.warning(f"Configuration file not found: {config_path}")
        logger.warning("Using default configuration")
        return AppConfig()

    app_config = load_config(config_path)
    logger.info(f"Loaded configuration from {config_path}")
    return app_config


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    global lot_manager, config, refresh_task

    logger.info("Starting Parking Status service...")

    config = load_app_config()
    logging.getLogger().setLevel(config.logging.level)

    lot_manager = manager_from_config(config)
    if len(lot_manager) == 0:
        logger.warning("No parking lots defined")

    init_router(lot_manager)
    refresh_once(lot_manager)

    refresh_task = asyncio.create_task(run_refresh_loop(config.refresh.interval_seconds))
    logger.info("Refresh loop started")

    logger.info(f"Parking Status service ready on http://{config.api.host}:{config.api.port}")

    yield  # Application runs here

    # Shutdown
    logger.info("Shutting down...")

    if refresh_task:
        refresh_task.cancel()
        try:
            await refresh_task
        except asyncio.CancelledError:
            pass

    logger.info("Shutdown complete")


# Create FastAPI app
app = FastAPI(
    title="Parking Status",
    description="API for checking and updating parking lot spot availability",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(router, prefix="/api/v1")


def main():
    """Run the application."""
    # Load config just to get API settings
    config_path = get_config_path()
    if config_path.exists():
        cfg = load_config(config_path)
        host = cfg.api.host
        port = cfg.api.port
    else:
        host = "0.0.0.0"
        port = 8000

    uvicorn.run(
        "parking_status.main:app",
        host=host,
        port=port,
        reload=False,
    )


if __name__ == "__main__":
    main()
