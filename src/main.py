"""FastAPI application entrypoint."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from src.api.game import router as game_router
from src.api.health import router as health_router
from src.config import settings
from src.core import __version__
from src.core.event_bus import EventBus
from src.core.logging import get_logger, setup_logging
from src.core.weapon.registry import WeaponRegistry
from src.services.game_service import GameService

setup_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)


def build_game_service(weapon_data_path: str = settings.WEAPON_DATA_PATH) -> GameService:
    """카탈로그 로드 + EventBus + GameService 조립"""
    registry = WeaponRegistry()
    registry.load_from_json(weapon_data_path)
    return GameService(event_bus=EventBus(), registry=registry)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info("Initializing game service...")
    service = build_game_service()
    app.state.game_service = service
    app.state.weapon_registry = service.registry
    logger.info("Game service initialized (%d weapons).", service.registry.count())

    yield

    logger.info("Shutting down (%d open sessions)...", service.session_count)
    app.state.game_service = None


app = FastAPI(
    title="Weapon Arena",
    version=__version__,
    debug=settings.DEBUG,
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(game_router)
