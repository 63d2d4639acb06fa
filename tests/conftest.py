"""Shared test fixtures."""

import random

import pytest
from fastapi.testclient import TestClient

from src.config import DEFAULT_WEAPON_DATA_PATH
from src.core.engine import RoundEngine
from src.core.event_bus import EventBus
from src.core.weapon.registry import WeaponRegistry
from src.main import app, build_game_service


@pytest.fixture()
def registry() -> WeaponRegistry:
    """Weapon catalog loaded from the shipped weapons.json."""
    reg = WeaponRegistry()
    reg.load_from_json(DEFAULT_WEAPON_DATA_PATH)
    return reg


@pytest.fixture()
def bus() -> EventBus:
    return EventBus()


@pytest.fixture()
def engine(registry: WeaponRegistry, bus: EventBus) -> RoundEngine:
    """Seeded engine with both extension modes enabled."""
    return RoundEngine(
        registry=registry,
        session_id="test-session",
        rng=random.Random(1234),
        event_bus=bus,
    )


@pytest.fixture()
def client() -> TestClient:
    """FastAPI TestClient with a fresh in-memory GameService."""
    service = build_game_service()
    app.state.game_service = service
    app.state.weapon_registry = service.registry
    yield TestClient(app)
    app.state.game_service = None
    app.state.weapon_registry = None
