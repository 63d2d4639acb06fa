"""GameService 테스트 (인메모리 세션 + EventBus)"""

import pytest

from src.core.event_bus import EventBus
from src.core.event_types import EventTypes
from src.core.weapon.registry import WeaponRegistry
from src.services.game_service import GameService


@pytest.fixture()
def service(registry: WeaponRegistry, bus: EventBus) -> GameService:
    return GameService(event_bus=bus, registry=registry, history_limit=5)


class TestSessions:
    def test_create_and_get(self, service: GameService) -> None:
        session_id = service.create_session(seed=1)
        engine = service.get_engine(session_id)
        assert engine is not None
        assert engine.session_id == session_id
        assert service.session_count == 1

    def test_sessions_are_independent(self, service: GameService) -> None:
        a = service.create_session(seed=1)
        b = service.create_session(seed=1)
        service.play_round(a, "rock")
        assert service.get_engine(a).state.round_number == 2
        assert service.get_engine(b).state.round_number == 1

    def test_mode_flags(self, service: GameService) -> None:
        session_id = service.create_session(weapon_unlocks=False, effects=True)
        modes = service.get_engine(session_id).snapshot()["modes"]
        assert modes == {"arsenal": False, "effects": True}

    def test_close(self, service: GameService, bus: EventBus) -> None:
        closed = []
        bus.subscribe(EventTypes.SESSION_CLOSED, lambda e: closed.append(e.data["session_id"]))
        session_id = service.create_session()
        assert service.close_session(session_id) is True
        assert service.close_session(session_id) is False
        assert service.get_engine(session_id) is None
        assert closed == [session_id]

    def test_oldest_idle_session_evicted(self, registry: WeaponRegistry, bus: EventBus) -> None:
        closed = []
        bus.subscribe(EventTypes.SESSION_CLOSED, lambda e: closed.append(e.data))
        service = GameService(event_bus=bus, registry=registry, max_sessions=2)
        a = service.create_session()
        b = service.create_session()
        c = service.create_session()

        assert service.session_count == 2
        assert service.get_engine(a) is None
        assert service.get_engine(b) is not None
        assert service.get_engine(c) is not None
        assert closed == [{"session_id": a, "reason": "evicted"}]

    def test_recently_used_session_survives(self, registry: WeaponRegistry, bus: EventBus) -> None:
        service = GameService(event_bus=bus, registry=registry, max_sessions=2)
        a = service.create_session()
        b = service.create_session()
        service.play_round(a, "rock")
        service.create_session()

        assert service.get_engine(a) is not None
        assert service.get_engine(b) is None
        with pytest.raises(ValueError):
            service.get_history(b)

    def test_unknown_session_raises(self, service: GameService) -> None:
        with pytest.raises(ValueError, match="Session not found"):
            service.play_round("nope", "rock")
        with pytest.raises(ValueError):
            service.choose_upgrade("nope", "fire")
        with pytest.raises(ValueError):
            service.get_history("nope")


class TestPlay:
    def test_play_round(self, service: GameService) -> None:
        session_id = service.create_session(seed=42)
        result = service.play_round(session_id, "paper")
        assert result is not None
        assert result.player_choice == "paper"

    def test_rejected_round(self, service: GameService) -> None:
        session_id = service.create_session(seed=42)
        assert service.play_round(session_id, "fire") is None
        assert service.get_history(session_id) == []

    def test_choose_upgrade(self, service: GameService) -> None:
        session_id = service.create_session(seed=42)
        assert service.choose_upgrade(session_id, "fire") is False
        for weapon in ["rock", "paper", "scissors"]:
            service.play_round(session_id, weapon)
        assert service.choose_upgrade(session_id, "fire") is True
        assert service.choose_upgrade(session_id, "fire") is False
        assert "fire" in service.get_engine(session_id).state.unlocked


class TestHistory:
    def test_records_rounds_in_order(self, service: GameService) -> None:
        session_id = service.create_session(seed=3)
        for weapon in ["rock", "paper", "scissors"]:
            service.play_round(session_id, weapon)
        history = service.get_history(session_id)
        assert [h["player_choice"] for h in history] == ["rock", "paper", "scissors"]
        assert [h["played_round"] for h in history] == [1, 2, 3]

    def test_history_is_bounded(self, service: GameService) -> None:
        session_id = service.create_session(seed=3)
        for weapon in ["rock", "paper", "scissors"] * 2:
            result = service.play_round(session_id, weapon)
            if result.upgrade_offered:
                service.choose_upgrade(session_id, "shield")
        history = service.get_history(session_id)
        assert len(history) == 5
        assert history[0]["played_round"] == 2

    def test_history_per_session(self, service: GameService) -> None:
        a = service.create_session(seed=3)
        b = service.create_session(seed=3)
        service.play_round(a, "rock")
        assert len(service.get_history(a)) == 1
        assert service.get_history(b) == []
