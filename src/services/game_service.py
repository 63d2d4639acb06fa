"""게임 Service — 세션별 RoundEngine 관리, 라운드 기록

architecture: Service → Core 허용
엔진 → Service 직접 호출 금지, EventBus 경유
"""

import random
import uuid
from collections import OrderedDict, deque
from typing import Any, Deque, Optional

from src.config import settings
from src.core.engine import RoundEngine
from src.core.event_bus import EventBus, GameEvent
from src.core.event_types import EventTypes
from src.core.logging import get_logger
from src.core.round.models import RoundResult
from src.core.weapon.registry import WeaponRegistry

logger = get_logger(__name__)


class GameService:
    """세션 생성/조회/종료 + 라운드 진행 위임 (인메모리, 영속화 없음)"""

    def __init__(
        self,
        event_bus: EventBus,
        registry: WeaponRegistry,
        history_limit: int = settings.HISTORY_LIMIT,
        max_sessions: int = settings.MAX_SESSIONS,
    ):
        self._bus = event_bus
        self._registry = registry
        self._history_limit = history_limit
        self._max_sessions = max_sessions
        self._engines: "OrderedDict[str, RoundEngine]" = OrderedDict()
        self._history: dict[str, Deque[dict[str, Any]]] = {}
        self._register_event_handlers()

    def _register_event_handlers(self) -> None:
        """EventBus 구독"""
        self._bus.subscribe(EventTypes.ROUND_RESOLVED, self._on_round_resolved)

    # === 세션 관리 ===

    def create_session(
        self,
        seed: Optional[int] = None,
        weapon_unlocks: Optional[bool] = None,
        effects: Optional[bool] = None,
    ) -> str:
        """새 세션 생성. 반환: session_id.

        seed가 없으면 settings.RNG_SEED, 그것도 없으면 비결정적.
        모드 플래그가 None이면 settings 값을 따른다.
        """
        session_id = str(uuid.uuid4())
        if seed is None:
            seed = settings.RNG_SEED
        engine = RoundEngine(
            registry=self._registry,
            session_id=session_id,
            rng=random.Random(seed),
            event_bus=self._bus,
            starting_durability=settings.STARTING_DURABILITY,
            upgrade_interval=settings.UPGRADE_INTERVAL,
            weapon_unlocks=(
                settings.ENABLE_WEAPON_UNLOCKS if weapon_unlocks is None else weapon_unlocks
            ),
            effects=settings.ENABLE_EFFECTS if effects is None else effects,
        )
        self._evict_idle_sessions()
        self._engines[session_id] = engine
        self._history[session_id] = deque(maxlen=self._history_limit)

        logger.info("Session created: %s", session_id)
        self._bus.emit(
            GameEvent(
                event_type=EventTypes.SESSION_CREATED,
                data={"session_id": session_id},
                source="game_service",
            )
        )
        return session_id

    def get_engine(self, session_id: str) -> Optional[RoundEngine]:
        """세션 조회. 조회된 세션은 가장 최근 사용으로 갱신된다."""
        engine = self._engines.get(session_id)
        if engine is not None:
            self._engines.move_to_end(session_id)
        return engine

    def close_session(self, session_id: str) -> bool:
        """세션 종료. 없는 세션이면 False."""
        return self._drop_session(session_id, reason="closed")

    def _evict_idle_sessions(self) -> None:
        """세션 수가 max_sessions에 도달하면 가장 오래 사용되지 않은 세션부터 제거"""
        while self._engines and len(self._engines) >= self._max_sessions:
            oldest = next(iter(self._engines))
            logger.warning("Session limit reached (%d), evicting %s", self._max_sessions, oldest)
            self._drop_session(oldest, reason="evicted")

    def _drop_session(self, session_id: str, reason: str) -> bool:
        if self._engines.pop(session_id, None) is None:
            return False
        self._history.pop(session_id, None)

        logger.info("Session %s: %s", reason, session_id)
        self._bus.emit(
            GameEvent(
                event_type=EventTypes.SESSION_CLOSED,
                data={"session_id": session_id, "reason": reason},
                source="game_service",
            )
        )
        return True

    @property
    def registry(self) -> WeaponRegistry:
        return self._registry

    @property
    def session_count(self) -> int:
        return len(self._engines)

    # === 게임 진행 ===

    def play_round(self, session_id: str, weapon_id: str) -> Optional[RoundResult]:
        """라운드 진행. 선택 불가 무기 또는 업그레이드 대기 중이면 None (상태 변화 없음)."""
        return self._require_engine(session_id).resolve_round(weapon_id)

    def choose_upgrade(self, session_id: str, upgrade_id: str) -> bool:
        """업그레이드 선택. 제안 대기 중이 아니거나 제안 목록에 없는 ID면 False."""
        return self._require_engine(session_id).choose_upgrade(upgrade_id)

    def get_history(self, session_id: str) -> list[dict[str, Any]]:
        """최근 라운드 결과 (오래된 순, 최대 history_limit개)"""
        self._require_engine(session_id)
        return list(self._history.get(session_id, ()))

    def _require_engine(self, session_id: str) -> RoundEngine:
        engine = self.get_engine(session_id)
        if engine is None:
            raise ValueError(f"Session not found: {session_id}")
        return engine

    # === EventBus 핸들러 ===

    def _on_round_resolved(self, event: GameEvent) -> None:
        history = self._history.get(event.data.get("session_id", ""))
        if history is None:
            return
        history.append(event.data["result"])
