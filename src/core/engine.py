"""
Round Engine
============
라운드 판정, 내구도/점수 관리, 업그레이드 상태 관리.

엔진 하나가 게임 세션 하나를 소유한다.
표시 계층은 resolve_round / choose_upgrade 를 호출하고
불변 RoundResult 를 받아 그린다.
"""

import random
from typing import Any, Optional

from src.core.event_bus import EventBus, GameEvent
from src.core.event_types import EventTypes
from src.core.logging import get_logger
from src.core.opponent import draw_computer_choice
from src.core.round.models import RoundResult, UpgradeOption
from src.core.round.progression import UPGRADE_INTERVAL, should_offer_upgrade
from src.core.round.resolution import build_message, determine_outcome, score_round
from src.core.state import STARTING_DURABILITY, GameState, new_game_state
from src.core.weapon.durability import apply_use, is_exhausted
from src.core.weapon.registry import WeaponRegistry
from src.modules.arsenal.module import ArsenalModule
from src.modules.base import GameContext
from src.modules.effects.module import EffectModule
from src.modules.module_manager import ModuleManager

logger = get_logger(__name__)

ARSENAL_MODULE = "arsenal"
EFFECTS_MODULE = "effects"


class RoundEngine:
    """
    게임 세션 하나의 라운드 엔진

    확장 모드:
        weapon_unlocks: 3라운드마다 새 무기 해금 제안
        effects: 3라운드마다 단발 효과 제안
    """

    def __init__(
        self,
        registry: WeaponRegistry,
        session_id: str = "local",
        rng: Optional[random.Random] = None,
        event_bus: Optional[EventBus] = None,
        starting_durability: int = STARTING_DURABILITY,
        upgrade_interval: int = UPGRADE_INTERVAL,
        weapon_unlocks: bool = True,
        effects: bool = True,
    ):
        self.registry = registry
        self.session_id = session_id
        self.rng = rng or random.Random()
        self.event_bus = event_bus or EventBus()
        self.upgrade_interval = upgrade_interval

        self.state: GameState = new_game_state(registry, starting_durability)
        self.context = GameContext(
            session_id=session_id,
            state=self.state,
            registry=registry,
            rng=self.rng,
            event_bus=self.event_bus,
            starting_durability=starting_durability,
        )

        self.modules = ModuleManager(self.context)
        self.modules.register(ArsenalModule())
        self.modules.register(EffectModule())
        if weapon_unlocks:
            self.modules.enable(ARSENAL_MODULE)
        if effects:
            self.modules.enable(EFFECTS_MODULE)

    # === 라운드 ===

    def can_select(self, weapon_id: str) -> bool:
        """플레이어가 지금 고를 수 있는 무기인지"""
        return (
            weapon_id in self.state.unlocked
            and self.state.player_arsenal.remaining(weapon_id) > 0
        )

    def resolve_round(self, player_choice: str) -> Optional[RoundResult]:
        """라운드 1회 진행.

        소진/미해금/미등록 무기, 또는 업그레이드 제안 대기 중이면
        None 반환, 상태 변화 없음.
        """
        if self.state.upgrade_offer_pending:
            return self._reject(player_choice, "upgrade_pending")
        if not self.can_select(player_choice):
            return self._reject(player_choice, "unavailable")

        state = self.state
        played_round = state.round_number
        effect = state.active_effect

        computer_choice = self._take_computer_choice()

        # 내구도 감소
        player_use = apply_use(state.player_arsenal, player_choice)
        computer_use = apply_use(state.computer_arsenal, computer_choice)
        if player_use["depleted"]:
            self._emit(EventTypes.WEAPON_DEPLETED, {"owner": "player", "weapon_id": player_choice})
        if computer_use["depleted"]:
            self._emit(
                EventTypes.WEAPON_DEPLETED, {"owner": "computer", "weapon_id": computer_choice}
            )
        if is_exhausted(state.player_arsenal, state.unlocked):
            logger.info("Player arsenal exhausted (session=%s)", self.session_id)

        # 판정 & 점수
        outcome = determine_outcome(self.registry, player_choice, computer_choice)
        points = score_round(outcome, effect)
        state.player_score += points["player_points"]
        state.computer_score += points["computer_points"]
        doubled = points["player_points"] > 1
        message = build_message(
            player_choice,
            computer_choice,
            outcome,
            doubled=doubled,
            shield_absorbed=points["shield_absorbed"],
        )

        # 라운드 증가, 효과 소모
        state.round_number += 1
        if effect is not None:
            state.active_effect = None
            self._emit(EventTypes.EFFECT_CONSUMED, {"effect": effect.value})

        # 업그레이드 제안 (라운드 증가 후 판정)
        options = self.get_upgrade_offers()
        offered = should_offer_upgrade(
            state.round_number, len(options), self.upgrade_interval
        )
        state.upgrade_offer_pending = offered

        result = RoundResult(
            played_round=played_round,
            round_number=state.round_number,
            player_choice=player_choice,
            computer_choice=computer_choice,
            outcome=outcome,
            message=message,
            player_score=state.player_score,
            computer_score=state.computer_score,
            player_points=points["player_points"],
            computer_points=points["computer_points"],
            effect_used=effect,
            shield_absorbed=points["shield_absorbed"],
            player_durability=player_use["remaining"],
            computer_durability=computer_use["remaining"],
            upgrade_offered=offered,
            upgrade_options=tuple(options) if offered else (),
        )

        logger.info(
            "Round %d resolved: %s vs %s -> %s (session=%s)",
            played_round,
            player_choice,
            computer_choice,
            outcome.value,
            self.session_id,
        )
        self._emit(EventTypes.ROUND_RESOLVED, {"result": result.to_dict()})
        if offered:
            self._emit(
                EventTypes.UPGRADE_OFFERED,
                {
                    "round_number": state.round_number,
                    "upgrade_ids": [o.upgrade_id for o in options],
                },
            )
        return result

    def _reject(self, player_choice: str, reason: str) -> None:
        logger.debug(
            "Round rejected: %s (%s, session=%s)",
            player_choice,
            reason,
            self.session_id,
        )
        self._emit(
            EventTypes.ROUND_REJECTED,
            {
                "weapon_id": player_choice,
                "round_number": self.state.round_number,
                "reason": reason,
            },
        )
        return None

    def _take_computer_choice(self) -> str:
        """REVEAL로 미리 뽑은 선택이 있으면 그것을 쓰고 비운다."""
        revealed = self.state.revealed_choice
        self.state.revealed_choice = None
        if revealed is not None and self.state.computer_arsenal.remaining(revealed) > 0:
            return revealed
        return draw_computer_choice(self.state, self.registry, self.rng)

    # === 업그레이드 ===

    def get_upgrade_offers(self) -> list[UpgradeOption]:
        """현재 제안 가능한 업그레이드 (활성 모드 기준)"""
        return self.modules.collect_upgrade_options()

    def unlock_weapon(self, weapon_id: str) -> bool:
        """무기 해금 모드. 이미 해금했거나 후보가 아니면 무시 (False)."""
        applied = self.modules.apply_upgrade(weapon_id, module_name=ARSENAL_MODULE)
        if applied:
            self.state.upgrade_offer_pending = False
        return applied

    def apply_upgrade(self, upgrade_id: str) -> bool:
        """단발 효과 모드. 기존 효과를 대체. 알 수 없는 ID는 무시 (False)."""
        applied = self.modules.apply_upgrade(upgrade_id, module_name=EFFECTS_MODULE)
        if applied:
            self.state.upgrade_offer_pending = False
        return applied

    def choose_upgrade(self, upgrade_id: str) -> bool:
        """표시 계층의 업그레이드 카드 선택. 담당 모듈로 전달.

        제안 대기 중이 아니거나 제안 목록에 없는 ID면 False (상태 변화 없음).
        """
        if not self.state.upgrade_offer_pending:
            logger.debug(
                "Upgrade rejected: %s, no offer pending (session=%s)",
                upgrade_id,
                self.session_id,
            )
            return False
        offered = [o.upgrade_id for o in self.get_upgrade_offers()]
        if upgrade_id not in offered:
            return False
        applied = self.modules.apply_upgrade(upgrade_id)
        if applied:
            self.state.upgrade_offer_pending = False
        return applied

    # === 조회 ===

    def snapshot(self) -> dict[str, Any]:
        data = self.state.to_dict()
        data["session_id"] = self.session_id
        data["modes"] = {
            ARSENAL_MODULE: self.modules.is_enabled(ARSENAL_MODULE),
            EFFECTS_MODULE: self.modules.is_enabled(EFFECTS_MODULE),
        }
        return data

    def _emit(self, event_type: str, data: dict[str, Any]) -> None:
        payload = {"session_id": self.session_id}
        payload.update(data)
        self.event_bus.emit(GameEvent(event_type=event_type, data=payload, source="round_engine"))
