"""EffectModule — 단발성 효과 (double / shield / reveal)

효과는 항상 제안 가능하고, 새 효과를 고르면 이전 효과는 사라진다.
효과 소모(라운드 종료 시 해제)는 엔진이 처리한다.
"""

import logging
from typing import List

from src.core.event_bus import GameEvent
from src.core.event_types import EventTypes
from src.core.opponent import draw_computer_choice
from src.core.round.models import EFFECT_INFO, EffectType, UpgradeKind, UpgradeOption
from src.modules.base import GameContext, GameModule

logger = logging.getLogger(__name__)


class EffectModule(GameModule):
    """단발 효과 모드

    REVEAL 적용 시 컴퓨터의 다음 선택을 미리 뽑아 state.revealed_choice에 둔다.
    """

    @property
    def name(self) -> str:
        return "effects"

    def on_enable(self, context: GameContext) -> None:
        pass

    def on_disable(self, context: GameContext) -> None:
        """비활성화 시 걸려 있던 효과 제거"""
        context.state.active_effect = None
        context.state.revealed_choice = None

    def get_upgrade_options(self, context: GameContext) -> List[UpgradeOption]:
        return [
            UpgradeOption(
                upgrade_id=effect.value,
                kind=UpgradeKind.EFFECT,
                name=name,
                glyph=glyph,
                description=description,
            )
            for effect, (name, glyph, description) in EFFECT_INFO.items()
        ]

    def apply_upgrade(self, upgrade_id: str, context: GameContext) -> bool:
        try:
            effect = EffectType(upgrade_id)
        except ValueError:
            return False

        state = context.state
        if state.active_effect is not None:
            logger.debug("Replacing effect %s with %s", state.active_effect.value, effect.value)

        state.active_effect = effect
        state.revealed_choice = None
        if effect == EffectType.REVEAL:
            state.revealed_choice = draw_computer_choice(state, context.registry, context.rng)

        logger.info("Effect applied: %s (session=%s)", effect.value, context.session_id)
        context.event_bus.emit(
            GameEvent(
                event_type=EventTypes.EFFECT_APPLIED,
                data={
                    "session_id": context.session_id,
                    "effect": effect.value,
                    "revealed_choice": state.revealed_choice,
                },
                source=self.name,
            )
        )
        return True
