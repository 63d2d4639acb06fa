"""ArsenalModule — 새 무기 해금

양측 무기고에 새 무기를 추가한다.
해금된 무기는 제안 목록에서 빠진다.
"""

import logging
from typing import List

from src.core.event_bus import GameEvent
from src.core.event_types import EventTypes
from src.core.round.models import UpgradeKind, UpgradeOption
from src.core.weapon.durability import restock
from src.modules.base import GameContext, GameModule

logger = logging.getLogger(__name__)


class ArsenalModule(GameModule):
    """무기 해금 모드

    담당:
    - 남은 해금 무기를 업그레이드 카드로 제공 (설명은 카탈로그의 beats)
    - 해금 시 양측에 최대 내구도로 지급
    """

    @property
    def name(self) -> str:
        return "arsenal"

    def on_enable(self, context: GameContext) -> None:
        pass

    def on_disable(self, context: GameContext) -> None:
        pass

    def get_upgrade_options(self, context: GameContext) -> List[UpgradeOption]:
        options: List[UpgradeOption] = []
        for weapon_id in context.state.remaining_upgrades:
            weapon = context.registry.get(weapon_id)
            if weapon is None:
                continue
            options.append(
                UpgradeOption(
                    upgrade_id=weapon.weapon_id,
                    kind=UpgradeKind.WEAPON,
                    name=weapon.display_name,
                    glyph=weapon.glyph,
                    description=weapon.describe(),
                )
            )
        return options

    def apply_upgrade(self, upgrade_id: str, context: GameContext) -> bool:
        """무기 해금. 이미 해금했거나 제안 목록에 없으면 무시."""
        state = context.state
        if upgrade_id not in state.remaining_upgrades:
            return False

        state.remaining_upgrades.remove(upgrade_id)
        state.unlocked.append(upgrade_id)
        restock(state.player_arsenal, upgrade_id, context.starting_durability)
        restock(state.computer_arsenal, upgrade_id, context.starting_durability)

        logger.info("Weapon unlocked: %s (session=%s)", upgrade_id, context.session_id)
        context.event_bus.emit(
            GameEvent(
                event_type=EventTypes.WEAPON_UNLOCKED,
                data={"session_id": context.session_id, "weapon_id": upgrade_id},
                source=self.name,
            )
        )
        return True
