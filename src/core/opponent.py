"""컴퓨터 상대 — 균등 무작위 선택"""

import random

from src.core.logging import get_logger
from src.core.state import GameState
from src.core.weapon.durability import usable_weapons
from src.core.weapon.registry import WeaponRegistry

logger = get_logger(__name__)


def draw_computer_choice(
    state: GameState, registry: WeaponRegistry, rng: random.Random
) -> str:
    """해금된 무기 중 내구도가 남은 것에서 균등 추첨.

    전부 소진된 경우 전체 카탈로그에서 추첨 (정상 플레이에서는 발생하지 않음).
    """
    candidates = usable_weapons(state.computer_arsenal, state.unlocked)
    if candidates:
        return rng.choice(candidates)

    logger.warning("Computer arsenal exhausted, drawing from full catalog")
    return rng.choice(registry.ids())
