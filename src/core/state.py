"""게임 세션 상태 (세션당 하나)"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from src.core.round.models import EffectType
from src.core.weapon.models import Arsenal
from src.core.weapon.registry import WeaponRegistry

STARTING_DURABILITY = 3


@dataclass
class GameState:
    """점수, 라운드, 양측 무기고, 업그레이드/효과 상태"""

    player_arsenal: Arsenal
    computer_arsenal: Arsenal
    unlocked: list[str] = field(default_factory=list)  # 양측 공통 사용 가능 무기
    remaining_upgrades: list[str] = field(default_factory=list)  # 해금 대기 무기

    player_score: int = 0
    computer_score: int = 0
    round_number: int = 1

    # 효과 (동시에 하나만)
    active_effect: Optional[EffectType] = None
    revealed_choice: Optional[str] = None  # REVEAL로 미리 뽑은 컴퓨터 선택

    upgrade_offer_pending: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "player_score": self.player_score,
            "computer_score": self.computer_score,
            "round_number": self.round_number,
            "unlocked": list(self.unlocked),
            "remaining_upgrades": list(self.remaining_upgrades),
            "player_durability": self.player_arsenal.to_dict(),
            "computer_durability": self.computer_arsenal.to_dict(),
            "active_effect": self.active_effect.value if self.active_effect else None,
            "revealed_choice": self.revealed_choice,
            "upgrade_offer_pending": self.upgrade_offer_pending,
        }


def new_game_state(
    registry: WeaponRegistry, starting_durability: int = STARTING_DURABILITY
) -> GameState:
    """시작 무기는 starting_durability, 해금 대상 무기는 0으로 시작."""
    starters = registry.starters()
    durability = {
        w: (starting_durability if w in starters else 0) for w in registry.ids()
    }
    return GameState(
        player_arsenal=Arsenal(owner="player", durability=dict(durability)),
        computer_arsenal=Arsenal(owner="computer", durability=dict(durability)),
        unlocked=list(starters),
        remaining_upgrades=registry.unlockables(),
    )
