"""라운드 도메인 모델"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class Outcome(str, Enum):
    TIE = "tie"
    PLAYER = "player"
    COMPUTER = "computer"


class EffectType(str, Enum):
    """단발성 효과. 동시에 하나만 활성."""

    DOUBLE = "double"  # 플레이어 승리 시 2점
    SHIELD = "shield"  # 플레이어 패배 무효화
    REVEAL = "reveal"  # 컴퓨터의 다음 선택 공개


EFFECT_INFO: dict[EffectType, tuple[str, str, str]] = {
    # effect: (표시 이름, 이모지, 설명)
    EffectType.DOUBLE: ("Double Points", "✨", "Your next win scores 2 points."),
    EffectType.SHIELD: ("Shield", "🛡️", "Your next loss gives the computer nothing."),
    EffectType.REVEAL: ("Reveal", "🔮", "See the computer's next choice before you pick."),
}


class UpgradeKind(str, Enum):
    WEAPON = "weapon"
    EFFECT = "effect"


@dataclass(frozen=True)
class UpgradeOption:
    """업그레이드 카드 한 장"""

    upgrade_id: str
    kind: UpgradeKind
    name: str
    glyph: str
    description: str

    def to_dict(self) -> dict[str, str]:
        return {
            "upgrade_id": self.upgrade_id,
            "kind": self.kind.value,
            "name": self.name,
            "glyph": self.glyph,
            "description": self.description,
        }


@dataclass(frozen=True)
class RoundResult:
    """라운드 결과 — 표시 계층에 그대로 넘긴다."""

    played_round: int  # 방금 진행한 라운드
    round_number: int  # 갱신된 라운드 (다음 라운드)
    player_choice: str
    computer_choice: str
    outcome: Outcome
    message: str

    # 점수
    player_score: int
    computer_score: int
    player_points: int = 0  # 이번 라운드 획득
    computer_points: int = 0

    # 효과
    effect_used: Optional[EffectType] = None
    shield_absorbed: bool = False

    # 남은 내구도 (선택한 무기 기준)
    player_durability: int = 0
    computer_durability: int = 0

    # 업그레이드
    upgrade_offered: bool = False
    upgrade_options: tuple[UpgradeOption, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "played_round": self.played_round,
            "round_number": self.round_number,
            "player_choice": self.player_choice,
            "computer_choice": self.computer_choice,
            "outcome": self.outcome.value,
            "message": self.message,
            "player_score": self.player_score,
            "computer_score": self.computer_score,
            "player_points": self.player_points,
            "computer_points": self.computer_points,
            "effect_used": self.effect_used.value if self.effect_used else None,
            "shield_absorbed": self.shield_absorbed,
            "player_durability": self.player_durability,
            "computer_durability": self.computer_durability,
            "upgrade_offered": self.upgrade_offered,
            "upgrade_options": [o.to_dict() for o in self.upgrade_options],
        }
