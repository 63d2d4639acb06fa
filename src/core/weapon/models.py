"""무기 도메인 모델"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class WeaponId(str, Enum):
    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"
    FIRE = "fire"
    AIR = "air"


@dataclass(frozen=True)
class Weapon:
    """무기 정의 — 불변. weapons.json에서 로드."""

    weapon_id: str  # WeaponId 값
    glyph: str  # 표시용 이모지
    beats: tuple[str, ...]  # 이 무기가 이기는 weapon_id 목록 (표시 순서 유지)
    starter: bool = False  # 게임 시작 시 지급 여부

    @property
    def display_name(self) -> str:
        return self.weapon_id[:1].upper() + self.weapon_id[1:]

    def defeats(self, other_id: str) -> bool:
        return other_id in self.beats

    def describe(self) -> str:
        """업그레이드 카드/툴팁 문구. 예: "Beats: paper, scissors" """
        return "Beats: " + ", ".join(self.beats)


@dataclass
class Arsenal:
    """한쪽(플레이어 또는 컴퓨터)의 무기별 남은 내구도."""

    owner: str  # "player" | "computer"
    durability: dict[str, int] = field(default_factory=dict)

    def remaining(self, weapon_id: str) -> int:
        return self.durability.get(weapon_id, 0)

    def to_dict(self) -> dict[str, int]:
        return dict(self.durability)
