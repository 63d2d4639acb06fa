"""무기 카탈로그 저장소 — JSON 로드 + 동적 등록"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from .models import Weapon, WeaponId

logger = logging.getLogger(__name__)


class WeaponRegistry:
    """
    무기 카탈로그.
    등록 순서가 곧 표시/선택 순서다.
    """

    def __init__(self) -> None:
        self._weapons: dict[str, Weapon] = {}

    def load_from_json(self, path: str | Path) -> int:
        """weapons.json 로드. 반환: 로드된 수량.

        weapon_id는 WeaponId 값이어야 한다.
        beats는 list → tuple 변환.
        로드 후 서로를 이기는 쌍이 있으면 경고.
        """
        path = Path(path)
        with path.open("r", encoding="utf-8") as f:
            raw_list: list[dict] = json.load(f)

        count = 0
        for raw in raw_list:
            try:
                weapon = Weapon(
                    weapon_id=WeaponId(raw["weapon_id"]).value,
                    glyph=raw["glyph"],
                    beats=tuple(raw.get("beats", [])),
                    starter=bool(raw.get("starter", False)),
                )
                self.register(weapon)
                count += 1
            except (KeyError, ValueError) as e:
                logger.warning(
                    "Failed to load weapon: %s — %s", raw.get("weapon_id", "?"), e
                )

        for a, b in self.find_conflicts():
            logger.warning("Catalog conflict: %s and %s beat each other", a, b)

        logger.info("Loaded %d weapons from %s", count, path)
        return count

    def register(self, weapon: Weapon) -> None:
        """무기 등록. 이미 존재하는 weapon_id면 경고 후 덮어쓴다."""
        if weapon.weapon_id in self._weapons:
            logger.warning("Overwriting existing weapon: %s", weapon.weapon_id)
        self._weapons[weapon.weapon_id] = weapon

    def get(self, weapon_id: str) -> Optional[Weapon]:
        return self._weapons.get(weapon_id)

    def get_all(self) -> list[Weapon]:
        return list(self._weapons.values())

    def ids(self) -> list[str]:
        return list(self._weapons)

    def starters(self) -> list[str]:
        """시작 시 지급되는 무기 ID."""
        return [w.weapon_id for w in self._weapons.values() if w.starter]

    def unlockables(self) -> list[str]:
        """업그레이드로만 얻을 수 있는 무기 ID."""
        return [w.weapon_id for w in self._weapons.values() if not w.starter]

    def find_conflicts(self) -> list[tuple[str, str]]:
        """서로가 서로를 이긴다고 선언한 쌍 (a, b), a가 먼저 등록된 쪽."""
        conflicts: list[tuple[str, str]] = []
        ids = self.ids()
        for i, a in enumerate(ids):
            for b in ids[i + 1 :]:
                if self._weapons[a].defeats(b) and self._weapons[b].defeats(a):
                    conflicts.append((a, b))
        return conflicts

    def count(self) -> int:
        return len(self._weapons)
