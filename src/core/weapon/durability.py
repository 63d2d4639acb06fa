"""내구도 시스템"""

import logging
from typing import Iterable

from .models import Arsenal

logger = logging.getLogger(__name__)


def apply_use(arsenal: Arsenal, weapon_id: str) -> dict:
    """무기 사용 시 내구도 1 감소. 0 미만으로 내려가지 않는다.

    Returns:
        {
            "remaining": int,
            "depleted": bool  # 이번 사용으로 0이 되었는지
        }
    """
    current = arsenal.remaining(weapon_id)
    new_dur = max(0, current - 1)
    arsenal.durability[weapon_id] = new_dur

    depleted = current > 0 and new_dur == 0
    if depleted:
        logger.info("%s weapon %s depleted", arsenal.owner, weapon_id)

    return {"remaining": new_dur, "depleted": depleted}


def usable_weapons(arsenal: Arsenal, weapon_ids: Iterable[str]) -> list[str]:
    """weapon_ids 중 내구도가 남은 것만 (순서 유지)."""
    return [w for w in weapon_ids if arsenal.remaining(w) > 0]


def restock(arsenal: Arsenal, weapon_id: str, amount: int) -> None:
    """내구도를 amount로 채운다 (무기 해금 시)."""
    if amount < 0:
        raise ValueError(f"Durability cannot be negative: {amount}")
    arsenal.durability[weapon_id] = amount


def is_exhausted(arsenal: Arsenal, weapon_ids: Iterable[str]) -> bool:
    """사용 가능한 무기가 하나도 없는지."""
    return not usable_weapons(arsenal, weapon_ids)
