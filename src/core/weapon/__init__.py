"""무기 시스템 Core — 순수 Python"""

from .models import Arsenal, Weapon, WeaponId
from .registry import WeaponRegistry

__all__ = [
    "Arsenal",
    "Weapon",
    "WeaponId",
    "WeaponRegistry",
]
