"""모듈 기반 인터페이스"""

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List

from src.core.event_bus import EventBus
from src.core.round.models import UpgradeOption
from src.core.state import GameState
from src.core.weapon.registry import WeaponRegistry


@dataclass
class GameContext:
    """모듈에 전달되는 세션 컨텍스트"""

    session_id: str
    state: GameState
    registry: WeaponRegistry
    rng: random.Random
    event_bus: EventBus
    starting_durability: int = 3


class GameModule(ABC):
    """확장 모드(무기 해금, 단발 효과)의 기반 인터페이스

    규칙:
    - 모듈은 다른 모듈을 직접 import하지 않는다
    - Module → Core 허용, Module → Module 금지
    - 업그레이드 ID는 모듈 간에 겹치지 않는다
    """

    _enabled: bool

    def __init__(self) -> None:
        self._enabled = False

    @property
    @abstractmethod
    def name(self) -> str:
        """모듈 고유 이름 (예: 'arsenal', 'effects')"""
        ...

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self._enabled = value

    @abstractmethod
    def on_enable(self, context: GameContext) -> None:
        """모듈 활성화 시 초기화 작업"""
        ...

    @abstractmethod
    def on_disable(self, context: GameContext) -> None:
        """모듈 비활성화 시 정리 작업"""
        ...

    @abstractmethod
    def get_upgrade_options(self, context: GameContext) -> List[UpgradeOption]:
        """현재 제안 가능한 업그레이드 목록."""
        ...

    @abstractmethod
    def apply_upgrade(self, upgrade_id: str, context: GameContext) -> bool:
        """업그레이드 적용. 이 모듈 소관이 아니거나 무효면 False (상태 변화 없음)."""
        ...
