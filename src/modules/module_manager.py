"""모듈 관리자 - 등록, 활성화/비활성화, 업그레이드 수집/적용"""

from typing import Dict, List

from src.core.logging import get_logger
from src.core.round.models import UpgradeOption
from src.modules.base import GameContext, GameModule

logger = get_logger(__name__)


class ModuleManager:
    """세션 하나의 확장 모드 토글 및 생명주기 관리"""

    def __init__(self, context: GameContext) -> None:
        self._context = context
        self._modules: Dict[str, GameModule] = {}

    @property
    def modules(self) -> Dict[str, GameModule]:
        """등록된 모든 모듈 (읽기 전용 접근)"""
        return dict(self._modules)

    def get_enabled_modules(self) -> List[GameModule]:
        """활성화된 모듈만, 등록 순서대로"""
        return [m for m in self._modules.values() if m.enabled]

    def register(self, module: GameModule) -> None:
        """모듈 등록. 같은 이름 중복 등록 시 경고 후 덮어쓰기."""
        if module.name in self._modules:
            logger.warning("Overwriting module: %s", module.name)
        self._modules[module.name] = module
        logger.debug("Module registered: %s", module.name)

    def enable(self, name: str) -> bool:
        """모듈 활성화. 미등록 모듈이면 False."""
        module = self._modules.get(name)
        if not module:
            logger.error("Module not registered: %s", name)
            return False

        if module.enabled:
            return True

        module.on_enable(self._context)
        module.enabled = True
        logger.info("Module enabled: %s (session=%s)", name, self._context.session_id)
        return True

    def disable(self, name: str) -> bool:
        """모듈 비활성화. 미등록 모듈이면 False."""
        module = self._modules.get(name)
        if not module:
            logger.error("Module not registered: %s", name)
            return False

        if not module.enabled:
            return True

        module.on_disable(self._context)
        module.enabled = False
        logger.info("Module disabled: %s (session=%s)", name, self._context.session_id)
        return True

    def is_enabled(self, name: str) -> bool:
        module = self._modules.get(name)
        return module.enabled if module else False

    def collect_upgrade_options(self) -> List[UpgradeOption]:
        """모든 활성 모듈의 업그레이드 후보 수집"""
        options: List[UpgradeOption] = []
        for module in self.get_enabled_modules():
            options.extend(module.get_upgrade_options(self._context))
        return options

    def apply_upgrade(self, upgrade_id: str, module_name: str | None = None) -> bool:
        """업그레이드 적용. module_name이 없으면 활성 모듈에 순서대로 시도."""
        if module_name is not None:
            if not self.is_enabled(module_name):
                logger.debug("Upgrade %s ignored: %s disabled", upgrade_id, module_name)
                return False
            return self._modules[module_name].apply_upgrade(upgrade_id, self._context)

        for module in self.get_enabled_modules():
            if module.apply_upgrade(upgrade_id, self._context):
                return True
        logger.debug("Upgrade %s ignored: no module accepted it", upgrade_id)
        return False
