"""라운드 판정 Core — 순수 Python"""

from .models import (
    EFFECT_INFO,
    EffectType,
    Outcome,
    RoundResult,
    UpgradeKind,
    UpgradeOption,
)
from .progression import is_offer_round, should_offer_upgrade
from .resolution import build_message, determine_outcome, score_round

__all__ = [
    "EFFECT_INFO",
    "EffectType",
    "Outcome",
    "RoundResult",
    "UpgradeKind",
    "UpgradeOption",
    "is_offer_round",
    "should_offer_upgrade",
    "build_message",
    "determine_outcome",
    "score_round",
]
