"""이벤트 유형 상수"""


class EventTypes:
    """이벤트 유형 문자열 상수"""

    # session
    SESSION_CREATED = "session_created"
    SESSION_CLOSED = "session_closed"

    # round
    ROUND_RESOLVED = "round_resolved"
    ROUND_REJECTED = "round_rejected"
    WEAPON_DEPLETED = "weapon_depleted"

    # === Upgrade events ===
    UPGRADE_OFFERED = "upgrade_offered"
    WEAPON_UNLOCKED = "weapon_unlocked"
    EFFECT_APPLIED = "effect_applied"
    EFFECT_CONSUMED = "effect_consumed"
