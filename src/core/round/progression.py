"""라운드 진행 / 업그레이드 제안 시점"""

UPGRADE_INTERVAL = 3


def is_offer_round(round_number: int, interval: int = UPGRADE_INTERVAL) -> bool:
    """라운드 증가 후의 번호 기준. 4, 7, 10, ... (interval=3)"""
    if interval <= 0:
        return False
    return round_number > 1 and (round_number - 1) % interval == 0


def should_offer_upgrade(
    round_number: int, options_remaining: int, interval: int = UPGRADE_INTERVAL
) -> bool:
    return options_remaining > 0 and is_offer_round(round_number, interval)
