"""라운드 판정 — 승패, 점수, 메시지 (순수 함수)"""

from typing import Optional

from src.core.round.models import EffectType, Outcome
from src.core.weapon.registry import WeaponRegistry


def capitalize(text: str) -> str:
    return text[:1].upper() + text[1:]


def determine_outcome(
    registry: WeaponRegistry, player_choice: str, computer_choice: str
) -> Outcome:
    """승패 판정.

    같은 무기 → 무승부.
    한쪽만 상대를 이기면 그쪽 승리.
    둘 다 이기거나 둘 다 관계가 없으면 (카탈로그 불일치) → 무승부.
    """
    if player_choice == computer_choice:
        return Outcome.TIE

    player_weapon = registry.get(player_choice)
    computer_weapon = registry.get(computer_choice)
    player_beats = bool(player_weapon and player_weapon.defeats(computer_choice))
    computer_beats = bool(computer_weapon and computer_weapon.defeats(player_choice))

    if player_beats and not computer_beats:
        return Outcome.PLAYER
    if computer_beats and not player_beats:
        return Outcome.COMPUTER
    return Outcome.TIE


def score_round(outcome: Outcome, effect: Optional[EffectType]) -> dict:
    """이번 라운드의 점수 변화.

    DOUBLE: 플레이어 승리 시 +2
    SHIELD: 컴퓨터 승리 시 컴퓨터 득점 0

    Returns:
        {"player_points": int, "computer_points": int, "shield_absorbed": bool}
    """
    player_points = 0
    computer_points = 0
    shield_absorbed = False

    if outcome == Outcome.PLAYER:
        player_points = 2 if effect == EffectType.DOUBLE else 1
    elif outcome == Outcome.COMPUTER:
        if effect == EffectType.SHIELD:
            shield_absorbed = True
        else:
            computer_points = 1

    return {
        "player_points": player_points,
        "computer_points": computer_points,
        "shield_absorbed": shield_absorbed,
    }


def build_message(
    player_choice: str,
    computer_choice: str,
    outcome: Outcome,
    doubled: bool = False,
    shield_absorbed: bool = False,
) -> str:
    if outcome == Outcome.PLAYER:
        message = f"{capitalize(player_choice)} beats {computer_choice}. You win this round!"
        if doubled:
            message += " Double points!"
        return message

    if outcome == Outcome.COMPUTER:
        if shield_absorbed:
            return (
                f"{capitalize(computer_choice)} beats {player_choice}, "
                "but your shield absorbed the loss!"
            )
        return f"{capitalize(computer_choice)} beats {player_choice}. You lose this round!"

    if player_choice == computer_choice:
        return f"It's a tie! You both chose {player_choice}."
    return f"{capitalize(player_choice)} and {computer_choice} cancel out. It's a tie!"
