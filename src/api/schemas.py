"""API request/response schemas."""

from typing import Optional

from pydantic import BaseModel, Field


# === Request Schemas ===


class CreateSessionRequest(BaseModel):
    """세션 생성 요청"""

    seed: Optional[int] = Field(None, description="컴퓨터 선택 RNG 시드")
    weapon_unlocks: Optional[bool] = Field(None, description="무기 해금 모드 (기본: 설정값)")
    effects: Optional[bool] = Field(None, description="단발 효과 모드 (기본: 설정값)")


class RoundRequest(BaseModel):
    """라운드 진행 요청"""

    weapon: str = Field(..., min_length=1, max_length=32, description="플레이어 무기 ID")


class UpgradeRequest(BaseModel):
    """업그레이드 선택 요청"""

    upgrade_id: str = Field(
        ..., min_length=1, max_length=32, description="무기 ID 또는 효과 ID"
    )


# === Response Schemas ===


class WeaponInfo(BaseModel):
    """무기 카탈로그 항목"""

    weapon_id: str
    name: str
    glyph: str
    beats: list[str] = []
    description: str
    starter: bool


class UpgradeOptionInfo(BaseModel):
    """업그레이드 카드"""

    upgrade_id: str
    kind: str
    name: str
    glyph: str
    description: str


class SessionInfo(BaseModel):
    """세션 상태"""

    session_id: str
    player_score: int
    computer_score: int
    round_number: int
    unlocked: list[str] = []
    remaining_upgrades: list[str] = []
    player_durability: dict[str, int] = {}
    computer_durability: dict[str, int] = {}
    active_effect: Optional[str] = None
    revealed_choice: Optional[str] = None
    upgrade_offer_pending: bool = False
    upgrade_options: list[UpgradeOptionInfo] = []
    modes: dict[str, bool] = {}


class RoundResultInfo(BaseModel):
    """라운드 결과"""

    played_round: int
    round_number: int
    player_choice: str
    computer_choice: str
    outcome: str
    message: str
    player_score: int
    computer_score: int
    player_points: int
    computer_points: int
    effect_used: Optional[str] = None
    shield_absorbed: bool = False
    player_durability: int
    computer_durability: int
    upgrade_offered: bool = False
    upgrade_options: list[UpgradeOptionInfo] = []


class SessionResponse(BaseModel):
    """세션 생성/조회 응답"""

    success: bool
    session: SessionInfo


class RoundResponse(BaseModel):
    """라운드 진행 응답. 선택 불가 무기면 success=False, result=None."""

    success: bool
    message: str
    result: Optional[RoundResultInfo] = None
    session: SessionInfo


class UpgradeResponse(BaseModel):
    """업그레이드 선택 응답. 무효 ID면 success=False."""

    success: bool
    message: str
    session: SessionInfo


class HistoryResponse(BaseModel):
    """최근 라운드 기록"""

    session_id: str
    rounds: list[RoundResultInfo] = []


class CloseSessionResponse(BaseModel):
    success: bool
    session_id: str


class ErrorResponse(BaseModel):
    """에러 응답"""

    success: bool = False
    error: str
    detail: Optional[str] = None
