"""Game API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Request

from src.api.schemas import (
    CloseSessionResponse,
    CreateSessionRequest,
    ErrorResponse,
    HistoryResponse,
    RoundRequest,
    RoundResponse,
    RoundResultInfo,
    SessionInfo,
    SessionResponse,
    UpgradeOptionInfo,
    UpgradeRequest,
    UpgradeResponse,
    WeaponInfo,
)
from src.core.engine import RoundEngine
from src.core.logging import get_logger
from src.core.weapon.registry import WeaponRegistry
from src.services.game_service import GameService

logger = get_logger(__name__)

router = APIRouter(prefix="/game", tags=["game"])


def get_game_service(request: Request) -> GameService:
    """GameService 인스턴스 반환 (의존성 주입)"""
    service: GameService = request.app.state.game_service
    return service


def get_weapon_registry(request: Request) -> WeaponRegistry:
    """WeaponRegistry 인스턴스 반환 (의존성 주입)"""
    registry: WeaponRegistry = request.app.state.weapon_registry
    return registry


def _get_engine_or_404(service: GameService, session_id: str) -> RoundEngine:
    engine = service.get_engine(session_id)
    if engine is None:
        raise HTTPException(status_code=404, detail=f"Session not found: {session_id}")
    return engine


def _build_session_info(engine: RoundEngine) -> SessionInfo:
    """RoundEngine 스냅샷을 SessionInfo로 변환"""
    options = []
    if engine.state.upgrade_offer_pending:
        options = [
            UpgradeOptionInfo(**o.to_dict()) for o in engine.get_upgrade_offers()
        ]
    return SessionInfo(**engine.snapshot(), upgrade_options=options)


@router.get("/weapons", response_model=list[WeaponInfo])
def list_weapons(
    registry: WeaponRegistry = Depends(get_weapon_registry),
) -> list[WeaponInfo]:
    """무기 카탈로그 (툴팁/업그레이드 카드 설명 포함)"""
    return [
        WeaponInfo(
            weapon_id=w.weapon_id,
            name=w.display_name,
            glyph=w.glyph,
            beats=list(w.beats),
            description=w.describe(),
            starter=w.starter,
        )
        for w in registry.get_all()
    ]


@router.post("/sessions", response_model=SessionResponse)
def create_session(
    request: CreateSessionRequest,
    service: GameService = Depends(get_game_service),
) -> SessionResponse:
    """
    새 게임 세션 생성

    시작 무기(rock, paper, scissors)를 내구도 3으로 지급합니다.
    """
    session_id = service.create_session(
        seed=request.seed,
        weapon_unlocks=request.weapon_unlocks,
        effects=request.effects,
    )
    engine = _get_engine_or_404(service, session_id)
    return SessionResponse(success=True, session=_build_session_info(engine))


@router.get(
    "/sessions/{session_id}",
    response_model=SessionResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_session(
    session_id: str,
    service: GameService = Depends(get_game_service),
) -> SessionResponse:
    """현재 세션 상태 조회"""
    engine = _get_engine_or_404(service, session_id)
    return SessionResponse(success=True, session=_build_session_info(engine))


@router.delete(
    "/sessions/{session_id}",
    response_model=CloseSessionResponse,
    responses={404: {"model": ErrorResponse}},
)
def close_session(
    session_id: str,
    service: GameService = Depends(get_game_service),
) -> CloseSessionResponse:
    """세션 종료"""
    if not service.close_session(session_id):
        raise HTTPException(status_code=404, detail=f"Session not found: {session_id}")
    return CloseSessionResponse(success=True, session_id=session_id)


@router.post(
    "/sessions/{session_id}/round",
    response_model=RoundResponse,
    responses={404: {"model": ErrorResponse}},
)
def play_round(
    session_id: str,
    request: RoundRequest,
    service: GameService = Depends(get_game_service),
) -> RoundResponse:
    """
    라운드 진행

    소진되었거나 해금되지 않은 무기, 또는 업그레이드 선택 대기 중에는
    무시됩니다 (success=False, 상태 변화 없음).
    """
    engine = _get_engine_or_404(service, session_id)
    weapon = request.weapon.strip().lower()

    try:
        result = service.play_round(session_id, weapon)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))

    if result is None:
        message = (
            "Choose an upgrade before the next round"
            if engine.state.upgrade_offer_pending
            else f"Weapon not available: {weapon}"
        )
        return RoundResponse(
            success=False,
            message=message,
            result=None,
            session=_build_session_info(engine),
        )

    return RoundResponse(
        success=True,
        message=result.message,
        result=RoundResultInfo(**result.to_dict()),
        session=_build_session_info(engine),
    )


@router.post(
    "/sessions/{session_id}/upgrade",
    response_model=UpgradeResponse,
    responses={404: {"model": ErrorResponse}},
)
def choose_upgrade(
    session_id: str,
    request: UpgradeRequest,
    service: GameService = Depends(get_game_service),
) -> UpgradeResponse:
    """
    업그레이드 선택

    - 무기 ID (fire, air): 무기 해금
    - 효과 ID (double, shield, reveal): 다음 라운드 단발 효과

    제안 대기 중인 목록에 있는 ID만 적용됩니다.
    """
    engine = _get_engine_or_404(service, session_id)
    upgrade_id = request.upgrade_id.strip().lower()

    try:
        applied = service.choose_upgrade(session_id, upgrade_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))

    message = (
        f"Upgrade applied: {upgrade_id}"
        if applied
        else f"Upgrade not available: {upgrade_id}"
    )
    return UpgradeResponse(
        success=applied,
        message=message,
        session=_build_session_info(engine),
    )


@router.get(
    "/sessions/{session_id}/history",
    response_model=HistoryResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_history(
    session_id: str,
    service: GameService = Depends(get_game_service),
) -> HistoryResponse:
    """최근 라운드 기록 (오래된 순)"""
    try:
        rounds = service.get_history(session_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return HistoryResponse(
        session_id=session_id,
        rounds=[RoundResultInfo(**r) for r in rounds],
    )
