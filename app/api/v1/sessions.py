from fastapi import APIRouter, Header, HTTPException, Response, status

from app.core.security import check_api_key
from app.schemas.match import SessionEventRequest, SessionResponse
from app.services.session_state import (
    AnalysisSession,
    InvalidSessionTransition,
    SessionEvent,
    sessions,
)

router = APIRouter()


def _to_response(session: AnalysisSession) -> SessionResponse:
    return SessionResponse(
        session_id=session.session_id,
        state=session.state.value,
        error=session.error,
        result=session.result,
        updated_at=session.updated_at,
    )


@router.get("/sessions/{session_id}", response_model=SessionResponse)
async def get_session(
    session_id: str,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    check_api_key(x_api_key)
    session = sessions.get(session_id)
    if session is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Unknown session.")
    return _to_response(session)


@router.post("/sessions/{session_id}/events", response_model=SessionResponse)
async def post_session_event(
    session_id: str,
    payload: SessionEventRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    check_api_key(x_api_key)
    try:
        session = sessions.dispatch(session_id, SessionEvent(payload.event))
    except InvalidSessionTransition as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    return _to_response(session)


@router.delete("/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(
    session_id: str,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    check_api_key(x_api_key)
    if not sessions.discard(session_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Unknown session.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
