from fastapi import APIRouter, File, Form, Header, HTTPException, Request, UploadFile, status

from app.core.config import settings
from app.core.rate_limit import rate_limit
from app.core.security import check_api_key
from app.schemas.match import MatchResponse, ParseRequest, ParseResponse
from app.services.match_service import MatchServiceError, run_match, run_parse
from app.services.session_state import InvalidSessionTransition

router = APIRouter()


async def _read_upload(file: UploadFile) -> bytes:
    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await file.read(1024 * 64)
        if not chunk:
            break
        total += len(chunk)
        if total > settings.max_upload_bytes:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=f"File too large. Maximum allowed size is {settings.max_upload_bytes // (1024 * 1024)} MB.",
            )
        chunks.append(chunk)
    return b"".join(chunks)


@router.post("/match", response_model=MatchResponse)
@rate_limit(settings.match_rate_limit)
async def match_resume(
    request: Request,
    resume: UploadFile = File(...),
    job_description: str = Form(default="", alias="jobDescription"),
    llm: str = Form(default=""),
    session_id: str | None = Form(default=None, alias="sessionId"),
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    _ = request
    check_api_key(x_api_key)
    if not job_description.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing resume or job description.",
        )

    content = await _read_upload(resume)
    try:
        return await run_match(
            filename=resume.filename or "resume",
            content=content,
            job_description=job_description,
            llm=llm,
            session_id=session_id or None,
        )
    except InvalidSessionTransition as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    except MatchServiceError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc


@router.post("/analysis/parse", response_model=ParseResponse)
@rate_limit()
async def parse_analysis(
    request: Request,
    payload: ParseRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    _ = request
    check_api_key(x_api_key)
    return run_parse(payload)
