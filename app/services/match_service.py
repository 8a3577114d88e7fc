from __future__ import annotations

import logging
import random
import time
from datetime import datetime, timezone

from app.ai.factory import get_ai_client
from app.ai.models import display_name, resolve_model
from app.ai.types import LLMProviderError
from app.analysis.assembler import assemble
from app.analysis.display import potential_improvement, score_band
from app.analysis.response import split_response
from app.core.config import settings
from app.formatting.narrative import format_narrative
from app.formatting.resume import format_resume
from app.parsing.parse import DocumentParseError, UnsupportedDocumentError, parse_upload
from app.schemas.match import AnalysisView, MatchResponse, ParseRequest, ParseResponse
from app.services.prompts import build_match_messages
from app.services.session_state import AnalysisState, SessionEvent, sessions

logger = logging.getLogger(__name__)

_rng = random.Random()


class MatchServiceError(RuntimeError):
    def __init__(self, message: str, status_code: int = 502):
        super().__init__(message)
        self.status_code = status_code


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def build_view(analysis_text: str, improved_resume_text: str) -> AnalysisView:
    """Run the pure parsing/formatting core over both texts."""
    analysis = assemble(analysis_text)
    return AnalysisView(
        analysis=analysis,
        analysis_html=format_narrative(analysis_text),
        improved_resume_html=format_resume(improved_resume_text) if improved_resume_text.strip() else "",
        score_band=score_band(analysis.overall_score),
    )


def run_parse(payload: ParseRequest) -> ParseResponse:
    view = build_view(payload.analysis_text, payload.improved_resume_text)
    return ParseResponse(**view.model_dump(), generated_at=_utc_now())


def extract_resume_text(filename: str, content: bytes) -> str:
    try:
        parsed = parse_upload(filename, content)
    except UnsupportedDocumentError as exc:
        raise MatchServiceError(str(exc), status_code=400) from exc
    except DocumentParseError as exc:
        raise MatchServiceError(str(exc), status_code=422) from exc

    for warning in parsed.parsing_warnings:
        logger.info("resume_parse_warning doc_id=%s: %s", parsed.doc_id, warning)
    if not parsed.text.strip():
        raise MatchServiceError("No text could be extracted from the uploaded resume.", status_code=422)
    return parsed.text


def _validate_job_description(job_description: str) -> str:
    text = (job_description or "").strip()
    if not text:
        raise MatchServiceError("Missing resume or job description.", status_code=400)
    if len(text) > settings.max_job_description_chars:
        raise MatchServiceError(
            f"Job description exceeds maximum length of {settings.max_job_description_chars} characters.",
            status_code=400,
        )
    return text


async def _complete(resume_text: str, job_description: str, model: str) -> str:
    try:
        client = get_ai_client()
    except (LLMProviderError, ValueError) as exc:
        logger.warning("llm_client_unavailable: %s", exc)
        raise MatchServiceError("LLM provider is not configured.", status_code=503) from exc

    try:
        return await client.complete(build_match_messages(resume_text, job_description), model=model)
    except LLMProviderError as exc:
        logger.warning("match_llm_failed model=%s code=%s: %s", model, exc.code, exc)
        raise MatchServiceError(str(exc), status_code=502) from exc


def _fail_session(session_id: str | None, error: str) -> None:
    if not session_id:
        return
    session = sessions.get(session_id)
    if session is not None and session.state is AnalysisState.ANALYZING:
        sessions.dispatch(session_id, SessionEvent.ANALYSIS_FAILED, error=error)


async def run_match(
    *,
    filename: str,
    content: bytes,
    job_description: str,
    llm: str | None,
    session_id: str | None = None,
    rng: random.Random | None = None,
) -> MatchResponse:
    llm_key = (llm or "").strip().lower() or settings.default_llm
    model = resolve_model(llm_key)
    if session_id:
        sessions.dispatch(session_id, SessionEvent.FILE_SELECTED)
        sessions.dispatch(session_id, SessionEvent.ANALYSIS_REQUESTED)

    started = time.perf_counter()
    try:
        description = _validate_job_description(job_description)
        resume_text = extract_resume_text(filename, content)
        raw = await _complete(resume_text, description, model)

        ai_analysis, improved_resume = split_response(raw)
        view = build_view(ai_analysis, improved_resume)
        result = MatchResponse(
            **view.model_dump(),
            llm=llm_key,
            llm_name=display_name(llm_key),
            model=model,
            ai_analysis=ai_analysis,
            improved_resume=improved_resume,
            potential_improvement=potential_improvement(view.analysis.overall_score, rng or _rng),
            resume_chars=len(resume_text),
            session_id=session_id,
            generated_at=_utc_now(),
        )
    except MatchServiceError as exc:
        _fail_session(session_id, str(exc))
        raise
    except BaseException as exc:
        # Includes cancellation when the client disconnects mid-request.
        logger.warning("match_aborted model=%s: %r", model, exc)
        _fail_session(session_id, "Analysis failed unexpectedly.")
        raise

    logger.info(
        "match_completed model=%s score=%s latency_ms=%s",
        model,
        result.analysis.overall_score,
        int((time.perf_counter() - started) * 1000),
    )
    if session_id:
        sessions.dispatch(session_id, SessionEvent.ANALYSIS_SUCCEEDED, result=result)
    return result
