from contextlib import asynccontextmanager
import logging

from app.ai.config import load_ai_config
from app.core.config.scoring import get_scoring_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    scoring = get_scoring_config()
    ai_config = load_ai_config()
    if not ai_config.api_key:
        logger.warning("llm_disabled provider=%s: API key is not configured", ai_config.provider)
    logger.info(
        "startup_complete provider=%s bands=%s",
        ai_config.provider,
        scoring.get("bands", {}),
    )
    yield
    logger.info("shutdown_complete")
