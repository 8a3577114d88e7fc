from fastapi import APIRouter

from app.ai.config import load_ai_config

router = APIRouter()


@router.get("/health", summary="Health Check", description="Check the health status of the application.")
async def health_check():
    ai_config = load_ai_config()
    return {
        "status": "healthy",
        "llm_provider": ai_config.provider,
        "llm_configured": bool(ai_config.api_key),
    }
