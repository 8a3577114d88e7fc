from fastapi import APIRouter

from app.ai.models import MODEL_CATALOG
from app.core.config import settings
from app.schemas.match import ModelInfo, ModelsResponse

router = APIRouter()


@router.get("/models", response_model=ModelsResponse, summary="List LLMs available for matching.")
async def list_models():
    return ModelsResponse(
        default=settings.default_llm,
        models=[
            ModelInfo(id=key, name=name, provider_model=model)
            for key, (model, name) in MODEL_CATALOG.items()
        ],
    )
