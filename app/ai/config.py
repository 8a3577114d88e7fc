import os
from dataclasses import dataclass

OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"


@dataclass(frozen=True)
class AIConfig:
    provider: str
    api_key: str
    base_url: str | None
    timeout_s: float
    max_retries: int


def load_ai_config() -> AIConfig:
    provider = os.getenv("AI_PROVIDER", "openrouter").strip().lower()
    if provider == "openai":
        api_key = os.getenv("OPENAI_API_KEY", "")
        base_url = os.getenv("OPENAI_BASE_URL", "").strip() or None
    else:
        api_key = os.getenv("OPENROUTER_API_KEY", "")
        base_url = os.getenv("OPENROUTER_BASE_URL", "").strip() or OPENROUTER_BASE_URL
    return AIConfig(
        provider=provider,
        api_key=api_key.strip(),
        base_url=base_url,
        timeout_s=float(os.getenv("LLM_TIMEOUT_S", "90")),
        max_retries=int(os.getenv("LLM_MAX_RETRIES", "2")),
    )
