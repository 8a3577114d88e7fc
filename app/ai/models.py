from __future__ import annotations

FALLBACK_LLM = "claude"

# Short identifier -> (OpenRouter model id, display name).
MODEL_CATALOG: dict[str, tuple[str, str]] = {
    "claude": ("anthropic/claude-3-haiku:beta", "Claude 3 Haiku"),
    "gpt": ("openai/gpt-3.5-turbo", "GPT-3.5 Turbo"),
    "gemini": ("google/gemini-2.5-pro-preview", "Google: Gemini 2.5 Pro Preview"),
    "deepseek-r1-0528-qwen3-8b": ("deepseek/deepseek-r1-0528-qwen3-8b:free", "DeepSeek R1 0528 Qwen3 8B"),
    "deepseek-r1-0528": ("deepseek/deepseek-r1-0528:free", "DeepSeek R1 0528"),
    "sarvam-m": ("sarvamai/sarvam-m:free", "Sarvam AI: Sarvam-M"),
    "devstral-small": ("mistralai/devstral-small:free", "Mistral: Devstral Small"),
    "gemma-3n-4b": ("google/gemma-3n-e4b-it:free", "Google: Gemma 3N 4B"),
    "llama-3.3-8b-instruct": ("meta-llama/llama-3.3-8b-instruct:free", "Meta: Llama 3.3 8B Instruct"),
    "deephermes-3-mistral-24b-preview": ("nousresearch/deephermes-3-mistral-24b-preview:free", "Nous: DeepHermes 3 Mistral 24B Preview"),
    "phi-4-reasoning-plus": ("microsoft/phi-4-reasoning-plus:free", "Microsoft: Phi 4 Reasoning Plus"),
    "phi-4-reasoning": ("microsoft/phi-4-reasoning:free", "Microsoft: Phi 4 Reasoning"),
    "internvl3-14b": ("opengvlab/internvl3-14b:free", "OpenGVLab: InternVL3 14B"),
    "internvl3-2b": ("opengvlab/internvl3-2b:free", "OpenGVLab: InternVL3 2B"),
    "deepseek-prover-v2": ("deepseek/deepseek-prover-v2:free", "DeepSeek: Prover V2"),
    "qwen3-30b-a3b": ("qwen/qwen3-30b-a3b:free", "Qwen: Qwen3 30B A3B"),
    "qwen3-8b": ("qwen/qwen3-8b:free", "Qwen: Qwen3 8B"),
    "qwen3-14b": ("qwen/qwen3-14b:free", "Qwen: Qwen3 14B"),
    "qwen3-32b": ("qwen/qwen3-32b:free", "Qwen: Qwen3 32B"),
    "qwen3-235b-a22b": ("qwen/qwen3-235b-a22b:free", "Qwen: Qwen3 235B A22B"),
    "deepseek-r1t-chimera": ("tngtech/deepseek-r1t-chimera:free", "TNG: DeepSeek R1T Chimera"),
    "mai-ds-r1": ("microsoft/mai-ds-r1:free", "Microsoft: MAI DS R1"),
    "glm-z1-32b": ("thudm/glm-z1-32b:free", "THUDM: GLM Z1 32B"),
    "glm-4-32b": ("thudm/glm-4-32b:free", "THUDM: GLM 4 32B"),
    "shisa-v2-llama3.3-70b": ("shisa-ai/shisa-v2-llama3.3-70b:free", "Shisa AI: Shisa V2 Llama 3.3 70B"),
    "qwq-32b-arliai-rpr-v1": ("arliai/qwq-32b-arliai-rpr-v1:free", "ArliAI: QwQ 32B RPR V1"),
    "deepcoder-14b-preview": ("agentica-org/deepcoder-14b-preview:free", "Agentica: Deepcoder 14B Preview"),
    "kimi-vl-a3b-thinking": ("moonshotai/kimi-vl-a3b-thinking:free", "Moonshot AI: Kimi VL A3B Thinking"),
    "llama-3.3-nemotron-super-49b-v1": ("nvidia/llama-3.3-nemotron-super-49b-v1:free", "NVIDIA: Llama 3.3 Nemotron Super 49B V1"),
    "llama-3.1-nemotron-ultra-253b-v1": ("nvidia/llama-3.1-nemotron-ultra-253b-v1:free", "NVIDIA: Llama 3.1 Nemotron Ultra 253b V1"),
    "llama-4-maverick": ("meta-llama/llama-4-maverick:free", "Meta: Llama 4 Maverick"),
    "llama-4-scout": ("meta-llama/llama-4-scout:free", "Meta: Llama 4 Scout"),
    "deepseek-v3-base": ("deepseek/deepseek-v3-base:free", "DeepSeek: DeepSeek V3 Base"),
    "qwen2.5-vl-3b-instruct": ("qwen/qwen2.5-vl-3b-instruct:free", "Qwen: Qwen2.5 VL 3B Instruct"),
    "gemini-2.5-pro-exp": ("google/gemini-2.5-pro-exp-03-25", "Google: Gemini 2.5 Pro Experimental"),
    "qwen2.5-vl-32b-instruct": ("qwen/qwen2.5-vl-32b-instruct:free", "Qwen: Qwen2.5 VL 32B Instruct"),
    "deepseek-chat-v3-0324": ("deepseek/deepseek-chat-v3-0324:free", "DeepSeek: DeepSeek Chat V3 0324"),
    "qwerky-72b": ("featherless/qwerky-72b:free", "Qwerky 72B"),
    "mistral-small-3.1-24b": ("mistralai/mistral-small-3.1-24b-instruct:free", "Mistral: Mistral Small 3.1 24B"),
    "olympiccoder-32b": ("open-r1/olympiccoder-32b:free", "OlympicCoder 32B"),
    "gemma-3-1b": ("google/gemma-3-1b-it:free", "Google: Gemma 3 1B"),
    "gemma-3-4b": ("google/gemma-3-4b-it:free", "Google: Gemma 3 4B"),
    "gemma-3-12b": ("google/gemma-3-12b-it:free", "Google: Gemma 3 12B"),
    "reka-flash-3": ("rekaai/reka-flash-3:free", "Reka: Flash 3"),
    "gemma-3-27b": ("google/gemma-3-27b-it:free", "Google: Gemma 3 27B"),
    "deepseek-r1-zero": ("deepseek/deepseek-r1-zero:free", "DeepSeek: DeepSeek R1 Zero"),
    "qwq-32b": ("qwen/qwq-32b:free", "Qwen: QwQ 32B"),
    "moonlight-16b-a3b-instruct": ("moonshotai/moonlight-16b-a3b-instruct:free", "Moonshot AI: Moonlight 16B A3B Instruct"),
    "deephermes-3-llama-3-8b-preview": ("nousresearch/deephermes-3-llama-3-8b-preview:free", "Nous: DeepHermes 3 Llama 3 8B Preview"),
    "dolphin3.0-r1-mistral-24b": ("cognitivecomputations/dolphin3.0-r1-mistral-24b:free", "Dolphin 3.0 R1 Mistral 24B"),
    "dolphin3.0-mistral-24b": ("cognitivecomputations/dolphin3.0-mistral-24b:free", "Dolphin 3.0 Mistral 24B"),
    "qwen2.5-vl-72b-instruct": ("qwen/qwen2.5-vl-72b-instruct:free", "Qwen: Qwen2.5 VL 72B Instruct"),
    "mistral-small-24b-instruct": ("mistralai/mistral-small-24b-instruct-2501:free", "Mistral: Mistral Small 24B Instruct"),
    "deepseek-r1-distill-qwen-32b": ("deepseek/deepseek-r1-distill-qwen-32b:free", "DeepSeek: R1 Distill Qwen 32B"),
    "deepseek-r1-distill-qwen-14b": ("deepseek/deepseek-r1-distill-qwen-14b:free", "DeepSeek: R1 Distill Qwen 14B"),
    "deepseek-r1-distill-llama-70b": ("deepseek/deepseek-r1-distill-llama-70b:free", "DeepSeek: R1 Distill Llama 70B"),
    "deepseek-r1": ("deepseek/deepseek-r1:free", "DeepSeek: R1"),
    "deepseek-chat": ("deepseek/deepseek-chat:free", "DeepSeek: DeepSeek Chat"),
    "gemini-2.0-flash-exp": ("google/gemini-2.0-flash-exp:free", "Google: Gemini 2.0 Flash Experimental"),
    "llama-3.3-70b-instruct": ("meta-llama/llama-3.3-70b-instruct:free", "Meta: Llama 3.3 70B Instruct"),
    "qwen-2.5-coder-32b-instruct": ("qwen/qwen-2.5-coder-32b-instruct:free", "Qwen: Qwen 2.5 Coder 32B Instruct"),
    "qwen-2.5-7b-instruct": ("qwen/qwen-2.5-7b-instruct:free", "Qwen: Qwen 2.5 7B Instruct"),
    "llama-3.2-3b-instruct": ("meta-llama/llama-3.2-3b-instruct:free", "Meta: Llama 3.2 3B Instruct"),
    "llama-3.2-11b-vision-instruct": ("meta-llama/llama-3.2-11b-vision-instruct:free", "Meta: Llama 3.2 11B Vision Instruct"),
    "llama-3.2-1b-instruct": ("meta-llama/llama-3.2-1b-instruct:free", "Meta: Llama 3.2 1B Instruct"),
    "qwen-2.5-72b-instruct": ("qwen/qwen-2.5-72b-instruct:free", "Qwen: Qwen 2.5 72B Instruct"),
    "qwen-2.5-vl-7b-instruct": ("qwen/qwen-2.5-vl-7b-instruct:free", "Qwen: Qwen 2.5 VL 7B Instruct"),
    "llama-3.1-405b": ("meta-llama/llama-3.1-405b:free", "Meta: Llama 3.1 405B"),
    "llama-3.1-8b-instruct": ("meta-llama/llama-3.1-8b-instruct:free", "Meta: Llama 3.1 8B Instruct"),
    "mistral-nemo": ("mistralai/mistral-nemo:free", "Mistral: Mistral Nemo"),
    "gemma-2-9b": ("google/gemma-2-9b-it:free", "Google: Gemma 2 9B"),
    "mistral-7b-instruct": ("mistralai/mistral-7b-instruct:free", "Mistral: Mistral 7B Instruct"),
}


def resolve_model(llm: str | None) -> str:
    """Map a short identifier to the provider model id; unknown identifiers fall back to Claude."""
    key = (llm or "").strip().lower()
    model, _ = MODEL_CATALOG.get(key, MODEL_CATALOG[FALLBACK_LLM])
    return model


def display_name(llm: str | None) -> str:
    key = (llm or "").strip().lower()
    entry = MODEL_CATALOG.get(key)
    return entry[1] if entry else (llm or "")
