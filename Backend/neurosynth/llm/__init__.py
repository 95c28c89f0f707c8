from .client import LLMClient
from .prompts import (
    NARRATIVE_SYSTEM_PROMPT,
    FALLBACK_NARRATIVE,
    build_narrative_prompt,
    offline_narrative,
    local_narrative,
)

__all__ = [
    "LLMClient",
    "NARRATIVE_SYSTEM_PROMPT",
    "FALLBACK_NARRATIVE",
    "build_narrative_prompt",
    "offline_narrative",
    "local_narrative",
]
