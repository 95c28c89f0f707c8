# -*- coding: utf-8 -*-
"""
NeuroSynth configuration

All settings come from environment variables; a `.env` file next to the
backend is loaded first when present.
"""

import os
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass, field

from dotenv import load_dotenv


def load_dotenv_if_any():
    env_path = Path(__file__).resolve().parent.parent / ".env"
    if env_path.exists():
        load_dotenv(env_path)

load_dotenv_if_any()


def _env_optional_float(name: str) -> Optional[float]:
    raw = os.getenv(name, "").strip()
    return float(raw) if raw else None


def _env_optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else None


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# ==================== LLM config ====================

@dataclass
class LLMConfig:
    """
    Chat-completion service used for narrative enrichment

    An empty api_key switches enrichment to the offline template.
    """
    api_url: str = field(default_factory=lambda: os.getenv("LLM_API_URL", "https://api.openai.com/v1"))
    api_key: str = field(default_factory=lambda: os.getenv("LLM_API_KEY") or os.getenv("GPT5_API_KEY", ""))
    model: str = field(default_factory=lambda: os.getenv("LLM_MODEL", "gpt-5"))
    temperature: float = field(default_factory=lambda: float(os.getenv("LLM_TEMPERATURE", "0.7")))
    max_tokens: Optional[int] = field(default_factory=lambda: _env_optional_int("LLM_MAX_TOKENS"))
    timeout: Optional[float] = field(default_factory=lambda: _env_optional_float("LLM_TIMEOUT"))  # None = transport default


# ==================== Synthesis config ====================

@dataclass
class SynthesisConfig:
    """Batch generation defaults"""
    default_records: int = 10
    filename_prefix: str = "neurosynth"


# ==================== Feature flags ====================

@dataclass
class FeatureFlags:
    enable_llm: bool = field(default_factory=lambda: _env_flag("NEUROSYNTH_ENABLE_LLM", "true"))
    log_level: str = field(default_factory=lambda: os.getenv("NEUROSYNTH_LOG_LEVEL", "INFO"))
    log_to_file: bool = field(default_factory=lambda: _env_flag("NEUROSYNTH_LOG_TO_FILE", "false"))


# ==================== Main config ====================

class NeuroSynthConfig:
    """
    Aggregates every config section behind one object
    """

    def __init__(self):
        self.version = "1.0.0"

        self.llm = LLMConfig()
        self.synthesis = SynthesisConfig()
        self.features = FeatureFlags()

        self.validate()

    @property
    def llm_enabled(self) -> bool:
        """True when narratives should be requested from the LLM service"""
        return self.features.enable_llm and bool(self.llm.api_key)

    def validate(self):
        """
        Check that every setting is in range

        Raises:
            ValueError: on an invalid setting
        """
        if self.synthesis.default_records < 1:
            raise ValueError("default_records must be >= 1")

        if not 0.0 <= self.llm.temperature <= 2.0:
            raise ValueError("LLM_TEMPERATURE must be within 0.0-2.0")

        if self.llm.max_tokens is not None and self.llm.max_tokens <= 0:
            raise ValueError("LLM_MAX_TOKENS must be > 0")

        if self.llm.timeout is not None and self.llm.timeout <= 0:
            raise ValueError("LLM_TIMEOUT must be > 0")

        if not self.llm.api_url.startswith(("http://", "https://")):
            raise ValueError("LLM_API_URL must be an http(s) URL")

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize for logging; the API key is masked
        """
        llm = dict(self.llm.__dict__)
        llm["api_key"] = "***" if llm["api_key"] else ""
        return {
            "version": self.version,
            "llm": llm,
            "synthesis": self.synthesis.__dict__,
            "features": self.features.__dict__,
        }


# ==================== Global instance ====================

cfg = NeuroSynthConfig()


def get_config() -> NeuroSynthConfig:
    """
    Return the process-wide config instance
    """
    return cfg


def reload_config() -> NeuroSynthConfig:
    """
    Re-read the environment into a fresh config instance
    """
    global cfg
    cfg = NeuroSynthConfig()
    return cfg
