from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml

from .vision.prompt import DIAGNOSIS_PROMPT

DEFAULT_MODEL = "gpt-4o"

_KNOWN_KEYS = {
    "model",
    "prompt",
    "max_tokens",
    "temperature",
    "requests_per_minute",
    "max_retries",
    "log_level",
}


@dataclass
class AnalyzerConfig:
    model: str = DEFAULT_MODEL
    prompt: str = DIAGNOSIS_PROMPT
    max_tokens: int = 1024
    temperature: float = 0.0
    requests_per_minute: int = 20
    max_retries: int = 3
    log_level: str = "INFO"
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_env(cls) -> "AnalyzerConfig":
        return cls(
            model=os.getenv("PADDYDOC_MODEL", DEFAULT_MODEL),
            log_level=os.getenv("PADDYDOC_LOG_LEVEL", "INFO"),
        )


def load_analyzer_config(path: str | Path) -> AnalyzerConfig:
    data = yaml.safe_load(Path(path).read_text()) or {}
    defaults = AnalyzerConfig.from_env()
    return AnalyzerConfig(
        model=data.get("model", defaults.model),
        prompt=data.get("prompt", defaults.prompt),
        max_tokens=int(data.get("max_tokens", defaults.max_tokens)),
        temperature=float(data.get("temperature", defaults.temperature)),
        requests_per_minute=int(data.get("requests_per_minute", defaults.requests_per_minute)),
        max_retries=int(data.get("max_retries", defaults.max_retries)),
        log_level=data.get("log_level", defaults.log_level),
        extra={k: v for k, v in data.items() if k not in _KNOWN_KEYS},
    )
