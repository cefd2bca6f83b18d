"""
Vision analysis client.

Sends a leaf photo plus the diagnosis prompt to a vision-capable chat model
and hands back the model's free text. Failures never escape ``analyze``:
they come back as ``"Error analyzing image: <reason>"`` so the report
classifier can turn them into an error report.
"""

from __future__ import annotations

import base64
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..report.classifier import ERROR_PREFIX
from ..utils.openai_client import get_client, get_model_name, get_provider
from ..utils.rate_limiter import RateLimiter
from .prompt import DIAGNOSIS_PROMPT

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "image/jpeg"

MIME_TYPES: Dict[str, str] = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
}


def guess_mime_type(path: str | Path) -> str:
    return MIME_TYPES.get(Path(path).suffix.lower(), DEFAULT_MIME_TYPE)


def encode_image(path: str | Path) -> str:
    """Return the image as a ``data:`` URL suitable for ``image_url`` parts."""
    data = base64.b64encode(Path(path).read_bytes()).decode("ascii")
    return f"data:{guess_mime_type(path)};base64,{data}"


def format_error(error: Exception | str) -> str:
    return f"{ERROR_PREFIX} {error}"


class VisionAnalyzer:
    def __init__(
        self,
        model: str = "gpt-4o",
        prompt: str = DIAGNOSIS_PROMPT,
        max_tokens: int = 1024,
        temperature: float = 0.0,
        client: Optional[Any] = None,
        limiter: Optional[RateLimiter] = None,
    ) -> None:
        self._client = client if client is not None else get_client()
        self._model = get_model_name(model)
        self.provider = get_provider()
        self._prompt = prompt
        self._max_tokens = max_tokens
        self._temperature = temperature
        self._limiter = limiter or RateLimiter()
        self._logger = logger
        self._logger.info("Vision analyzer using %s model %s", self.provider, self._model)

    def build_messages(self, image_url: str) -> List[Dict[str, Any]]:
        return [
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": self._prompt},
                    {"type": "image_url", "image_url": {"url": image_url}},
                ],
            }
        ]

    def analyze(self, image_path: str | Path) -> str:
        try:
            image_url = encode_image(image_path)
            completion = self._limiter.call(
                self._client.chat.completions.create,
                model=self._model,
                messages=self.build_messages(image_url),
                max_tokens=self._max_tokens,
                temperature=self._temperature,
            )
            text = completion.choices[0].message.content or ""
        except Exception as e:
            self._logger.error("Error analyzing image %s: %s", image_path, e)
            return format_error(e)

        self._logger.info("Vision model returned %d characters for %s", len(text), image_path)
        return text
