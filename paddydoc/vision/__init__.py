from .client import VisionAnalyzer, encode_image, format_error, guess_mime_type
from .prompt import DIAGNOSIS_PROMPT

__all__ = [
    "DIAGNOSIS_PROMPT",
    "VisionAnalyzer",
    "encode_image",
    "format_error",
    "guess_mime_type",
]
