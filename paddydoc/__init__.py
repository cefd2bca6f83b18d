from .core import PaddyDoc
from .report import classify, render_text, segment, split_title_content
from .types import (
    ClassifiedReport,
    ErrorReport,
    HealthyReport,
    Section,
    StructuredReport,
)

__all__ = [
    "PaddyDoc",
    "classify",
    "render_text",
    "segment",
    "split_title_content",
    "ClassifiedReport",
    "ErrorReport",
    "HealthyReport",
    "Section",
    "StructuredReport",
]
