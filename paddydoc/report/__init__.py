"""Turning raw vision-model text into classified reports."""

from .classifier import ERROR_PREFIX, classify
from .renderer import render_text
from .rules import TRIGGER_KEYWORDS, TRIGGER_RULES, TriggerRule
from .segmenter import segment
from .splitter import split_title_content

__all__ = [
    "ERROR_PREFIX",
    "classify",
    "render_text",
    "segment",
    "split_title_content",
    "TRIGGER_KEYWORDS",
    "TRIGGER_RULES",
    "TriggerRule",
]
