"""
Ordered rule tables driving report segmentation.

Two tables live here:

- ``TRIGGER_RULES``: predicates deciding whether a line opens a new section.
  A line is a trigger when any rule matches.
- ``TITLE_EXTRACTORS``: functions turning a trigger line into a
  ``(title, content)`` pair. They are tried in order and the first one that
  returns a pair wins.

New keywords are added by appending to ``TRIGGER_KEYWORDS``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

TitleContent = Tuple[str, str]

# "1. ", "12.\t" ...
NUMBERED_ITEM_PATTERN = re.compile(r"^\d+\.\s")

# "1. **Disease Name**:" or "1. Severity:"
NUMBERED_TITLE_PATTERN = re.compile(r"^\d+\.\s*(?:\*\*([^:*]+)\*\*:?|([^:*]+):?)")

BOLD_MARKER = "**"

TRIGGER_KEYWORDS: Tuple[str, ...] = (
    "disease name",
    "severity",
    "symptoms",
    "treatment",
)


@dataclass(frozen=True)
class TriggerRule:
    name: str
    predicate: Callable[[str], bool]

    def matches(self, line: str) -> bool:
        return self.predicate(line)


def _keyword_rule(keyword: str) -> TriggerRule:
    return TriggerRule(
        name=f"keyword:{keyword}",
        predicate=lambda line: keyword in line.lower(),
    )


TRIGGER_RULES: List[TriggerRule] = [
    TriggerRule(
        name="numbered_item",
        predicate=lambda line: NUMBERED_ITEM_PATTERN.match(line) is not None,
    ),
    *(_keyword_rule(keyword) for keyword in TRIGGER_KEYWORDS),
]


def matching_rule(
    line: str, rules: Sequence[TriggerRule] = TRIGGER_RULES
) -> Optional[TriggerRule]:
    """Return the first rule that fires for ``line``, if any."""
    for rule in rules:
        if rule.matches(line):
            return rule
    return None


def _strip_bold(text: str) -> str:
    return text.replace(BOLD_MARKER, "").strip()


def extract_numbered_title(line: str) -> Optional[TitleContent]:
    match = NUMBERED_TITLE_PATTERN.match(line)
    if not match:
        return None
    label = match.group(1) if match.group(1) is not None else match.group(2)
    return _strip_bold(label), line[match.end():].strip()


def extract_colon_title(line: str) -> Optional[TitleContent]:
    if ":" not in line:
        return None
    title, content = line.split(":", 1)
    return _strip_bold(title), content.strip()


def extract_untitled(line: str) -> Optional[TitleContent]:
    return "", line


TITLE_EXTRACTORS: List[Callable[[str], Optional[TitleContent]]] = [
    extract_numbered_title,
    extract_colon_title,
    extract_untitled,
]
