from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..types import Section
from .rules import TRIGGER_RULES, TriggerRule, matching_rule
from .splitter import split_title_content

logger = logging.getLogger(__name__)

OVERVIEW_TITLE = "Overview"


class _OpenSection:
    """Section still collecting continuation lines."""

    def __init__(self, title: str, content: str) -> None:
        self.title = title
        self._lines = [content]

    def append(self, line: str) -> None:
        self._lines.append(line)

    def close(self) -> Section:
        return Section(title=self.title, content="\n".join(self._lines))


def segment(text: str, rules: Sequence[TriggerRule] = TRIGGER_RULES) -> List[Section]:
    """
    Cut a free-text model report into titled sections.

    Trigger lines (numbered items or lines naming one of the diagnostic
    fields) open a new section. Lines after a trigger are appended to it
    verbatim. Lines seen before the first trigger each become their own
    "Overview" section. Blank lines are dropped.
    """
    sections: List[Section] = []
    current: Optional[_OpenSection] = None

    for line in text.split("\n"):
        if line.endswith("\r"):
            line = line[:-1]
        if not line.strip():
            continue

        rule = matching_rule(line, rules)
        if rule is not None:
            if current is not None:
                sections.append(current.close())
            title, content = split_title_content(line)
            logger.debug("Line opened section %r via %s", title, rule.name)
            current = _OpenSection(title, content)
        elif current is not None:
            current.append(line)
        else:
            sections.append(Section(title=OVERVIEW_TITLE, content=line))

    if current is not None:
        sections.append(current.close())

    return sections
