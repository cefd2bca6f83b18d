from __future__ import annotations

from typing import Callable, Optional, Sequence

from .rules import TITLE_EXTRACTORS, TitleContent


def split_title_content(
    line: str,
    extractors: Sequence[Callable[[str], Optional[TitleContent]]] = TITLE_EXTRACTORS,
) -> TitleContent:
    """
    Split a trigger line into ``(title, content)``.

    Extractors are tried in order; the numbered-label pattern beats a plain
    first-colon split, and a line with neither keeps an empty title.
    """
    for extractor in extractors:
        result = extractor(line)
        if result is not None:
            return result
    return "", line
