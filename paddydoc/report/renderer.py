from __future__ import annotations

from typing import List

from ..types import ClassifiedReport, ErrorReport, HealthyReport


def render_text(report: ClassifiedReport) -> str:
    """Plain-text rendering used by the command line tools."""
    if isinstance(report, ErrorReport):
        return f"Analysis failed:\n{report.message}"

    if isinstance(report, HealthyReport):
        return f"Plant looks healthy:\n{report.message}"

    if not report.sections:
        return "No diagnosis found in the model response."

    blocks: List[str] = []
    for section in report.sections:
        if section.title:
            blocks.append(f"{section.title}:\n{section.content}")
        else:
            blocks.append(section.content)
    return "\n\n".join(blocks)
