from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Tuple, Union


@dataclass(frozen=True)
class Section:
    title: str
    content: str

    def to_dict(self) -> Dict[str, str]:
        return {"title": self.title, "content": self.content}


@dataclass(frozen=True)
class ErrorReport:
    """
    The vision call failed; ``message`` is the service's error description.
    """

    kind: ClassVar[str] = "error"
    message: str

    @property
    def sections(self) -> Tuple[Section, ...]:
        return (Section(title="Error", content=self.message),)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "message": self.message,
            "sections": [section.to_dict() for section in self.sections],
        }


@dataclass(frozen=True)
class HealthyReport:
    """
    The model judged the plant healthy; ``message`` is the untouched model text.
    """

    kind: ClassVar[str] = "healthy"
    message: str

    @property
    def sections(self) -> Tuple[Section, ...]:
        return (Section(title="Healthy", content=self.message),)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "message": self.message,
            "sections": [section.to_dict() for section in self.sections],
        }


@dataclass(frozen=True)
class StructuredReport:
    kind: ClassVar[str] = "structured"
    sections: Tuple[Section, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "sections": [section.to_dict() for section in self.sections],
        }


ClassifiedReport = Union[ErrorReport, HealthyReport, StructuredReport]
