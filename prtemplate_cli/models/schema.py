from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from prtemplate_cli.markdown_parser import normalize_title


@dataclass(frozen=True)
class SectionSpec:
    title: str
    mandatory: bool
    heading: str = ""
    placeholder: str = ""

    @property
    def key(self) -> str:
        return normalize_title(self.title)


@dataclass(frozen=True)
class TemplateSchema:
    """Ordered, immutable list of template sections keyed by normalized title."""

    sections: Tuple[SectionSpec, ...] = ()

    def __iter__(self) -> Iterator[SectionSpec]:
        return iter(self.sections)

    def __len__(self) -> int:
        return len(self.sections)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and normalize_title(key) in self.keys()

    def keys(self) -> List[str]:
        return [spec.key for spec in self.sections]

    def mandatory(self) -> List[SectionSpec]:
        return [spec for spec in self.sections if spec.mandatory]

    def optional(self) -> List[SectionSpec]:
        return [spec for spec in self.sections if not spec.mandatory]
