from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class SubmittedSection:
    title: str
    body: str


@dataclass(frozen=True)
class SubmittedDocument:
    sections: Tuple[SubmittedSection, ...] = ()
