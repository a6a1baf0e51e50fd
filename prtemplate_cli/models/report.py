from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet


@dataclass(frozen=True)
class ComplianceReport:
    missing_mandatory: FrozenSet[str] = frozenset()
    empty_mandatory: FrozenSet[str] = frozenset()
    unknown_sections: FrozenSet[str] = frozenset()
    # normalized title -> title as written, for display only
    labels: Dict[str, str] = field(default_factory=dict, compare=False, hash=False)

    @property
    def is_compliant(self) -> bool:
        return not self.missing_mandatory and not self.empty_mandatory

    def label(self, key: str) -> str:
        return self.labels.get(key, key)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_compliant": self.is_compliant,
            "missing_mandatory": sorted(self.missing_mandatory),
            "empty_mandatory": sorted(self.empty_mandatory),
            "unknown_sections": sorted(self.unknown_sections),
        }
