from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

from prtemplate_cli.exporters.base import BaseExporter
from prtemplate_cli.formatters.markdown_formatter import MarkdownFormatter
from prtemplate_cli.models.report import ComplianceReport


class ReportExporter(BaseExporter):
    def __init__(
        self,
        report: ComplianceReport,
        output_format: str = "text",
        output_path: Optional[Path] = None,
        *,
        force: bool = False,
    ) -> None:
        super().__init__(output_format, output_path, force=force)
        self.report = report

    def export(self) -> None:
        self._emit(self._payload())

    def _structured(self) -> Dict[str, Any]:
        return self.report.to_dict()

    def _document(self) -> Dict[str, Any]:
        report = self.report
        if report.is_compliant:
            summary = "The description contains every mandatory section."
        else:
            summary = "The description does not satisfy the pull request template."

        parts = [summary]
        for heading, keys in (
            ("Missing mandatory sections", report.missing_mandatory),
            ("Empty mandatory sections", report.empty_mandatory),
            ("Unknown sections", report.unknown_sections),
        ):
            if keys:
                parts.append(MarkdownFormatter.bullet_section(heading, self._labels(keys)))

        return {
            "title": "PR description check",
            "frontmatter": {
                "compliant": report.is_compliant,
                "missing_mandatory": len(report.missing_mandatory),
                "empty_mandatory": len(report.empty_mandatory),
                "unknown_sections": len(report.unknown_sections),
            },
            "body": "\n\n".join(parts),
        }

    def _labels(self, keys: Any) -> List[str]:
        return [self.report.label(key) for key in sorted(keys)]
