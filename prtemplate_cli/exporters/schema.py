from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

from prtemplate_cli.exporters.base import BaseExporter
from prtemplate_cli.models.schema import TemplateSchema


class SchemaExporter(BaseExporter):
    def __init__(
        self,
        schema: TemplateSchema,
        output_format: str = "text",
        output_path: Optional[Path] = None,
        *,
        force: bool = False,
        source: str = "",
    ) -> None:
        super().__init__(output_format, output_path, force=force)
        self.schema = schema
        self.source = source

    def export(self) -> None:
        self._emit(self._payload())

    def _structured(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "sections": [
                {"title": spec.title, "mandatory": spec.mandatory}
                for spec in self.schema
            ],
        }

    def _document(self) -> Dict[str, Any]:
        lines = [
            f"- [{'x' if spec.mandatory else ' '}] {spec.title}"
            for spec in self.schema
        ]
        if lines:
            lines.insert(0, "Checked sections are mandatory.\n")
        else:
            lines = ["The template defines no sections."]
        return {
            "title": "Template sections",
            "frontmatter": {
                "source": self.source,
                "sections": len(self.schema),
                "mandatory": len(self.schema.mandatory()),
                "optional": len(self.schema.optional()),
            },
            "body": "\n".join(lines),
        }
