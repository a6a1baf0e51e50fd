from __future__ import annotations

import textwrap
from typing import Any, Dict, List, Optional

import yaml

from prtemplate_cli.formatters.base import BaseFormatter


class MarkdownFormatter(BaseFormatter):
    _MAX_LINE_LENGTH = 100

    def dumps(self, data: Any) -> str:
        if isinstance(data, str):
            return data
        if not isinstance(data, dict):
            return str(data)

        frontmatter = data.get("frontmatter")
        return self.render(
            title=str(data.get("title", "")),
            body=str(data.get("body", "")),
            frontmatter=frontmatter if isinstance(frontmatter, dict) else None,
        )

    def file_extension(self) -> str:
        return ".md"

    @classmethod
    def render(
        cls,
        title: str,
        body: str,
        frontmatter: Optional[Dict[str, Any]] = None,
    ) -> str:
        parts = []
        if frontmatter:
            fm_text = yaml.dump(
                frontmatter,
                default_flow_style=False,
                allow_unicode=True,
                sort_keys=False,
            ).rstrip("\n")
            parts.append(f"---\n{fm_text}\n---\n")
        if title:
            parts.append(f"# {title}\n")
        if body:
            parts.append(cls._wrap_body(body.rstrip("\n")) + "\n")
        return "\n".join(parts)

    @staticmethod
    def bullet_section(heading: str, items: List[str]) -> str:
        lines = [f"## {heading}", ""]
        lines.extend(f"- {item}" for item in items)
        return "\n".join(lines)

    @classmethod
    def _wrap_body(cls, body: str) -> str:
        wrapped_lines = []
        for line in body.splitlines():
            if cls._should_preserve_line(line):
                wrapped_lines.append(line)
                continue
            wrapped_lines.append(
                textwrap.fill(
                    line,
                    width=cls._MAX_LINE_LENGTH,
                    break_long_words=False,
                    break_on_hyphens=False,
                )
            )
        return "\n".join(wrapped_lines)

    @classmethod
    def _should_preserve_line(cls, line: str) -> bool:
        if not line or len(line) <= cls._MAX_LINE_LENGTH:
            return True
        if line.startswith(("#", "- ", "* ", "> ", "```", "    ", "\t")):
            return True
        return "`" in line or "](" in line
