from __future__ import annotations

from typing import Dict, List

from prtemplate_cli.markdown_parser import (
    is_mandatory,
    normalize_title,
    parse_document,
    strip_marker,
)
from prtemplate_cli.models.schema import SectionSpec, TemplateSchema


def extract_schema(template_text: str) -> TemplateSchema:
    """Build the section schema of a PR template.

    A heading is mandatory only when it carries a "(mandatory)" marker;
    unmarked headings are optional. When two headings share a normalized
    title the later one replaces the earlier entry in its original position.
    Never raises: text without headings yields an empty schema.
    """
    order: List[str] = []
    by_key: Dict[str, SectionSpec] = {}

    for section in parse_document(template_text).sections:
        key = normalize_title(section.title)
        if not key:
            continue
        spec = SectionSpec(
            title=strip_marker(section.title),
            mandatory=is_mandatory(section.title),
            heading=section.title,
            placeholder=section.body,
        )
        if key not in by_key:
            order.append(key)
        by_key[key] = spec

    return TemplateSchema(sections=tuple(by_key[key] for key in order))
