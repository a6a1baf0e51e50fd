from __future__ import annotations

from typing import Dict, Set

from prtemplate_cli.markdown_parser import (
    collapse_whitespace,
    normalize_title,
    parse_document,
    strip_marker,
    strip_placeholders,
)
from prtemplate_cli.models.report import ComplianceReport
from prtemplate_cli.models.schema import SectionSpec, TemplateSchema


def check_compliance(
    schema: TemplateSchema,
    submission: str,
    *,
    strict: bool = False,
) -> ComplianceReport:
    """Compare a PR description against *schema*.

    A mandatory section is missing when its heading is absent and empty when
    nothing but whitespace and HTML comments remains under it. With *strict*,
    a body left identical to the template's placeholder text is empty too.
    Headings unknown to the schema are reported but never affect compliance.
    """
    bodies: Dict[str, str] = {}
    labels: Dict[str, str] = {}
    for section in parse_document(submission).sections:
        key = normalize_title(section.title)
        if not key:
            continue
        bodies[key] = section.body
        labels[key] = strip_marker(section.title)

    missing: Set[str] = set()
    empty: Set[str] = set()
    for spec in schema.mandatory():
        key = spec.key
        labels[key] = spec.title
        if key not in bodies:
            missing.add(key)
        elif _is_unanswered(spec, bodies[key], strict):
            empty.add(key)

    unknown = {key for key in bodies if key not in schema}

    return ComplianceReport(
        missing_mandatory=frozenset(missing),
        empty_mandatory=frozenset(empty),
        unknown_sections=frozenset(unknown),
        labels=labels,
    )


def _is_unanswered(spec: SectionSpec, body: str, strict: bool) -> bool:
    answer = strip_placeholders(body)
    if not answer:
        return True
    if strict:
        placeholder = strip_placeholders(spec.placeholder)
        return bool(placeholder) and (
            collapse_whitespace(answer) == collapse_whitespace(placeholder)
        )
    return False
