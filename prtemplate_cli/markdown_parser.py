from __future__ import annotations

import re
from typing import Iterator, List, Optional, Tuple

from prtemplate_cli.models.submission import SubmittedDocument, SubmittedSection

# ATX heading: up to three spaces of indent, 1-6 hashes, whitespace, text.
_HEADING_RE = re.compile(r"^ {0,3}(#{1,6})[ \t]+(\S.*)$")
_CLOSING_SEQUENCE_RE = re.compile(r"(?:^|[ \t]+)#+[ \t]*$")
_FENCE_RE = re.compile(r"^ {0,3}(`{3,}|~{3,})")
_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)
_COMMENT_OPEN = "<!--"
_COMMENT_CLOSE = "-->"
_COMMENT_BLOCK_RE = re.compile(r"^ {0,3}<!--")
_MARKER_RE = re.compile(r"\((?:mandatory|optional)\)", re.IGNORECASE)
_MANDATORY_RE = re.compile(r"\(mandatory\)", re.IGNORECASE)
_WHITESPACE_RE = re.compile(r"\s+")


def heading_text(line: str) -> Optional[str]:
    """Return the text of an ATX heading line, or None for any other line."""
    match = _HEADING_RE.match(line)
    if not match:
        return None
    text = _COMMENT_RE.sub("", match.group(2))
    open_idx = text.find(_COMMENT_OPEN)
    if open_idx != -1:
        text = text[:open_idx]
    text = _CLOSING_SEQUENCE_RE.sub("", text.rstrip()).strip()
    return text or None


def normalize_title(title: str) -> str:
    """Comparison key: markers removed, whitespace collapsed, case-folded."""
    without_markers = _MARKER_RE.sub(" ", title)
    return collapse_whitespace(without_markers).casefold()


def strip_marker(title: str) -> str:
    return collapse_whitespace(_MARKER_RE.sub(" ", title))


def is_mandatory(title: str) -> bool:
    return _MANDATORY_RE.search(title) is not None


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def strip_placeholders(body: str) -> str:
    """Remove HTML comments, including an unterminated trailing one, and trim."""
    cleaned = _COMMENT_RE.sub("", body)
    open_idx = cleaned.find(_COMMENT_OPEN)
    if open_idx != -1:
        cleaned = cleaned[:open_idx]
    return cleaned.strip()


def parse_document(text: str) -> SubmittedDocument:
    """Split Markdown text into heading-delimited sections.

    Headings of every level close the previous section. Text before the
    first heading belongs to no section.
    """
    sections: List[SubmittedSection] = []
    current_title: Optional[str] = None
    current_lines: List[str] = []

    for line, title in _scan_lines(text):
        if title is None:
            current_lines.append(line)
            continue
        if current_title is not None:
            sections.append(_section(current_title, current_lines))
        current_title = title
        current_lines = []

    if current_title is not None:
        sections.append(_section(current_title, current_lines))

    return SubmittedDocument(sections=tuple(sections))


def _section(title: str, lines: List[str]) -> SubmittedSection:
    return SubmittedSection(title=title, body="\n".join(lines).strip())


def _scan_lines(text: str) -> Iterator[Tuple[str, Optional[str]]]:
    """Yield each line with its heading text, skipping code fences and comment blocks.

    A comment block starts only on a line beginning with "<!--" and ends on
    the first line containing "-->". An opener elsewhere in a line is inline.
    """
    fence: Optional[str] = None
    in_comment = False

    for line in text.splitlines():
        if fence is not None:
            if _closes_fence(line, fence):
                fence = None
            yield line, None
            continue

        if in_comment:
            if _COMMENT_CLOSE in line:
                in_comment = False
            yield line, None
            continue

        fence_match = _FENCE_RE.match(line)
        if fence_match:
            fence = fence_match.group(1)
            yield line, None
            continue

        if _COMMENT_BLOCK_RE.match(line):
            opener_end = line.index(_COMMENT_OPEN) + len(_COMMENT_OPEN)
            in_comment = _COMMENT_CLOSE not in line[opener_end:]
            yield line, None
            continue

        yield line, heading_text(line)


def _closes_fence(line: str, fence: str) -> bool:
    stripped = line.strip()
    if len(line) - len(line.lstrip(" ")) > 3:
        return False
    return (
        len(stripped) >= len(fence)
        and set(stripped) == {fence[0]}
    )
