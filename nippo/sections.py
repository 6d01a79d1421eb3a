"""
Section extraction for Markdown daily reports.

A section starts at a second-level heading ("## ...") whose text contains the
requested label and runs until the next first- or second-level heading, a
horizontal rule, or the end of the document.
"""

import re
from typing import Optional

# A heading is a run of "#" followed by whitespace or the end of the line
HEADING_RE = re.compile(r'^\s*(#+)(?:\s+(.*?))?\s*$')
RULE_RE = re.compile(r'^\s*-{3,}\s*$')


def heading_level(line: str) -> int:
    """Return the Markdown heading level of a line, or 0 when it is not a heading."""
    match = HEADING_RE.match(line)
    if not match:
        return 0
    return len(match.group(1))


def is_rule(line: str) -> bool:
    return bool(RULE_RE.match(line))


def is_section_end(line: str) -> bool:
    level = heading_level(line)
    return (0 < level <= 2) or is_rule(line)


def extract_section(document: str, heading_label: str) -> Optional[str]:
    """
    Locate a labeled second-level section and return its body.

    Args:
        document: Full report text
        heading_label: Literal heading text to look for (case-sensitive)

    Returns:
        The body text between the heading line and the end of the section,
        or None when no matching heading exists.
    """
    if not isinstance(document, str) or not heading_label:
        return None

    lines = document.splitlines()
    start = None
    for idx, line in enumerate(lines):
        match = HEADING_RE.match(line)
        if match and len(match.group(1)) == 2 and heading_label in (match.group(2) or ''):
            start = idx + 1
            break

    if start is None:
        return None

    body = []
    for line in lines[start:]:
        if is_section_end(line):
            break
        body.append(line)

    return '\n'.join(body)


def section_lines(body: Optional[str]) -> list[str]:
    """Trimmed lines of a section body, empty when the section is absent."""
    if body is None:
        return []
    return [line.strip() for line in body.splitlines()]
