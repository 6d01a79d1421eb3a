"""
Field extraction module.

Each extractor turns report text into one typed field. Extractors are total:
a missing section or a malformed value yields the field's default (empty
list, 0 or a sentinel string) instead of an exception.
"""

import re

from nippo import grammar
from nippo.categorizer import DEFAULT_TAXONOMY, Taxonomy, categorize
from nippo.models import Task
from nippo.sections import extract_section, section_lines

C = grammar.COLON

FILENAME_DATE_RE = re.compile(r'(\d{4}-\d{2}-\d{2})')
BODY_DATE_RE = re.compile(
    rf'\*\*{grammar.DATE_LABEL}\*\*\s*{C}\s*(\d{{4}})年\s*(\d{{1,2}})月\s*(\d{{1,2}})日'
)

# A task runs from its "### 業務N: name" heading to the next "###", a rule,
# a "##" heading or the end of the document.
TASK_RE = re.compile(
    rf'###\s*{grammar.TASK_LABEL}\d+\s*{C}[ \t]*([^\n]*?)[ \t]*\r?(?=\n|\Z)'
    r'([\s\S]*?)(?=###|---|\n\s*##|\Z)'
)
DURATION_RE = re.compile(
    rf'\*\*{grammar.DURATION_LABEL}\*\*\s*{C}\s*{grammar.DURATION_QUALIFIER}?\s*'
    rf'(\d+(?:\.\d*)?|\.\d+)\s*{grammar.DURATION_UNIT}'
)
PROGRESS_RE = re.compile(rf'\*\*{grammar.PROGRESS_LABEL}\*\*\s*{C}[ \t]*([^\r\n]*)')
ISSUE_RE = re.compile(rf'\*\*{grammar.ISSUE_LABEL}\d+\*\*\s*{C}[ \t]*([^\r\n]*)')
CHECKBOX_RE = re.compile(r'^-\s*\[.\]\s*(.*)$')
RATING_RE = re.compile(
    rf'\*\*{grammar.RATING_LABEL}\*\*\s*{C}\s*'
    rf'((?:{grammar.RATING_GLYPH}{grammar.VARIATION_SELECTOR}?[ \t]*)+)'
)


def extract_date(content: str, filename: str) -> str:
    """
    Determine the report date.

    The date embedded in the filename wins; otherwise the **日付** body field
    is recomposed into YYYY-MM-DD. Falls back to 'unknown'.
    """
    if isinstance(filename, str):
        match = FILENAME_DATE_RE.search(filename)
        if match:
            return match.group(1)

    if isinstance(content, str):
        match = BODY_DATE_RE.search(content)
        if match:
            year, month, day = match.groups()
            return f"{year}-{int(month):02d}-{int(day):02d}"

    return grammar.UNKNOWN_DATE


def extract_hours(task_body: str) -> float:
    match = DURATION_RE.search(task_body)
    if not match:
        return 0.0
    try:
        return float(match.group(1))
    except ValueError:
        return 0.0


def extract_progress(task_body: str) -> str:
    match = PROGRESS_RE.search(task_body)
    if match and match.group(1).strip():
        return match.group(1).strip()
    return grammar.UNKNOWN_PROGRESS


def extract_tasks(content: str, taxonomy: Taxonomy = DEFAULT_TAXONOMY) -> list[Task]:
    """
    Extract every "### 業務N: name" block in document order.

    Args:
        content: Full report text
        taxonomy: Category taxonomy used to classify each task name

    Returns:
        List of Task objects; tasks without a name are skipped
    """
    if not isinstance(content, str):
        return []

    tasks = []
    for match in TASK_RE.finditer(content):
        name = match.group(1).strip()
        if not name:
            continue
        body = match.group(2)
        tasks.append(Task(
            name=name,
            hours=extract_hours(body),
            progress=extract_progress(body),
            category=categorize(name, taxonomy)
        ))

    return tasks


def _bullets(content: str, heading: str) -> list[str]:
    items = []
    for line in section_lines(extract_section(content, heading)):
        if line.startswith(grammar.BULLET_MARKER):
            items.append(line[len(grammar.BULLET_MARKER):].strip())
    return items


def extract_achievements(content: str) -> list[str]:
    """Bullet lines of the 本日の成果・達成事項 section."""
    return _bullets(content, grammar.ACHIEVEMENTS_HEADING)


def extract_insights(content: str) -> list[str]:
    """Bullet lines of the 所感・気づき section."""
    return _bullets(content, grammar.INSIGHTS_HEADING)


def extract_issues(content: str) -> list[str]:
    """Text of every **課題N** entry in the 課題・問題点 section."""
    section = extract_section(content, grammar.ISSUES_HEADING)
    if section is None:
        return []
    issues = []
    for match in ISSUE_RE.finditer(section):
        text = match.group(1).strip()
        if text:
            issues.append(text)
    return issues


def extract_tomorrow(content: str) -> list[str]:
    """Checkbox items ("- [ ] ...") of the 明日の予定 section."""
    items = []
    for line in section_lines(extract_section(content, grammar.TOMORROW_HEADING)):
        match = CHECKBOX_RE.match(line)
        if match:
            items.append(match.group(1).strip())
    return items


def extract_rating(content: str) -> int:
    """Number of star glyphs after the **総合評価** label, 0 when absent."""
    if not isinstance(content, str):
        return 0
    match = RATING_RE.search(content)
    if not match:
        return 0
    return match.group(1).count(grammar.RATING_GLYPH)
