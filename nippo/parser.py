"""
Report parsing module.

Runs every field extractor over one report text and assembles a Report.
"""

import logging

from nippo import grammar
from nippo.categorizer import DEFAULT_TAXONOMY, Taxonomy
from nippo.extractors import (
    extract_achievements,
    extract_date,
    extract_insights,
    extract_issues,
    extract_rating,
    extract_tasks,
    extract_tomorrow
)
from nippo.models import Report

logger = logging.getLogger(__name__)


def _safe(extractor, default, filename, *args):
    # Extractors are total over str input; this only guards against bugs in them
    try:
        return extractor(*args)
    except Exception as e:
        logger.warning("%s: %s failed, using default (%s)", filename, extractor.__name__, e)
        return default


def parse_report(content: str, filename: str, taxonomy: Taxonomy = DEFAULT_TAXONOMY) -> Report:
    """
    Parse the text of one daily report.

    Args:
        content: Raw Markdown text of the report
        filename: Source identifier; also used as the preferred date source
        taxonomy: Category taxonomy for task classification

    Returns:
        Report with every field populated, using defaults for anything the
        text does not provide
    """
    if not isinstance(content, str):
        content = ''
    filename = '' if filename is None else str(filename)

    tasks = tuple(_safe(extract_tasks, [], filename, content, taxonomy))

    report = Report(
        filename=filename,
        date=_safe(extract_date, grammar.UNKNOWN_DATE, filename, content, filename),
        tasks=tasks,
        achievements=tuple(_safe(extract_achievements, [], filename, content)),
        issues=tuple(_safe(extract_issues, [], filename, content)),
        tomorrow=tuple(_safe(extract_tomorrow, [], filename, content)),
        insights=tuple(_safe(extract_insights, [], filename, content)),
        total_hours=sum((task.hours for task in tasks), 0.0),
        rating=_safe(extract_rating, 0, filename, content)
    )

    logger.debug(
        "Parsed %s: date=%s tasks=%d hours=%.1f rating=%d",
        filename, report.date, len(report.tasks), report.total_hours, report.rating
    )
    return report
