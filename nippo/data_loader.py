"""
Report discovery and loading module.

This module handles:
- Listing report identifiers (directory scan or static manifest)
- Loading raw report text for an identifier
- Loading and parsing many reports concurrently, skipping failures
- Running the full list -> load -> parse -> aggregate pipeline

Listers expose list() and loaders expose load(identifier); any object with
those methods can be injected.
"""

import logging
import re
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional

from nippo.aggregator import aggregate, sort_reports
from nippo.categorizer import DEFAULT_TAXONOMY, Taxonomy
from nippo.grammar import REPORT_FILENAME_PATTERN
from nippo.models import AnalysisResult, Report
from nippo.parser import parse_report

logger = logging.getLogger(__name__)


class LoadError(Exception):
    """Raised when a report cannot be loaded."""

    def __init__(self, identifier: str, reason: str = ''):
        self.identifier = identifier
        self.reason = reason
        message = f"Failed to load report {identifier}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class ReportNotFoundError(LoadError):
    """Raised when no report exists for an identifier."""

    def __init__(self, identifier: str):
        super().__init__(identifier, 'not found')


class DirectoryLister:
    """Lists report files in a directory whose names match a pattern."""

    def __init__(self, directory, pattern: str = REPORT_FILENAME_PATTERN):
        self.directory = Path(directory)
        self.pattern = re.compile(pattern)

    def list(self) -> list[str]:
        if not self.directory.is_dir():
            logger.warning("Report directory not found: %s", self.directory)
            return []
        names = [
            p.name for p in self.directory.iterdir()
            if p.is_file() and self.pattern.match(p.name)
        ]
        return sorted(names)


class ManifestLister:
    """Returns a fixed list of identifiers."""

    def __init__(self, identifiers):
        self.identifiers = list(identifiers)

    def list(self) -> list[str]:
        return list(self.identifiers)


class FileLoader:
    """Loads report text from files under a base directory."""

    def __init__(self, base_dir='.', encoding: str = 'utf-8'):
        self.base_dir = Path(base_dir)
        self.encoding = encoding

    def load(self, identifier: str) -> str:
        """
        Read the report identified by a file name relative to base_dir.

        Raises:
            ReportNotFoundError: If the file does not exist
            LoadError: If the file cannot be read or decoded
        """
        path = self.base_dir / identifier
        try:
            return path.read_text(encoding=self.encoding)
        except FileNotFoundError:
            raise ReportNotFoundError(identifier)
        except (OSError, UnicodeDecodeError) as e:
            raise LoadError(identifier, str(e))


def load_and_parse(identifier: str, loader, taxonomy: Taxonomy = DEFAULT_TAXONOMY) -> Optional[Report]:
    """Load and parse one report; returns None when the load fails for any reason."""
    try:
        content = loader.load(identifier)
    except LoadError as e:
        logger.warning("Skipping %s: %s", identifier, e.reason or e)
        return None
    except Exception as e:
        # Injected loaders may raise transport or client errors of their own
        logger.warning("Skipping %s: %s: %s", identifier, type(e).__name__, e)
        return None
    return parse_report(content, identifier, taxonomy)


def load_reports(
    identifiers,
    loader,
    taxonomy: Taxonomy = DEFAULT_TAXONOMY,
    max_workers: int = 1
) -> list[Report]:
    """
    Load and parse every identifier, omitting those that fail to load.

    Each identifier is independent, so with max_workers > 1 they are processed
    on a thread pool. Results keep identifier order regardless of completion
    order.

    Args:
        identifiers: Report identifiers to process
        loader: Object with a load(identifier) -> str method
        taxonomy: Category taxonomy for task classification
        max_workers: Number of worker threads; 1 processes sequentially

    Returns:
        Parsed reports in identifier order
    """
    identifiers = list(identifiers)
    if max_workers is None or max_workers < 1:
        max_workers = 1

    if max_workers == 1 or len(identifiers) <= 1:
        results = [load_and_parse(i, loader, taxonomy) for i in identifiers]
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            results = list(executor.map(lambda i: load_and_parse(i, loader, taxonomy), identifiers))

    reports = [r for r in results if r is not None]
    skipped = len(identifiers) - len(reports)
    if skipped:
        logger.warning("Skipped %d of %d report(s)", skipped, len(identifiers))
    logger.info("Loaded %d report(s)", len(reports))
    return reports


def analyze_all(
    lister,
    loader,
    taxonomy: Taxonomy = DEFAULT_TAXONOMY,
    max_workers: int = 1
) -> AnalysisResult:
    """
    Run the whole pipeline: list identifiers, load and parse them, sort the
    reports by date and aggregate them.
    """
    identifiers = lister.list()
    logger.info("Found %d report identifier(s)", len(identifiers))

    reports = tuple(sort_reports(load_reports(identifiers, loader, taxonomy, max_workers)))
    return AnalysisResult(reports=reports, analytics=aggregate(reports))
