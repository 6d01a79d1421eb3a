"""
Configuration for the daily report analyzer.

Values come from NIPPO_* environment variables with defaults; command line
arguments override them in main.py.
"""

import logging
import os
from dataclasses import dataclass, replace
from typing import Optional

DEFAULT_REPORTS_DIR = '.'
DEFAULT_OUTPUT = 'report_analytics.json'
DEFAULT_MAX_WORKERS = 4
DEFAULT_LOG_LEVEL = 'INFO'

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass(frozen=True)
class AnalyzerConfig:
    """Settings for one analysis run."""
    reports_dir: str = DEFAULT_REPORTS_DIR
    output: str = DEFAULT_OUTPUT
    taxonomy_file: Optional[str] = None
    max_workers: int = DEFAULT_MAX_WORKERS
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None

    def __post_init__(self):
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {self.max_workers}")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Invalid log level '{self.log_level}'. Use one of: {', '.join(LOG_LEVELS)}")

    @property
    def numeric_log_level(self) -> int:
        return getattr(logging, self.log_level.upper())

    @classmethod
    def from_env(cls, environ=None) -> 'AnalyzerConfig':
        """Build a config from NIPPO_* environment variables."""
        env = os.environ if environ is None else environ

        workers = env.get('NIPPO_MAX_WORKERS', str(DEFAULT_MAX_WORKERS))
        try:
            max_workers = int(workers)
        except ValueError:
            raise ValueError(f"NIPPO_MAX_WORKERS must be an integer, got '{workers}'")

        return cls(
            reports_dir=env.get('NIPPO_REPORTS_DIR', DEFAULT_REPORTS_DIR),
            output=env.get('NIPPO_OUTPUT', DEFAULT_OUTPUT),
            taxonomy_file=env.get('NIPPO_TAXONOMY') or None,
            max_workers=max_workers,
            log_level=env.get('NIPPO_LOG_LEVEL', DEFAULT_LOG_LEVEL),
            log_file=env.get('NIPPO_LOG_FILE') or None
        )

    def override(self, **values) -> 'AnalyzerConfig':
        """Return a copy with every non-None value applied."""
        return replace(self, **{k: v for k, v in values.items() if v is not None})
