"""
Data models for the daily report analyzer.

This module defines the data structures used throughout the application:
- Task: One categorized unit of work inside a report
- Report: Normalized record extracted from one daily report
- DatedTask / DatedAchievement / DatedIssue: Flattened entries tagged with their report date
- DailySummary: Per-report row used for charts
- Analytics: Cross-report aggregate statistics
- AnalysisResult: Reports plus analytics, the output of a full run
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Task:
    """One task sub-section of a report."""
    name: str
    hours: float
    progress: str
    category: str


@dataclass(frozen=True)
class Report:
    """Normalized daily report."""
    filename: str
    date: str  # YYYY-MM-DD or 'unknown'
    tasks: tuple = ()
    achievements: tuple = ()
    issues: tuple = ()
    tomorrow: tuple = ()
    insights: tuple = ()
    total_hours: float = 0.0
    rating: int = 0


@dataclass(frozen=True)
class DatedTask:
    """Task tagged with the date of the report it came from."""
    date: str
    name: str
    hours: float
    progress: str
    category: str


@dataclass(frozen=True)
class DatedAchievement:
    date: str
    achievement: str


@dataclass(frozen=True)
class DatedIssue:
    date: str
    issue: str


@dataclass(frozen=True)
class DailySummary:
    """Per-day figures, one per report."""
    date: str
    hours: float
    rating: int
    task_count: int
    completed_tasks: int
    insights: tuple = ()


@dataclass(frozen=True)
class Analytics:
    """Aggregate statistics over a sequence of reports."""
    total_days: int = 0
    total_hours: float = 0.0
    average_hours: float = 0.0
    average_rating: float = 0.0
    tasks_by_category: dict = field(default_factory=dict)
    hours_by_category: dict = field(default_factory=dict)
    all_tasks: tuple = ()
    all_achievements: tuple = ()
    all_issues: tuple = ()
    daily_data: tuple = ()


@dataclass(frozen=True)
class AnalysisResult:
    """Reports sorted by date together with their analytics."""
    reports: tuple
    analytics: Analytics
