"""
Cross-report aggregation module.

This module handles:
- Ordering reports by date
- Folding reports into category breakdowns, flattened entry lists and per-day rows
- Computing averages with a guard for an empty report set
"""

import statistics

from nippo import grammar
from nippo.models import (
    Analytics,
    DailySummary,
    DatedAchievement,
    DatedIssue,
    DatedTask,
    Report
)


def sort_reports(reports) -> list[Report]:
    """
    Sort reports by date, ascending.

    Plain string comparison is used; zero-padded ISO dates sort correctly and
    the 'unknown' sentinel sorts after every real date. The sort is stable.
    """
    return sorted(reports, key=lambda r: r.date)


def summarize_day(report: Report) -> DailySummary:
    return DailySummary(
        date=report.date,
        hours=report.total_hours,
        rating=report.rating,
        task_count=len(report.tasks),
        completed_tasks=sum(1 for t in report.tasks if t.progress == grammar.COMPLETED_PROGRESS),
        insights=tuple(report.insights)
    )


def aggregate(reports) -> Analytics:
    """
    Fold a sequence of reports into Analytics.

    Reports are folded in ascending date order. Category keys appear in the
    order they are first seen. An empty sequence yields zero averages and
    empty collections.
    """
    ordered = sort_reports(reports)

    total_hours = 0.0
    tasks_by_category = {}
    hours_by_category = {}
    all_tasks = []
    all_achievements = []
    all_issues = []
    daily_data = []

    for report in ordered:
        total_hours += report.total_hours

        for task in report.tasks:
            if task.category not in tasks_by_category:
                tasks_by_category[task.category] = 0
                hours_by_category[task.category] = 0.0
            tasks_by_category[task.category] += 1
            hours_by_category[task.category] += task.hours

            all_tasks.append(DatedTask(
                date=report.date,
                name=task.name,
                hours=task.hours,
                progress=task.progress,
                category=task.category
            ))

        all_achievements.extend(DatedAchievement(date=report.date, achievement=a) for a in report.achievements)
        all_issues.extend(DatedIssue(date=report.date, issue=i) for i in report.issues)
        daily_data.append(summarize_day(report))

    total_days = len(ordered)
    average_hours = 0.0
    average_rating = 0.0
    if total_days > 0:
        average_hours = total_hours / total_days
        average_rating = float(statistics.mean(r.rating for r in ordered))

    return Analytics(
        total_days=total_days,
        total_hours=total_hours,
        average_hours=average_hours,
        average_rating=average_rating,
        tasks_by_category=tasks_by_category,
        hours_by_category=hours_by_category,
        all_tasks=tuple(all_tasks),
        all_achievements=tuple(all_achievements),
        all_issues=tuple(all_issues),
        daily_data=tuple(daily_data)
    )
