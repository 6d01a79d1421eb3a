"""
Reporting and output functions module.

This module handles all display and output operations:
- Printing the run summary
- Printing the category breakdown
- Printing per-day data
- Generating JSON output for the dashboard
- Saving JSON to file
"""

import json
from dataclasses import asdict
from datetime import datetime
from zoneinfo import ZoneInfo

from nippo.models import AnalysisResult, Analytics, Report


def print_report_summary(result: AnalysisResult):
    """Print totals and averages for the analyzed reports."""
    analytics = result.analytics
    print("\n" + "=" * 70)
    print("DAILY REPORT SUMMARY")
    print("=" * 70)

    if analytics.total_days == 0:
        print("\nNo reports were analyzed.")
        return

    print(f"\n  Reports:        {analytics.total_days}")
    print(f"  Date range:     {result.reports[0].date} - {result.reports[-1].date}")
    print(f"  Total hours:    {analytics.total_hours:.1f}")
    print(f"  Average hours:  {analytics.average_hours:.1f} / day")
    print(f"  Average rating: {analytics.average_rating:.1f}")
    print(f"  Tasks:          {len(analytics.all_tasks)}")
    print(f"  Achievements:   {len(analytics.all_achievements)}")
    print(f"  Issues:         {len(analytics.all_issues)}")


def print_category_breakdown(analytics: Analytics):
    """Print task counts and hours per category."""
    print("\n" + "=" * 70)
    print("TASKS BY CATEGORY")
    print("=" * 70 + "\n")

    if not analytics.tasks_by_category:
        print("  No tasks found.")
        return

    for category, count in analytics.tasks_by_category.items():
        hours = analytics.hours_by_category.get(category, 0)
        share = hours / analytics.total_hours * 100 if analytics.total_hours else 0
        print(f"  {category}: {count} task(s), {hours:.1f} hrs ({share:.0f}%)")


def print_daily_data(analytics: Analytics):
    """Print one block per report day."""
    print("\n" + "=" * 70)
    print("DAILY DATA")
    print("=" * 70)

    for day in analytics.daily_data:
        print(f"\n{day.date}")
        print("-" * 40)
        print(f"  Hours: {day.hours:.1f}")
        print(f"  Rating: {'*' * day.rating if day.rating else 'No rating'}")
        print(f"  Tasks: {day.completed_tasks}/{day.task_count} completed")
        for insight in day.insights:
            print(f"      - {insight}")


def report_to_dict(report: Report) -> dict:
    return {
        "filename": report.filename,
        "date": report.date,
        "tasks": [asdict(t) for t in report.tasks],
        "achievements": list(report.achievements),
        "issues": list(report.issues),
        "tomorrow": list(report.tomorrow),
        "totalHours": report.total_hours,
        "rating": report.rating,
        "insights": list(report.insights)
    }


def analytics_to_dict(analytics: Analytics) -> dict:
    return {
        "totalDays": analytics.total_days,
        "totalHours": analytics.total_hours,
        "averageHours": analytics.average_hours,
        "averageRating": analytics.average_rating,
        "tasksByCategory": dict(analytics.tasks_by_category),
        "hoursByCategory": dict(analytics.hours_by_category),
        "allTasks": [asdict(t) for t in analytics.all_tasks],
        "allAchievements": [asdict(a) for a in analytics.all_achievements],
        "allIssues": [asdict(i) for i in analytics.all_issues],
        "dailyData": [
            {
                "date": d.date,
                "hours": d.hours,
                "rating": d.rating,
                "taskCount": d.task_count,
                "completedTasks": d.completed_tasks,
                "insights": list(d.insights)
            }
            for d in analytics.daily_data
        ]
    }


def generate_json_output(result: AnalysisResult) -> dict:
    """
    Generate a JSON-serializable dict of the reports and their analytics.

    Keys use the camelCase names the dashboard reads.
    """
    dates = [r.date for r in result.reports]
    return {
        "metadata": {
            "generated_at": datetime.now(ZoneInfo('UTC')).isoformat(),
            "report_count": len(result.reports),
            "date_range": {
                "start": dates[0] if dates else None,
                "end": dates[-1] if dates else None
            }
        },
        "reports": [report_to_dict(r) for r in result.reports],
        "analytics": analytics_to_dict(result.analytics)
    }


def save_json_output(output: dict, filepath: str = 'report_analytics.json'):
    """
    Save the analysis output to a JSON file.
    """
    with open(filepath, 'w', encoding='utf-8') as f:
        json.dump(output, f, indent=2, ensure_ascii=False)
    print(f"JSON output saved to: {filepath}")
