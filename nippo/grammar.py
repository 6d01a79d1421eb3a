"""
Fixed textual constants of the daily report grammar.

Changing any of these silently changes parse results, so they are part of the
parsing contract rather than user configuration.
"""

# Sentinels
UNKNOWN_DATE = 'unknown'
UNKNOWN_PROGRESS = '不明'
COMPLETED_PROGRESS = '完了'

# Section headings (second-level, "## ...")
ACHIEVEMENTS_HEADING = '本日の成果・達成事項'
ISSUES_HEADING = '課題・問題点'
TOMORROW_HEADING = '明日の予定'
INSIGHTS_HEADING = '所感・気づき'

# Field labels, written as **label**: value
DATE_LABEL = '日付'
TASK_LABEL = '業務'
DURATION_LABEL = '所要時間'
DURATION_QUALIFIER = '約'
DURATION_UNIT = '時間'
PROGRESS_LABEL = '進捗状況'
ISSUE_LABEL = '課題'
RATING_LABEL = '総合評価'

RATING_GLYPH = '\u2b50'  # star emoji
VARIATION_SELECTOR = '\ufe0f'  # emoji presentation selector, often follows the star

BULLET_MARKER = '-'

# Both ASCII and full-width colons are accepted after a label
COLON = '[:：]'

# Report files look like 2025-11-03_日報.md
REPORT_FILENAME_PATTERN = r'^\d{4}-\d{2}-\d{2}_日報\.md$'
