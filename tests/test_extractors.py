import pytest

from nippo.extractors import (
    extract_achievements,
    extract_date,
    extract_insights,
    extract_issues,
    extract_rating,
    extract_tasks,
    extract_tomorrow
)
from nippo.models import Task


class TestExtractDate:

    def test_date_from_filename(self):
        assert extract_date("本文のみ", "2025-11-03_日報.md") == "2025-11-03"

    def test_filename_date_wins_over_body(self):
        body = "**日付**: 2024年1月1日"
        assert extract_date(body, "2025-11-03_日報.md") == "2025-11-03"

    def test_date_from_body_is_zero_padded(self):
        assert extract_date("**日付**: 2025年1月5日", "daily.md") == "2025-01-05"

    def test_body_date_with_fullwidth_colon(self):
        assert extract_date("**日付**：2025年12月24日", "daily.md") == "2025-12-24"

    def test_unknown_date(self):
        assert extract_date("日付なし", "daily.md") == "unknown"
        assert extract_date(None, None) == "unknown"


class TestExtractTasks:

    def test_tasks_in_document_order(self, sample_report):
        tasks = extract_tasks(sample_report)
        assert [t.name for t in tasks] == ['顧客との商談', '週次ミーティング', '新サービスの企画検討']
        assert tasks[0] == Task(name='顧客との商談', hours=2.5, progress='完了', category='顧客対応')
        assert tasks[1].category == '会議・ミーティング'
        assert tasks[2].hours == 3.0
        assert tasks[2].progress == '進行中'

    def test_duration_with_approximately(self):
        doc = "### 業務1: 作業\n- **所要時間**: 約2.5時間\n"
        assert extract_tasks(doc)[0].hours == 2.5

    def test_missing_duration_defaults_to_zero(self):
        doc = "### 業務1: 作業\n- **進捗状況**: 完了\n"
        task = extract_tasks(doc)[0]
        assert task.hours == 0
        assert task.progress == '完了'

    def test_unparseable_duration_defaults_to_zero(self):
        doc = "### 業務1: 作業\n- **所要時間**: 半日\n"
        assert extract_tasks(doc)[0].hours == 0

    def test_missing_progress_is_unknown(self):
        doc = "### 業務1: 作業\n- **所要時間**: 1時間\n"
        assert extract_tasks(doc)[0].progress == '不明'

    def test_empty_progress_is_unknown(self):
        doc = "### 業務1: 作業\n- **進捗状況**:\n- **所要時間**: 1時間\n"
        assert extract_tasks(doc)[0].progress == '不明'

    def test_task_body_stops_at_next_task(self):
        doc = (
            "### 業務1: 作業A\n- **進捗状況**: 完了\n"
            "### 業務2: 作業B\n- **所要時間**: 4時間\n"
        )
        tasks = extract_tasks(doc)
        assert tasks[0].hours == 0
        assert tasks[1].hours == 4.0
        assert tasks[1].progress == '不明'

    def test_task_body_stops_at_section_heading(self):
        doc = "### 業務1: 作業A\n## 本日の成果・達成事項\n- **所要時間**: 9時間\n"
        assert extract_tasks(doc)[0].hours == 0

    def test_task_heading_at_end_of_document(self):
        tasks = extract_tasks("### 業務1: 最後の作業")
        assert [t.name for t in tasks] == ['最後の作業']

    def test_no_tasks(self):
        assert extract_tasks("# 日報\n本文だけ") == []
        assert extract_tasks(None) == []

    def test_custom_taxonomy(self):
        taxonomy = (('開発', ('実装',)), ('その他', ()))
        doc = "### 業務1: API実装\n### 業務2: 顧客対応\n"
        assert [t.category for t in extract_tasks(doc, taxonomy)] == ['開発', 'その他']


def test_extract_achievements(sample_report):
    assert extract_achievements(sample_report) == ['商談を1件成立させた', '週次の進捗を共有できた']


def test_extract_achievements_ignores_non_bullets():
    doc = "## 本日の成果・達成事項\n説明文\n-  成果A  \n\n* 星印\n"
    assert extract_achievements(doc) == ['成果A']


def test_extract_insights(sample_report):
    assert extract_insights(sample_report) == ['事前準備が大切だと感じた']


def test_absent_sections_are_empty():
    doc = "# 日報\n"
    assert extract_achievements(doc) == []
    assert extract_insights(doc) == []
    assert extract_issues(doc) == []
    assert extract_tomorrow(doc) == []


def test_extract_issues(sample_report):
    assert extract_issues(sample_report) == ['見積もり作成に時間がかかった', '資料のテンプレートが古い']


def test_extract_issues_ignores_other_lines():
    doc = "## 課題・問題点\n- 自由記述\n- **課題1**:  遅延  \n- **課題2**:\n"
    assert extract_issues(doc) == ['遅延']


def test_extract_issues_outside_section_ignored():
    doc = "## 所感・気づき\n- **課題1**: ここは対象外\n"
    assert extract_issues(doc) == []


def test_extract_tomorrow(sample_report):
    assert extract_tomorrow(sample_report) == ['提案資料の作成', '顧客へのお礼メール']


def test_extract_tomorrow_requires_checkbox():
    doc = "## 明日の予定\n- 普通の箇条書き\n- [ ] 作業A\n  - [x]   作業B\n"
    assert extract_tomorrow(doc) == ['作業A', '作業B']


@pytest.mark.parametrize('text,expected', [
    ("**総合評価**: ⭐⭐⭐", 3),
    ("**総合評価**: \u2b50\ufe0f\u2b50\ufe0f", 2),
    ("**総合評価**: ⭐ ⭐ ⭐ ⭐", 4),
    ("**総合評価**: なし", 0),
    ("⭐⭐⭐", 0),
    ("", 0),
])
def test_extract_rating(text, expected):
    assert extract_rating(text) == expected


def test_extract_rating_from_full_report(sample_report):
    assert extract_rating(sample_report) == 4
