import pytest

SAMPLE_REPORT = """# 日報

**日付**: 2025年11月3日
**作成者**: 山田

## 本日の業務内容

### 業務1: 顧客との商談
- **所要時間**: 約2.5時間
- **進捗状況**: 完了
- **詳細**: 新規案件のヒアリング

### 業務2: 週次ミーティング
- **所要時間**: 1時間
- **進捗状況**: 完了

### 業務3: 新サービスの企画検討
- **所要時間**: 約3時間
- **進捗状況**: 進行中

---

## 本日の成果・達成事項
- 商談を1件成立させた
- 週次の進捗を共有できた

## 課題・問題点
- **課題1**: 見積もり作成に時間がかかった
- **課題2**: 資料のテンプレートが古い

## 明日の予定
- [ ] 提案資料の作成
- [x] 顧客へのお礼メール

## 所感・気づき
- 事前準備が大切だと感じた

---

## 総合評価
**総合評価**: ⭐⭐⭐⭐
"""

SECOND_REPORT = """# 日報

## 本日の業務内容

### 業務1: Cursor講座の受講
- **所要時間**: 2時間
- **進捗状況**: 完了

### 業務2: 月次レポートの作成
- **所要時間**: 約1.5時間

## 本日の成果・達成事項
- 講座の第3章まで完了

## 課題・問題点
- **課題1**: 復習の時間が足りない

## 総合評価
**総合評価**: ⭐⭐
"""


@pytest.fixture
def sample_report():
    return SAMPLE_REPORT


@pytest.fixture
def second_report():
    return SECOND_REPORT


@pytest.fixture
def reports_dir(tmp_path):
    """Directory with two valid reports and one unrelated file."""
    (tmp_path / '2025-11-04_日報.md').write_text(SECOND_REPORT, encoding='utf-8')
    (tmp_path / '2025-11-03_日報.md').write_text(SAMPLE_REPORT, encoding='utf-8')
    (tmp_path / 'notes.md').write_text('# メモ', encoding='utf-8')
    return tmp_path
