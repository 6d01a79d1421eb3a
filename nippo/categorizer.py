"""
Task categorization module.

Maps a free-text task name to one category of an ordered taxonomy by plain
substring containment. The taxonomy is configuration: the default mirrors the
categories used in the team's daily reports, and a JSON file can replace it.
"""

import json
from typing import Iterable, Sequence

CATCH_ALL_CATEGORY = 'その他'

# (category, keywords) pairs, evaluated in order; the catch-all comes last
Taxonomy = Sequence[tuple[str, tuple[str, ...]]]

DEFAULT_TAXONOMY: Taxonomy = (
    ('会議・ミーティング', ('ミーティング', '会議', '1on1', '報告会')),
    ('顧客対応', ('顧客', '商談', '提案', '問い合わせ')),
    ('資料作成', ('資料', 'レポート', '準備')),
    ('企画・検討', ('企画', '検討', '分析')),
    ('講座・教育', ('講座', 'Cursor')),
    (CATCH_ALL_CATEGORY, ()),
)


class TaxonomyError(ValueError):
    """Raised when a taxonomy definition is malformed."""


def build_taxonomy(entries: Iterable) -> Taxonomy:
    """
    Validate and normalize (category, keywords) pairs into a taxonomy.

    A missing catch-all is appended as 'その他'. Exactly one category may have
    an empty keyword set and it must be the last one.

    Raises:
        TaxonomyError: If the entries are empty, duplicated or misordered
    """
    taxonomy = []
    seen = set()
    for idx, entry in enumerate(entries):
        try:
            category, keywords = entry
        except (TypeError, ValueError):
            raise TaxonomyError(f"Taxonomy entry {idx}: expected (category, keywords), got {entry!r}")

        if not isinstance(category, str) or not category.strip():
            raise TaxonomyError(f"Taxonomy entry {idx}: category must be a non-empty string")
        if isinstance(keywords, str):
            raise TaxonomyError(f"Taxonomy entry {idx}: keywords must be a list, not a string")
        try:
            keywords = tuple(str(k) for k in keywords if str(k))
        except TypeError:
            raise TaxonomyError(f"Taxonomy entry {idx}: keywords must be a list")

        category = category.strip()
        if category in seen:
            raise TaxonomyError(f"Duplicate taxonomy category: {category}")
        seen.add(category)
        taxonomy.append((category, keywords))

    if not taxonomy:
        raise TaxonomyError("Taxonomy must define at least one category")

    catch_alls = [idx for idx, (_, keywords) in enumerate(taxonomy) if not keywords]
    if not catch_alls:
        if CATCH_ALL_CATEGORY in seen:
            raise TaxonomyError(f"'{CATCH_ALL_CATEGORY}' is reserved for the catch-all category")
        taxonomy.append((CATCH_ALL_CATEGORY, ()))
    elif catch_alls != [len(taxonomy) - 1]:
        raise TaxonomyError("Exactly one catch-all category (no keywords) is allowed and it must be last")

    return tuple(taxonomy)


def load_taxonomy(filepath: str) -> Taxonomy:
    """
    Load a taxonomy from a JSON file.

    The file holds a list of objects such as
    {"category": "顧客対応", "keywords": ["顧客", "商談"]}.
    """
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Taxonomy file not found: {filepath}")
    except json.JSONDecodeError as e:
        raise TaxonomyError(f"Invalid JSON in taxonomy file: {e}")

    if not isinstance(data, list):
        raise TaxonomyError(f"Taxonomy JSON must be a list, got {type(data).__name__}")

    entries = []
    for idx, item in enumerate(data):
        if not isinstance(item, dict) or 'category' not in item:
            raise TaxonomyError(f"Taxonomy entry {idx}: must be an object with a 'category' key")
        entries.append((item['category'], item.get('keywords', [])))

    return build_taxonomy(entries)


def catch_all(taxonomy: Taxonomy) -> str:
    """Category for names no keyword matches: the last entry when it has no keywords."""
    if taxonomy and not taxonomy[-1][1]:
        return taxonomy[-1][0]
    return CATCH_ALL_CATEGORY


def categorize(task_name: str, taxonomy: Taxonomy = DEFAULT_TAXONOMY) -> str:
    """Return the first category whose keywords occur in the task name."""
    if not isinstance(task_name, str):
        return catch_all(taxonomy)

    for category, keywords in taxonomy:
        for keyword in keywords:
            if keyword in task_name:
                return category

    return catch_all(taxonomy)
