"""
Text helpers: query tokenization and whole-word matching for relevance scoring.
"""

import re
from typing import List


def tokenize_query(query: str, min_length: int = 2) -> List[str]:
    """
    Lowercase, trim, and split a query on whitespace.

    Tokens shorter than min_length are dropped. Repeated tokens are kept.
    """
    if not query:
        return []
    return [t for t in query.lower().strip().split() if len(t) >= min_length]


def contains_word(text: str, token: str) -> bool:
    """True if token appears in text bounded by word boundaries (case-insensitive)."""
    return re.search(rf"\b{re.escape(token)}\b", text, re.IGNORECASE) is not None
