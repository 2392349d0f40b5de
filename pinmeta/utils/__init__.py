"""Shared utilities for tokenization, word matching, and timestamps."""

from .text import contains_word, tokenize_query
from .time import hours_to_ms, now_ms

__all__ = [
    "contains_word",
    "tokenize_query",
    "hours_to_ms",
    "now_ms",
]
