# ============================================================================
# src/lab_analyzer/utils/text_normalizer.py
# ============================================================================
"""
Text Normalization Utilities

Prepares OCR text for pattern search:
- Collapses runs of whitespace (spaces, tabs, line breaks) to one space
- Trims leading/trailing whitespace

Case and punctuation are left untouched. Name matching downstream is
case-insensitive but relies on separators such as ':' and '(' surviving.
"""

import re
from typing import Optional

WHITESPACE_PATTERN = re.compile(r'\s+')


def normalize_text(text: Optional[str]) -> str:
    """
    Collapse whitespace in raw OCR text.

    Examples:
        "Hemoglobin :\\n  14.2" -> "Hemoglobin : 14.2"
        "   " -> ""
    """
    if not text:
        return ""

    return WHITESPACE_PATTERN.sub(' ', str(text)).strip()


def capitalize_words(text: str) -> str:
    """
    Upper-case the first letter of every space-separated word.

    The rest of each word is kept verbatim:
        "total cholesterol" -> "Total Cholesterol"
        "tsh" -> "Tsh"
    """
    return ' '.join(word[:1].upper() + word[1:] for word in text.split(' '))
