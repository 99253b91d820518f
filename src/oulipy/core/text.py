"""
oulipy.core.text - Text helpers shared by the constraints.

Provides:
- normalize_text(): strip diacritics so French accented letters compare
  as their base letter ("é, è, ê, ë" -> "e", "ç" -> "c")
- tokenize_words(): split text into words, keeping apostrophes and
  hyphens inside words ("grand-mère", "aujourd'hui")
"""

from __future__ import annotations

import re
import unicodedata

# Word characters, apostrophes or hyphens; the lookbehind backtracks the
# match so that it never ends on a hyphen.
WORD_PATTERN = re.compile(r"[\w'-]+(?<!-)")


def normalize_text(text: str) -> str:
    """Remove diacritical marks from text.

    The text is decomposed (NFD) into base characters followed by
    combining marks, and the combining marks are dropped.

    Args:
        text: Input text

    Returns:
        Text with only base characters
    """
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def tokenize_words(text: str) -> list[str]:
    """Split text into words, in order of appearance.

    Trailing hyphens are trimmed from each word ("bonjour-" -> "bonjour");
    runs made only of hyphens are not words. The text is composed (NFC)
    first, since a combining mark is not a word character.

    Args:
        text: Input text

    Returns:
        List of word tokens (empty if the text has no words)
    """
    return WORD_PATTERN.findall(unicodedata.normalize("NFC", text))
