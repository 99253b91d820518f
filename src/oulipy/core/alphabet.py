"""
oulipy.core.alphabet - Letter partition used by the constraints.

The 26 Latin letters split into vowels and consonants. "y" counts as a
vowel, as it does for monovocalism.
"""

VOWELS: tuple[str, ...] = ("a", "e", "i", "o", "u", "y")

CONSONANTS: tuple[str, ...] = (
    "b", "c", "d", "f", "g", "h", "j", "k", "l", "m",
    "n", "p", "q", "r", "s", "t", "v", "w", "x", "z",
)  # fmt: skip

ALPHABET: tuple[str, ...] = tuple(sorted(VOWELS + CONSONANTS))
