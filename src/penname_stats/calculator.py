from __future__ import annotations

from typing import Dict, Mapping, Sequence

MARKER_WORDS = (
    "and",
    "but",
    "however",
    "if",
    "that",
    "more",
    "must",
    "might",
    "this",
    "very",
)

# Punctuation class -> characters counted towards it.
PUNCTUATION_MARKS: Mapping[str, str] = {
    "comma": ",",
    "semicolon": ";",
    "quote": '"“”',
    "bang": "!",
    "dash": "-–—",
}


def num_words(tokens: Sequence[str]) -> int:
    """Return the number of word tokens."""
    return len(tokens)


def word_mean(tokens: Sequence[str]) -> float:
    """Return the mean character length of the tokens, 0.0 for no tokens."""
    if not tokens:
        return 0.0
    return sum(len(token) for token in tokens) / len(tokens)


def sent_mean(word_total: int, sentences: Sequence[str]) -> float:
    """Return words per sentence, 0.0 when there are no sentences."""
    return _per_unit(word_total, sentences)


def para_mean(word_total: int, paragraphs: Sequence[str]) -> float:
    """Return words per paragraph, 0.0 when there are no paragraphs."""
    return _per_unit(word_total, paragraphs)


def word_freq(tokens: Sequence[str]) -> Dict[str, int]:
    """
    Count case-insensitive occurrences of each marker word in a single pass.
    Every marker is present in the result, absent ones with a count of 0.
    """
    counts = dict.fromkeys(MARKER_WORDS, 0)
    for token in tokens:
        key = token.lower()
        if key in counts:
            counts[key] += 1
    return counts


def punct_freq(text: str) -> Dict[str, int]:
    """Count each punctuation class over the raw text."""
    lookup = {char: name for name, chars in PUNCTUATION_MARKS.items() for char in chars}
    counts = dict.fromkeys(PUNCTUATION_MARKS, 0)
    for char in text:
        name = lookup.get(char)
        if name is not None:
            counts[name] += 1
    return counts


def _per_unit(word_total: int, units: Sequence[str]) -> float:
    if not units:
        return 0.0
    return word_total / len(units)
