from __future__ import annotations

import re
from typing import List

# Punctuation, symbols and quotes at either end of a whitespace-separated chunk.
EDGE_PUNCT_RE = re.compile(r"^[\W_]+|[\W_]+$", re.UNICODE)
SENTENCE_END_RE = re.compile(r"[.!?]")
PARAGRAPH_BREAK_RE = re.compile(r"\n\s*\n")


def word_token(text: str) -> List[str]:
    """Split text on whitespace and strip punctuation from each token's edges.

    Apostrophes count as edge punctuation, so "dogs'" becomes "dogs" and
    "'tis" becomes "tis"; inner apostrophes and hyphens are kept ("don't").
    """
    tokens: List[str] = []
    for chunk in text.split():
        token = EDGE_PUNCT_RE.sub("", chunk)
        if token:
            tokens.append(token)
    return tokens


def sent_token(text: str) -> List[str]:
    """Split text into sentences on '.', '!' and '?'.

    Abbreviations such as "Mr." are not recognised and split like any other
    full stop.
    """
    sentences: List[str] = []
    for segment in SENTENCE_END_RE.split(text):
        sentence = segment.strip()
        if sentence:
            sentences.append(sentence)
    return sentences


def para_token(text: str) -> List[str]:
    """Split text into paragraphs separated by blank lines."""
    return [part.strip() for part in PARAGRAPH_BREAK_RE.split(text) if part.strip()]
