from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .calculator import MARKER_WORDS


@dataclass(slots=True)
class Document:
    """Represents an input document."""

    doc_id: str
    text: str


@dataclass(frozen=True, slots=True)
class Metadata:
    """
    Lexical statistics computed for a single document.
    The count mappings are stored as read-only views; they are left out of the
    hash but still take part in equality.
    """

    word_total: int = 0
    word_length: float = 0.0
    sentence_length: float = 0.0
    paragraph_length: float = 0.0
    marker_counts: Mapping[str, int] = field(default_factory=dict, hash=False)
    punctuation_counts: Mapping[str, int] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "marker_counts", MappingProxyType(dict(self.marker_counts))
        )
        object.__setattr__(
            self, "punctuation_counts", MappingProxyType(dict(self.punctuation_counts))
        )

    def marker(self, word: str) -> int:
        """Return the frequency of a marker word (case-insensitive).

        Marker words missing from ``marker_counts`` (as on the all-zero
        ``Metadata()``) count as 0; any other word raises ``KeyError``.
        """
        key = word.lower()
        if key not in MARKER_WORDS:
            raise KeyError(word)
        return self.marker_counts.get(key, 0)


@dataclass(frozen=True, slots=True)
class Comparison:
    """Statistics for an official document set against a pseudonymous one."""

    official_id: str
    pseudonym_id: str
    official: Metadata
    pseudonym: Metadata
