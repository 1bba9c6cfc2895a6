from __future__ import annotations

from typing import List, Tuple, TypedDict

from .calculator import MARKER_WORDS, PUNCTUATION_MARKS
from .config import StatsConfig
from .models import Comparison, Metadata

LABEL_GAP = 4
COLUMN_GAP = 4


class MetadataPayload(TypedDict):
    doc_id: str
    word_total: int
    word_length: float
    sentence_length: float
    paragraph_length: float
    marker_counts: dict[str, int]
    punctuation_counts: dict[str, int]


class ComparisonPayload(TypedDict):
    official: MetadataPayload
    pseudonym: MetadataPayload


def format_table(comparison: Comparison, config: StatsConfig | None = None) -> str:
    """Render both documents' statistics as an aligned two-column table."""
    cfg = config or StatsConfig()
    rows = _table_rows(comparison, cfg)

    label_width = max(len(label) for label, _, _ in rows) + LABEL_GAP
    column_width = (
        max(
            len(value)
            for row in rows + [("", cfg.official_label, cfg.pseudonym_label)]
            for value in row[1:]
        )
        + COLUMN_GAP
    )
    rule = "-" * (column_width + len(cfg.pseudonym_label))

    lines = [
        " " * label_width
        + cfg.official_label.ljust(column_width)
        + cfg.pseudonym_label,
        " " * label_width + rule,
    ]
    for label, official, pseudonym in rows:
        lines.append(label.ljust(label_width) + official.ljust(column_width) + pseudonym)
    return "\n".join(line.rstrip() for line in lines)


def comparison_to_dict(comparison: Comparison) -> ComparisonPayload:
    """Convert a Comparison into a JSON-serializable dictionary."""
    return {
        "official": _metadata_dict(comparison.official_id, comparison.official),
        "pseudonym": _metadata_dict(comparison.pseudonym_id, comparison.pseudonym),
    }


def _table_rows(comparison: Comparison, config: StatsConfig) -> List[Tuple[str, str, str]]:
    off, pseu = comparison.official, comparison.pseudonym
    precision = config.precision
    rows = [
        ("Word total", str(off.word_total), str(pseu.word_total)),
        (
            "Mean word length",
            _fmt_float(off.word_length, precision),
            _fmt_float(pseu.word_length, precision),
        ),
        (
            "Mean sentence length",
            _fmt_float(off.sentence_length, precision),
            _fmt_float(pseu.sentence_length, precision),
        ),
        (
            "Mean paragraph length",
            _fmt_float(off.paragraph_length, precision),
            _fmt_float(pseu.paragraph_length, precision),
        ),
    ]
    for word in MARKER_WORDS:
        rows.append(
            (
                f"Frequency of '{word}'",
                str(off.marker_counts.get(word, 0)),
                str(pseu.marker_counts.get(word, 0)),
            )
        )
    if config.include_punctuation:
        for name in PUNCTUATION_MARKS:
            rows.append(
                (
                    f"Frequency of {name}",
                    str(off.punctuation_counts.get(name, 0)),
                    str(pseu.punctuation_counts.get(name, 0)),
                )
            )
    return rows


def _fmt_float(value: float, precision: int) -> str:
    return f"{value:.{precision}f}"


def _metadata_dict(doc_id: str, stats: Metadata) -> MetadataPayload:
    return {
        "doc_id": doc_id,
        "word_total": stats.word_total,
        "word_length": stats.word_length,
        "sentence_length": stats.sentence_length,
        "paragraph_length": stats.paragraph_length,
        "marker_counts": dict(stats.marker_counts),
        "punctuation_counts": dict(stats.punctuation_counts),
    }
