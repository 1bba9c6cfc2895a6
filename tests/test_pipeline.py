import pytest

from penname_stats.calculator import MARKER_WORDS
from penname_stats.models import Document, Metadata
from penname_stats.pipeline import analyze_document, compare_documents


def test_analyze_document_fills_every_field(official_text: str):
    stats = analyze_document(Document(doc_id="official", text=official_text))

    assert stats.word_total == 22
    assert stats.word_length == pytest.approx(95 / 22)
    assert stats.sentence_length == pytest.approx(22 / 3)
    assert stats.paragraph_length == 11.0
    assert stats.marker("However") == 1
    assert stats.marker_counts == {
        "and": 0,
        "but": 1,
        "however": 1,
        "if": 1,
        "that": 0,
        "more": 1,
        "must": 1,
        "might": 1,
        "this": 1,
        "very": 0,
    }
    assert stats.punctuation_counts == {
        "comma": 2,
        "semicolon": 1,
        "quote": 0,
        "bang": 1,
        "dash": 0,
    }


def test_analyze_empty_document_is_all_zero():
    stats = analyze_document(Document(doc_id="empty", text=""))
    default = Metadata()

    assert stats.word_total == default.word_total == 0
    assert stats.word_length == default.word_length == 0.0
    assert stats.sentence_length == 0.0
    assert stats.paragraph_length == 0.0
    assert set(stats.marker_counts) == set(MARKER_WORDS)
    assert not any(stats.marker_counts.values())
    assert not any(stats.punctuation_counts.values())


def test_metadata_is_read_only():
    stats = analyze_document(Document(doc_id="doc", text="Very good."))
    with pytest.raises(AttributeError):
        stats.word_total = 10  # type: ignore[misc]
    with pytest.raises(TypeError):
        stats.marker_counts["very"] = 99  # type: ignore[index]
    with pytest.raises(TypeError):
        stats.punctuation_counts["comma"] = 1  # type: ignore[index]

    assert stats.marker("very") == 1
    assert hash(stats) == hash(analyze_document(Document(doc_id="doc", text="Very good.")))


def test_metadata_copies_counts_it_is_given():
    counts = {"and": 2}
    stats = Metadata(word_total=2, marker_counts=counts)
    counts["and"] = 99

    assert stats.marker("AND") == 2


def test_default_metadata_reports_zero_markers():
    stats = Metadata()

    assert all(stats.marker(word) == 0 for word in MARKER_WORDS)
    with pytest.raises(KeyError):
        stats.marker("walrus")


def test_compare_documents_keeps_sides_apart(official_text: str, pseudonym_text: str):
    comparison = compare_documents(
        Document(doc_id="official.txt", text=official_text),
        Document(doc_id="pseudonym.txt", text=pseudonym_text),
    )

    assert comparison.official_id == "official.txt"
    assert comparison.pseudonym_id == "pseudonym.txt"
    assert comparison.pseudonym.word_total == 22
    assert comparison.pseudonym.sentence_length == pytest.approx(5.5)
    assert comparison.pseudonym.marker("very") == 2
    assert comparison.pseudonym.marker("that") == 2
    assert comparison.official.marker("very") == 0
    assert comparison.pseudonym.punctuation_counts["quote"] == 2
    assert comparison.pseudonym.punctuation_counts["dash"] == 1
