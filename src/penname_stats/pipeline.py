from __future__ import annotations

import logging

from .calculator import num_words, para_mean, punct_freq, sent_mean, word_freq, word_mean
from .models import Comparison, Document, Metadata
from .tokenization import para_token, sent_token, word_token

LOGGER = logging.getLogger(__name__)


def analyze_document(doc: Document) -> Metadata:
    """Tokenize a document and compute its lexical statistics."""
    words = word_token(doc.text)
    sentences = sent_token(doc.text)
    paragraphs = para_token(doc.text)
    word_total = num_words(words)
    LOGGER.debug(
        "%s: %d words, %d sentences, %d paragraphs",
        doc.doc_id,
        word_total,
        len(sentences),
        len(paragraphs),
    )
    return Metadata(
        word_total=word_total,
        word_length=word_mean(words),
        sentence_length=sent_mean(word_total, sentences),
        paragraph_length=para_mean(word_total, paragraphs),
        marker_counts=word_freq(words),
        punctuation_counts=punct_freq(doc.text),
    )


def compare_documents(official: Document, pseudonym: Document) -> Comparison:
    """Analyze both documents and pair their statistics."""
    return Comparison(
        official_id=official.doc_id,
        pseudonym_id=pseudonym.doc_id,
        official=analyze_document(official),
        pseudonym=analyze_document(pseudonym),
    )
