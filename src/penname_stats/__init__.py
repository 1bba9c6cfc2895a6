"""
penname_stats package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .calculator import (
    MARKER_WORDS,
    num_words,
    para_mean,
    punct_freq,
    sent_mean,
    word_freq,
    word_mean,
)
from .config import StatsConfig, config_from_dict, config_from_yaml, load_config
from .documents import DocumentReadError, load_document
from .models import Comparison, Document, Metadata
from .pipeline import analyze_document, compare_documents
from .report import comparison_to_dict, format_table
from .tokenization import para_token, sent_token, word_token

__all__ = [
    "MARKER_WORDS",
    "Comparison",
    "Document",
    "DocumentReadError",
    "Metadata",
    "StatsConfig",
    "analyze_document",
    "compare_documents",
    "comparison_to_dict",
    "config_from_dict",
    "config_from_yaml",
    "format_table",
    "load_config",
    "load_document",
    "num_words",
    "para_mean",
    "para_token",
    "punct_freq",
    "sent_mean",
    "sent_token",
    "word_freq",
    "word_mean",
    "word_token",
]

__version__ = "0.1.0"
