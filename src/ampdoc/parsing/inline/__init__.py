"""Inline tokenization for ampdoc.

Three stages, leaves first:
- classifier: which delimiter kind opens at the head of a slice
- extractor: one span plus the remainder (closed or unclosed)
- sequencer: repeated extraction into an ordered span list

"""

from ampdoc.parsing.inline.classifier import RawDelimiterKind, classify
from ampdoc.parsing.inline.extractor import Extraction, extract
from ampdoc.parsing.inline.sequencer import merge_spans, tokenize

__all__ = [
    "Extraction",
    "RawDelimiterKind",
    "classify",
    "extract",
    "merge_spans",
    "tokenize",
]
