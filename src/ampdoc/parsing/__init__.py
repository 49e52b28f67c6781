"""Parsing stages for ampdoc.

Modules:
- frontmatter: header/body split and key-value extraction
- blocks: block segmentation over body text
- inline: span tokenization within one block's text
- charsets: reserved marker characters

"""

from ampdoc.parsing.blocks import BUILTIN_BLOCK_RULES, BlockRule, parse_blocks
from ampdoc.parsing.frontmatter import SplitResult, parse_frontmatter, split
from ampdoc.parsing.inline import (
    Extraction,
    RawDelimiterKind,
    classify,
    extract,
    merge_spans,
    tokenize,
)

__all__ = [
    "BUILTIN_BLOCK_RULES",
    "BlockRule",
    "Extraction",
    "RawDelimiterKind",
    "SplitResult",
    "classify",
    "extract",
    "merge_spans",
    "parse_blocks",
    "parse_frontmatter",
    "split",
    "tokenize",
]
