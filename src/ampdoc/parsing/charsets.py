"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from ampdoc.parsing.charsets import MARKER_CHARS

    if char in MARKER_CHARS:  # O(1) lookup
        ...
"""

# Reserved inline marker characters. There is no escape mechanism.
ASTERISK = "*"
UNDERSCORE = "_"
BACKTICK = "`"

MARKER_CHARS: frozenset[str] = frozenset((ASTERISK, UNDERSCORE, BACKTICK))

# Regex character class body matching any single marker character
MARKER_CLASS = "".join(sorted(MARKER_CHARS))

# Quote characters stripped from frontmatter values
QUOTE_CHARS: frozenset[str] = frozenset("\"'")

