"""Exception classes for ampdoc.

Provides standardized exceptions for error handling throughout ampdoc.
The inline tokenizer never raises; these cover block parsing and
configuration.
"""

from __future__ import annotations


class AmpdocError(Exception):
    """Base exception for all ampdoc errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(AmpdocError):
    """Error during block parsing.

    Raised when a block parser is handed text its pattern does not match,
    or when no block rule matches the remaining input.
    """

    def __init__(
        self,
        message: str,
        block_type: str | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional context.

        Args:
            message: Error description
            block_type: Block type being parsed (e.g., "heading")
            source_file: Path to source file (optional)
        """
        self.message = message
        self.block_type = block_type
        self.source_file = source_file

        prefix = ""
        if source_file:
            prefix = f"{source_file}: "
        if block_type:
            prefix += f"[{block_type}] "

        super().__init__(f"{prefix}{message}")


class BlockRuleError(AmpdocError):
    """Error when registering a custom block rule.

    Raised when a rule's pattern or parser is unusable.
    """

    def __init__(self, rule_name: str, message: str) -> None:
        """Initialize block rule error.

        Args:
            rule_name: Name of the offending rule
            message: Description of the error
        """
        self.rule_name = rule_name
        super().__init__(f"Block rule '{rule_name}': {message}")
