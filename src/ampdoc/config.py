"""ContextVar-based parse configuration for ampdoc.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per Amp instance, read by the block segmenter.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # In Amp class
    amp = Amp().extend([strike_rule])
    doc = amp.parse("~~gone~~")  # Sets config internally via ContextVar

    # Direct parser usage (advanced)
    from ampdoc.config import set_parse_config, reset_parse_config, ParseConfig

    set_parse_config(ParseConfig(merge_adjacent_spans=True))
    try:
        doc = Parser(source).parse()
    finally:
        reset_parse_config()

    # Or use the context manager
    with parse_config_context(ParseConfig(merge_adjacent_spans=True)):
        doc = Parser(source).parse()

"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from ampdoc.parsing.blocks import BlockRule


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        block_rules: Custom block rules, tried before the built-in rules
        merge_adjacent_spans: Merge consecutive same-style spans in block
            bodies. Off by default so the tokenizer's segmentation is kept.

    """

    block_rules: tuple[BlockRule, ...] = ()
    merge_adjacent_spans: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored. A list of block rules is converted to a tuple.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "merge_adjacent_spans": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.merge_adjacent_spans
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "block_rules" in filtered:
            filtered["block_rules"] = tuple(filtered["block_rules"])
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "ampdoc_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.
    """
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(merge_adjacent_spans=True)):
        ...     doc = Parser("**a _b").parse()
        >>> # Automatically reset to previous config

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
