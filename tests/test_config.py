"""Tests for ContextVar-based parse configuration.

Validates thread isolation, context manager behavior, and from_dict().
"""

from threading import Thread

import pytest

from ampdoc import (
    BlockRule,
    CustomBlock,
    Paragraph,
    ParseConfig,
    Parser,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)

_STRIKE = BlockRule.create("strike", r"~~(.+?)~~", lambda s: CustomBlock("strikeThrough"))


class TestParseConfigDataclass:
    """Test ParseConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = ParseConfig()
        assert config.block_rules == ()
        assert config.merge_adjacent_spans is False

    def test_immutability(self) -> None:
        config = ParseConfig()
        with pytest.raises(AttributeError):
            config.merge_adjacent_spans = True  # type: ignore[misc]


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def test_default_config(self) -> None:
        reset_parse_config()
        assert get_parse_config() == ParseConfig()

    def test_set_and_reset(self) -> None:
        set_parse_config(ParseConfig(merge_adjacent_spans=True))
        try:
            assert get_parse_config().merge_adjacent_spans is True
        finally:
            reset_parse_config()
        assert get_parse_config().merge_adjacent_spans is False

    def test_parser_reads_active_config(self) -> None:
        with parse_config_context(ParseConfig(block_rules=(_STRIKE,))):
            doc = Parser("~~x~~").parse()
        assert doc.blocks == (CustomBlock("strikeThrough"),)
        assert isinstance(Parser("~~x~~").parse().blocks[0], Paragraph)


class TestContextManager:
    def test_restores_previous(self) -> None:
        outer = ParseConfig(merge_adjacent_spans=True)
        with parse_config_context(outer):
            with parse_config_context(ParseConfig()):
                assert get_parse_config().merge_adjacent_spans is False
            assert get_parse_config() is outer
        assert get_parse_config().merge_adjacent_spans is False

    def test_restores_on_exception(self) -> None:
        with pytest.raises(RuntimeError):
            with parse_config_context(ParseConfig(merge_adjacent_spans=True)):
                raise RuntimeError("boom")
        assert get_parse_config().merge_adjacent_spans is False


class TestThreadIsolation:
    def test_config_not_shared_between_threads(self) -> None:
        seen: dict[str, bool] = {}

        def worker() -> None:
            seen["worker"] = get_parse_config().merge_adjacent_spans

        with parse_config_context(ParseConfig(merge_adjacent_spans=True)):
            thread = Thread(target=worker)
            thread.start()
            thread.join()
            assert get_parse_config().merge_adjacent_spans is True

        assert seen["worker"] is False


class TestParseConfigFromDict:
    """Test ParseConfig.from_dict() factory method."""

    def test_from_dict_basic(self) -> None:
        config = ParseConfig.from_dict({"merge_adjacent_spans": True})
        assert config.merge_adjacent_spans is True
        assert config.block_rules == ()

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = ParseConfig.from_dict({"merge_adjacent_spans": True, "unknown_key": "ignored"})
        assert config.merge_adjacent_spans is True

    def test_from_dict_empty(self) -> None:
        assert ParseConfig.from_dict({}) == ParseConfig()

    def test_from_dict_block_rules_list(self) -> None:
        config = ParseConfig.from_dict({"block_rules": [_STRIKE]})
        assert config.block_rules == (_STRIKE,)
