"""Tests for orgtok utility modules."""

import logging

import pytest


class TestGetLogger:
    def test_prefixes_name(self) -> None:
        from orgtok.utils.logger import get_logger

        assert get_logger("mymodule").name == "orgtok.mymodule"

    def test_keeps_package_names(self) -> None:
        from orgtok.utils import get_logger

        assert get_logger("orgtok").name == "orgtok"
        assert get_logger("orgtok.lexer.core").name == "orgtok.lexer.core"

    def test_lookalike_prefix_is_nested(self) -> None:
        from orgtok.utils.logger import get_logger

        assert get_logger("orgtokens").name == "orgtok.orgtokens"

    def test_root_has_null_handler(self) -> None:
        import orgtok.utils.logger  # noqa: F401

        handlers = logging.getLogger("orgtok").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)

    def test_records_still_propagate(self, caplog: pytest.LogCaptureFixture) -> None:
        from orgtok.utils.logger import get_logger

        with caplog.at_level(logging.DEBUG, logger="orgtok"):
            get_logger("scanner").debug("hello")
        assert [r.name for r in caplog.records] == ["orgtok.scanner"]
