"""Tests for statelex utility modules."""


class TestGetLogger:
    """Tests for get_logger namespacing."""

    def test_adds_prefix(self) -> None:
        from statelex.utils.logger import get_logger

        assert get_logger("mymodule").name == "statelex.mymodule"

    def test_keeps_existing_prefix(self) -> None:
        from statelex.utils.logger import get_logger

        assert get_logger("statelex.lexer.core").name == "statelex.lexer.core"
        assert get_logger("statelex").name == "statelex"

    def test_similar_name_is_prefixed(self) -> None:
        from statelex.utils.logger import get_logger

        assert get_logger("statelexer").name == "statelex.statelexer"

    def test_package_logger_has_one_null_handler(self) -> None:
        import logging

        from statelex.utils.logger import get_logger

        get_logger("a")
        get_logger("b")
        root = logging.getLogger("statelex")
        null_handlers = [h for h in root.handlers if isinstance(h, logging.NullHandler)]
        assert len(null_handlers) == 1
        assert get_logger("a").propagate

    def test_records_still_reach_caplog(self, caplog) -> None:
        import logging

        from statelex.utils.logger import get_logger

        with caplog.at_level(logging.WARNING, logger="statelex"):
            get_logger("mymodule").warning("read failed")
        assert "read failed" in caplog.text
