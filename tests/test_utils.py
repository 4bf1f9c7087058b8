"""Tests for tagwright utility modules."""

import logging


class TestLogger:
    """Tests for logger module."""

    def test_get_logger(self) -> None:
        from tagwright.utils.logger import get_logger

        logger = get_logger("mymodule")
        assert logger.name == "tagwright.mymodule"

    def test_logger_with_tagwright_prefix(self) -> None:
        from tagwright.utils.logger import get_logger

        logger = get_logger("tagwright.panel")
        assert logger.name == "tagwright.panel"

    def test_logger_name_starting_with_tagwright_not_submodule(self) -> None:
        """Names starting with 'tagwright' but not submodules get the prefix."""
        from tagwright.utils.logger import get_logger

        logger = get_logger("tagwright_other")
        assert logger.name == "tagwright.tagwright_other"

    def test_logger_exact_tagwright_name(self) -> None:
        from tagwright.utils.logger import get_logger

        logger = get_logger("tagwright")
        assert logger.name == "tagwright"

    def test_returns_stdlib_logger(self) -> None:
        from tagwright.utils.logger import get_logger

        assert get_logger("x") is logging.getLogger("tagwright.x")

    def test_format_logs_at_debug(self, caplog) -> None:
        from tagwright import format

        with caplog.at_level(logging.DEBUG, logger="tagwright"):
            format("<p>x</p>")
        assert "formatted 8 chars into 3 tokens" in caplog.text

    def test_navigator_logs_at_debug(self, caplog) -> None:
        from tagwright import Navigator

        with caplog.at_level(logging.DEBUG, logger="tagwright"):
            Navigator("aXa").update(query="x")
        assert any(r.name == "tagwright.navigator" for r in caplog.records)


class TestUtilsPublicAPI:
    """Tests for the public API of the utils package."""

    def test_all_exports_importable(self) -> None:
        import tagwright.utils as utils

        for name in utils.__all__:
            assert hasattr(utils, name), f"{name} in __all__ but not importable"

    def test_expected_exports(self) -> None:
        from tagwright.utils import get_logger

        assert callable(get_logger)
