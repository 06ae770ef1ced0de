"""Unit tests for i18nkit.logging.errlog module."""

import pytest

from i18nkit import Translator
from i18nkit.logging import DIAGNOSTIC_EVENT, make_errlog


@pytest.mark.unit
class TestMakeErrlog:
    """Test suite for make_errlog."""

    def test_formats_message(self, mock_logger):
        """Arguments are %-formatted into the message."""
        errlog = make_errlog(mock_logger)
        errlog("Language %s does not exist", "xx-xx")
        mock_logger.warning.assert_called_once_with(
            DIAGNOSTIC_EVENT, message="Language xx-xx does not exist"
        )

    def test_custom_level(self, mock_logger):
        """The log level is configurable."""
        make_errlog(mock_logger, level="debug")("plain")
        mock_logger.debug.assert_called_once_with(DIAGNOSTIC_EVENT, message="plain")

    def test_bad_format_does_not_raise(self, mock_logger):
        """A mismatched format string is logged instead of raising."""
        make_errlog(mock_logger)("%s %s", "only-one")
        message = mock_logger.warning.call_args.kwargs["message"]
        assert "only-one" in message

    def test_default_logger(self):
        """Without a logger the module logger is used."""
        make_errlog()("Language %s does not exist", "xx")

    def test_as_translator_sink(self, mock_logger):
        """The sink receives translator diagnostics."""
        translator = Translator()
        translator.set_log(make_errlog(mock_logger))
        assert translator.tfunc("en-us")("title").render() == "title"
        assert mock_logger.warning.call_count == 2
