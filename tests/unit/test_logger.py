import logging

import pytest

from dealscreen.logging.logger import Log


class TestLog:
    def test_renders_context_as_key_value_pairs(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="dealscreen"):
            Log.info("Stage passed", stage="signals", groups=3)
        assert "Stage passed | stage='signals' groups=3" in caplog.text

    def test_plain_message_without_context(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="dealscreen"):
            Log.warning("Document rejected")
        assert caplog.records[-1].getMessage() == "Document rejected"
        assert caplog.records[-1].levelno == logging.WARNING

    def test_debug_hidden_at_info_level(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="dealscreen"):
            Log.debug("raw prompt")
        assert "raw prompt" not in caplog.text

    def test_configure_sets_level(self) -> None:
        Log.configure("warning")
        assert logging.getLogger("dealscreen").level == logging.WARNING
        Log.configure("INFO")
