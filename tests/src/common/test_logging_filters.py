import importlib
import io
import logging
import sys

import pytest

from payout_rules.shared.logging import (
    PACKAGE_LOGGER_NAME,
    AccountNumberRedactionFilter,
    ColorFormatter,
    get_logger,
    setup_logging,
)


@pytest.fixture
def root_logger_state():
    """Restore root handlers and level after a test changes them."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_redaction_filter_masks_account_numbers():
    filt = AccountNumberRedactionFilter()
    record = logging.LogRecord(
        "test", logging.INFO, "", 0, "saving %s for %s", args=("DE89370400440532013000", "US"), exc_info=None
    )
    assert filt.filter(record) is True
    assert record.msg == "saving DE******3000 for US"
    assert record.args == ()


def test_redaction_filter_disabled_keeps_message():
    filt = AccountNumberRedactionFilter(enabled=False)
    record = logging.LogRecord("test", logging.INFO, "", 0, "account 000123456789", args=(), exc_info=None)
    assert filt.filter(record) is True
    assert record.msg == "account 000123456789"


def test_color_formatter_preserves_level():
    fmt = ColorFormatter("%(levelname)s %(message)s")
    record = logging.LogRecord("test", logging.WARNING, "", 0, "msg", args=(), exc_info=None)
    formatted = fmt.format(record)
    assert "WARNING" in formatted
    assert record.levelname == "WARNING"


def test_setup_logging_idempotent(root_logger_state):
    setup_logging()
    handlers = list(root_logger_state.handlers)
    setup_logging()  # second call should not override handlers
    assert root_logger_state.handlers == handlers
    assert any(
        isinstance(f, AccountNumberRedactionFilter)
        for handler in root_logger_state.handlers
        for f in handler.filters
    )


def test_get_logger_leaves_handlers_to_the_host():
    logger = get_logger("payout_rules.tests.get_logger")
    assert logger.handlers == []
    assert logger.propagate is True


def test_package_logger_has_null_handler():
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    assert any(isinstance(h, logging.NullHandler) for h in package_logger.handlers)


def test_import_leaves_host_logging_untouched(monkeypatch, root_logger_state):
    host_handler = logging.StreamHandler(io.StringIO())
    root_logger_state.addHandler(host_handler)
    root_logger_state.setLevel(logging.DEBUG)
    handlers_before = list(root_logger_state.handlers)

    # Свіжий імпорт пакета; старі модулі повертаються після тесту
    for name in [n for n in sys.modules if n == "payout_rules" or n.startswith("payout_rules.")]:
        monkeypatch.delitem(sys.modules, name)
    importlib.import_module("payout_rules.domain.accounts.core")

    assert root_logger_state.handlers == handlers_before
    assert host_handler in root_logger_state.handlers
    assert root_logger_state.level == logging.DEBUG
