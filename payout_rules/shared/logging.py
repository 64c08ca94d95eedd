"""Logging configuration and utilities."""
from __future__ import annotations

import logging

from payout_rules.domain.accounts.masking import redact_account_numbers
from payout_rules.infra.config.settings import settings


class _LoggingState:
    """
    Module-level logging state container.
    """

    configured: bool = False

    def reset(self) -> None:
        """Reset state for testing."""
        self.configured = False

    def is_configured(self) -> bool:
        """Check if logging is configured."""
        return self.configured


_state = _LoggingState()

PACKAGE_LOGGER_NAME = "payout_rules"

# Без налаштувань хоста бібліотека нічого не виводить
logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())


class AccountNumberRedactionFilter(logging.Filter):
    """
    Фільтр, який вирізає номери банківських рахунків з тексту логів.

    IBAN-подібні рядки та довгі послідовності цифр замінюються на
    маску з останніми чотирма символами. Якщо щось іде не так,
    лог не змінюється.
    """

    def __init__(self, enabled: bool = True) -> None:
        super().__init__()
        self.enabled = enabled

    def filter(self, record: logging.LogRecord) -> bool:
        if not self.enabled:
            return True
        try:
            msg = record.getMessage()
            record.msg = redact_account_numbers(str(msg))
            record.args = ()
        except (TypeError, ValueError):
            # У разі помилки форматування не блокуємо лог
            pass
        return True

    def __repr__(self) -> str:
        return f"AccountNumberRedactionFilter(enabled={self.enabled})"


class ColorFormatter(logging.Formatter):
    """
    Додає кольори до рівнів логування для виводу в термінал.
    Працює як звичайний Formatter, але підміняє record.levelname.
    """

    RESET = "\033[0m"
    COLORS = {
        "DEBUG": "\033[36m",  # cyan
        "INFO": "\033[32m",  # green
        "WARNING": "\033[33m",  # yellow
        "ERROR": "\033[31m",  # red
        "CRITICAL": "\033[35m",  # magenta
    }

    def format(self, record: logging.LogRecord) -> str:
        original_levelname = record.levelname
        color = self.COLORS.get(original_levelname, "")
        if color:
            record.levelname = f"{color}{original_levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original_levelname


def setup_logging(default_level: int = logging.INFO) -> None:
    """
    Налаштовує єдиний root-логгер для застосунку, що використовує пакет.
    Викликається явно і один раз; імпорт пакета root-логгер не змінює.
    """
    root_logger = logging.getLogger()
    # Якщо хендлерів немає (pytest очистив), переналаштовуємо.
    if _state.configured and root_logger.handlers:
        return

    level = getattr(logging, settings.log_level, default_level)
    if not isinstance(level, int):
        level = default_level
    # Уникаємо DEBUG-рівня для прод-оточення
    if settings.is_prod:
        level = max(level, logging.INFO)

    root_logger.setLevel(level)

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.addFilter(AccountNumberRedactionFilter(settings.log_redact_account_numbers))
    formatter = ColorFormatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    )
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    _state.configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the given name.

    Handlers are not touched here; the host application configures them,
    or calls setup_logging() explicitly.
    """
    return logging.getLogger(name)
