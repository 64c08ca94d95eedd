from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv


BASE_DIR = Path(__file__).resolve().parents[3]

# Автоматично підтягуємо змінні з .env у корені проєкту.
# ENV змінні з оточення мають пріоритет (override=False за замовчуванням).
load_dotenv(BASE_DIR / ".env")


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


class Settings:
    def __init__(self) -> None:
        self.env: str = os.getenv("ENV", "dev").lower()
        self.is_prod: bool = self.env in {"prod", "production"}
        self.is_dev: bool = not self.is_prod

        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
        # Маскування номерів рахунків у логах; вимикати лише локально
        self.log_redact_account_numbers: bool = _env_flag("LOG_REDACT_ACCOUNT_NUMBERS", True)

        # Країни, які тимчасово не приймають виплати на банківський рахунок.
        # Формат: "NZ,AR", коди ISO 3166-1 alpha-2 через кому.
        _disabled_env = os.getenv("PAYOUT_DISABLED_COUNTRIES")
        if _disabled_env:
            self.disabled_countries: frozenset[str] = frozenset(
                code.strip().upper()
                for code in _disabled_env.split(",")
                if code.strip()
            )
        else:
            self.disabled_countries = frozenset()


settings = Settings()
