"""Configuration service for app settings."""
import logging
import os

from quickzakat.data.currencies import FALLBACK_CURRENCY, SUPPORTED_CURRENCIES

logger = logging.getLogger(__name__)


def get_enabled_currencies() -> list[str]:
    """Get the currency codes offered in the selector.

    Controlled by QUICKZAKAT_CURRENCIES (comma-separated, default: all).
    Unknown codes are ignored and USD is always kept as the fallback.
    """
    raw = os.environ.get('QUICKZAKAT_CURRENCIES', '')
    if not raw.strip():
        return list(SUPPORTED_CURRENCIES)

    enabled = []
    for code in raw.split(','):
        code = code.strip().upper()
        if not code:
            continue
        if code not in SUPPORTED_CURRENCIES:
            logger.warning(f"Ignoring unsupported currency in QUICKZAKAT_CURRENCIES: {code}")
            continue
        if code not in enabled:
            enabled.append(code)
    if FALLBACK_CURRENCY not in enabled:
        enabled.insert(0, FALLBACK_CURRENCY)
    return enabled


def get_default_timezone() -> str | None:
    """Timezone used when the client does not report one.

    Controlled by QUICKZAKAT_DEFAULT_TIMEZONE (default: unset).
    """
    return os.environ.get('QUICKZAKAT_DEFAULT_TIMEZONE') or None


def get_log_level() -> str:
    """Controlled by LOG_LEVEL env var (default: INFO)."""
    return os.environ.get('LOG_LEVEL', 'INFO').upper()


def get_app_config() -> dict:
    """Complete configuration status."""
    return {
        'enabled_currencies': get_enabled_currencies(),
        'default_timezone': get_default_timezone(),
        'log_level': get_log_level(),
    }
