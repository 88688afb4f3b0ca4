"""Supported currencies and their default metal prices.

Metal prices are per gram, in the currency itself. They are only starting
values for the form and are reset whenever the user switches currency.
"""

FALLBACK_CURRENCY = 'USD'

# Format: code -> (name, symbol, minor_unit)
SUPPORTED_CURRENCIES: dict[str, tuple[str, str, int]] = {
    'USD': ('US Dollar', '$', 2),
    'EUR': ('Euro', '€', 2),
    'GBP': ('British Pound', '£', 2),
    'PKR': ('Pakistani Rupee', 'Rs ', 2),
}

METAL_PRICE_DEFAULTS: dict[str, dict[str, float]] = {
    'USD': {'gold': 70, 'silver': 0.9},
    'EUR': {'gold': 64, 'silver': 0.83},
    'GBP': {'gold': 55, 'silver': 0.71},
    'PKR': {'gold': 19500, 'silver': 250},
}


def is_supported_currency(code, enabled: list[str] | None = None) -> bool:
    """Check if a currency code is offered (optionally within an enabled subset)."""
    if not isinstance(code, str):
        return False
    code = code.upper()
    if code not in SUPPORTED_CURRENCIES:
        return False
    return enabled is None or code in enabled


def resolve_currency(code, enabled: list[str] | None = None) -> str:
    """Return the code if it is offered, otherwise the USD fallback."""
    if is_supported_currency(code, enabled):
        return code.upper()
    return FALLBACK_CURRENCY


def get_metal_defaults(code: str) -> dict[str, float]:
    """Default gold/silver price per gram for a currency."""
    return dict(METAL_PRICE_DEFAULTS[resolve_currency(code)])


def get_currency_info(code: str) -> dict | None:
    """Get currency info by code."""
    code = code.upper()
    if code not in SUPPORTED_CURRENCIES:
        return None
    name, symbol, minor_unit = SUPPORTED_CURRENCIES[code]
    return {
        'code': code,
        'name': name,
        'symbol': symbol.strip(),
        'minor_unit': minor_unit,
        'metal_defaults': dict(METAL_PRICE_DEFAULTS[code]),
    }


def get_ordered_currencies(enabled: list[str] | None = None) -> list[dict]:
    """Return currency info for the selector, USD first then alphabetical."""
    codes = [FALLBACK_CURRENCY] + sorted(c for c in SUPPORTED_CURRENCIES if c != FALLBACK_CURRENCY)
    return [
        get_currency_info(code)
        for code in codes
        if enabled is None or code in enabled
    ]
