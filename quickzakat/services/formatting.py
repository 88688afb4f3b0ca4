"""Money display helpers."""
from quickzakat.data.currencies import SUPPORTED_CURRENCIES, resolve_currency


def format_money(amount: float, currency: str) -> str:
    """Format an amount with the currency symbol and minor units.

    format_money(1300, 'USD') -> '$1,300.00'
    """
    code = resolve_currency(currency)
    _, symbol, minor_unit = SUPPORTED_CURRENCIES[code]
    amount = amount or 0
    return f'{symbol}{amount:,.{minor_unit}f}'


def format_result(result: dict, currency: str) -> dict:
    """Formatted strings for the amounts in CalculationResult.to_dict()."""
    return {
        'total_assets': format_money(result['total_assets'], currency),
        'total_liabilities': format_money(result['total_liabilities'], currency),
        'net_amount': format_money(result['net_amount'], currency),
        'nisab_threshold': format_money(result['nisab']['threshold'], currency),
        'zakat_due': format_money(result['zakat_due'], currency),
    }
