"""Region, language and timezone tables used to pick a default currency."""

REGION_TO_CURRENCY = {
    'US': 'USD',
    'GB': 'GBP',
    'PK': 'PKR',
}

EURO_REGION_CODES = frozenset([
    'AT', 'BE', 'CY', 'EE', 'FI', 'FR', 'DE', 'GR', 'IE', 'IT',
    'LV', 'LT', 'LU', 'MT', 'NL', 'PT', 'SK', 'SI', 'ES', 'HR',
])

# Likely region for a bare language tag (CLDR likely subtags, trimmed)
LIKELY_REGIONS = {
    'ar': 'EG',
    'bn': 'BD',
    'de': 'DE',
    'el': 'GR',
    'en': 'US',
    'es': 'ES',
    'et': 'EE',
    'fa': 'IR',
    'fi': 'FI',
    'fr': 'FR',
    'ga': 'IE',
    'hi': 'IN',
    'hr': 'HR',
    'id': 'ID',
    'it': 'IT',
    'ja': 'JP',
    'lb': 'LU',
    'lt': 'LT',
    'lv': 'LV',
    'ms': 'MY',
    'mt': 'MT',
    'nl': 'NL',
    'pa': 'IN',
    'ps': 'AF',
    'pt': 'BR',
    'ru': 'RU',
    'sd': 'PK',
    'sk': 'SK',
    'sl': 'SI',
    'tr': 'TR',
    'ur': 'PK',
    'zh': 'CN',
}

# Exact timezone matches
TIMEZONE_TO_CURRENCY = {
    'Europe/London': 'GBP',
    'Asia/Karachi': 'PKR',
}

# Prefix matches, checked after exact matches
TIMEZONE_PREFIXES = [
    ('Europe/', 'EUR'),
    ('America/New_York', 'USD'),
    ('America/Chicago', 'USD'),
    ('America/Denver', 'USD'),
    ('America/Los_Angeles', 'USD'),
    ('America/Phoenix', 'USD'),
    ('America/Anchorage', 'USD'),
    ('America/Adak', 'USD'),
    ('Pacific/Honolulu', 'USD'),
]
