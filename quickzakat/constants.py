"""Shared constants for zakat calculation."""

# Zakat rate (2.5%)
ZAKAT_RATE = 0.025

# Nisab thresholds (minimum wealth for zakat obligation)
NISAB_GOLD_GRAMS = 87.48
NISAB_SILVER_GRAMS = 612.36

NISAB_GRAMS = {
    'gold': NISAB_GOLD_GRAMS,
    'silver': NISAB_SILVER_GRAMS,
}
NISAB_BASES = tuple(NISAB_GRAMS)
DEFAULT_NISAB_BASIS = 'gold'

# Line item kinds
ASSET = 'asset'
LIABILITY = 'liability'
ITEM_KINDS = (ASSET, LIABILITY)

# Rows shown on first load
DEFAULT_ASSET_LABELS = ['Cash in hand', 'Bank balance', 'Gold & silver value', 'Investments']
DEFAULT_LIABILITY_LABELS = ['Debts due now']

STATUS_ELIGIBLE = 'Eligible for Zakat'
STATUS_BELOW_NISAB = 'Below Nisab'
