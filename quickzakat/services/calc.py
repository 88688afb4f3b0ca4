"""Zakat calculation service."""
import math
import re
import sys
from dataclasses import dataclass

from quickzakat.constants import (
    ASSET,
    DEFAULT_NISAB_BASIS,
    LIABILITY,
    NISAB_GRAMS,
    STATUS_BELOW_NISAB,
    STATUS_ELIGIBLE,
    ZAKAT_RATE,
)

# Leading decimal literal, the part a browser's parseFloat() would read
_LEADING_NUMBER = re.compile(r'\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)')


def safe_number(value) -> float:
    """Coerce raw user input to a non-negative finite float.

    Text is read up to the first character that cannot continue a decimal
    literal, so "12abc" is 12 and "abc" is 0. Negative, infinite and
    unparseable values all become 0.0.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return 0.0
    else:
        match = _LEADING_NUMBER.match(str(value))
        if not match:
            return 0.0
        number = float(match.group(1))
    if not math.isfinite(number) or number <= 0:
        return 0.0
    return number


def _clamp(value: float) -> float:
    """Keep an intermediate sum finite: NaN becomes 0, overflow the largest float."""
    if math.isnan(value):
        return 0.0
    return min(value, sys.float_info.max)


def sum_amounts(amounts) -> float:
    return _clamp(sum((safe_number(amount) for amount in amounts), 0.0))


def normalize_basis(basis) -> str:
    """Return 'gold' or 'silver'; anything else falls back to gold."""
    if isinstance(basis, str) and basis.lower() in NISAB_GRAMS:
        return basis.lower()
    return DEFAULT_NISAB_BASIS


def nisab_threshold(basis: str, price_per_gram) -> float:
    """Monetary value of the nisab for the given metal price."""
    return _clamp(NISAB_GRAMS[normalize_basis(basis)] * safe_number(price_per_gram))


@dataclass(frozen=True)
class CalculationResult:
    total_assets: float
    total_liabilities: float
    net_amount: float
    nisab_basis: str
    price_per_gram: float
    nisab_threshold: float
    eligible: bool
    zakat_due: float

    @property
    def status(self) -> str:
        return STATUS_ELIGIBLE if self.eligible else STATUS_BELOW_NISAB

    def to_dict(self) -> dict:
        """Serialise for templates and JSON, amounts rounded to 2 decimals."""
        return {
            'total_assets': round(self.total_assets, 2),
            'total_liabilities': round(self.total_liabilities, 2),
            'net_amount': round(self.net_amount, 2),
            'nisab': {
                'basis_used': self.nisab_basis,
                'grams': NISAB_GRAMS[self.nisab_basis],
                'price_per_gram': round(self.price_per_gram, 4),
                'threshold': round(self.nisab_threshold, 2),
            },
            'eligible': self.eligible,
            'status': self.status,
            'zakat_due': round(self.zakat_due, 2),
            'zakat_rate': ZAKAT_RATE,
        }


def calculate_zakat(
    assets,
    liabilities,
    nisab_basis: str = DEFAULT_NISAB_BASIS,
    gold_price=0,
    silver_price=0,
) -> CalculationResult:
    """Calculate totals, nisab and zakat due from raw amounts.

    Args:
        assets: Iterable of raw asset amounts (text or numbers)
        liabilities: Iterable of raw liability amounts
        nisab_basis: "gold" or "silver" - which metal sets the threshold
        gold_price: Gold price per gram in the working currency
        silver_price: Silver price per gram in the working currency

    Returns:
        CalculationResult, computed from scratch.
    """
    total_assets = sum_amounts(assets)
    total_liabilities = sum_amounts(liabilities)
    net = total_assets - total_liabilities
    if math.isnan(net) or net < 0:
        net = 0.0

    basis = normalize_basis(nisab_basis)
    price = safe_number(gold_price if basis == 'gold' else silver_price)
    threshold = nisab_threshold(basis, price)

    # A blank price gives a zero threshold, which must never mean "eligible"
    eligible = threshold > 0 and net >= threshold
    zakat = net * ZAKAT_RATE if eligible else 0.0

    return CalculationResult(
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        net_amount=net,
        nisab_basis=basis,
        price_per_gram=price,
        nisab_threshold=threshold,
        eligible=eligible,
        zakat_due=zakat,
    )


def calculate_items(items, nisab_basis=DEFAULT_NISAB_BASIS, gold_price=0, silver_price=0) -> CalculationResult:
    """Calculate from a sequence of line items (anything with .kind and .amount)."""
    items = list(items)
    return calculate_zakat(
        [item.amount for item in items if item.kind == ASSET],
        [item.amount for item in items if item.kind == LIABILITY],
        nisab_basis=nisab_basis,
        gold_price=gold_price,
        silver_price=silver_price,
    )
